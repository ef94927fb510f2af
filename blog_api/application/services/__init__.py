from .post_service import PostService
from .auth_service import AuthService, parse_credential
from .upload_service import UploadService, build_object_key

__all__ = [
    "PostService",
    "AuthService",
    "parse_credential",
    "UploadService",
    "build_object_key",
]
