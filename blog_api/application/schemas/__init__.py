from .post import PostCreate, PostUpdate, PostResponse
from .auth import LoginRequest, LoginResponse, LoginUser, MeResponse, MeUser
from .uploads import UploadResponse

__all__ = [
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "LoginRequest",
    "LoginResponse",
    "LoginUser",
    "MeResponse",
    "MeUser",
    "UploadResponse",
]
