from .post_repository import PostRepository
from .token_service import TokenService
from .object_storage import ObjectStorage

__all__ = [
    "PostRepository",
    "TokenService",
    "ObjectStorage",
]
