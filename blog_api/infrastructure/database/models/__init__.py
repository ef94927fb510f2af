from .post import PostModel

__all__ = [
    "PostModel",
]
