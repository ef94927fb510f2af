from .post import Post
from .stored_object import StoredObject
from .identity import Credential, CredentialKind, Identity, IssuedToken, Role, TokenClaims

__all__ = [
    "Post",
    "StoredObject",
    "Credential",
    "CredentialKind",
    "Identity",
    "IssuedToken",
    "Role",
    "TokenClaims",
]
