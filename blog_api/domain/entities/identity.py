"""Caller identity and presented credentials."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    ADMIN = "Admin"


class CredentialKind(str, Enum):
    """Which authentication scheme a request selected."""

    NONE = "none"
    API_KEY = "api_key"
    BEARER = "bearer"


@dataclass(frozen=True)
class Credential:
    """A credential pulled out of the request headers, tagged by scheme."""

    kind: CredentialKind
    value: str = ""

    @classmethod
    def none(cls) -> "Credential":
        return cls(CredentialKind.NONE)

    @classmethod
    def api_key(cls, value: str) -> "Credential":
        return cls(CredentialKind.API_KEY, value)

    @classmethod
    def bearer(cls, token: str) -> "Credential":
        return cls(CredentialKind.BEARER, token)


@dataclass(frozen=True)
class Identity:
    """The resolved caller: an authenticated admin or an anonymous visitor."""

    scheme: CredentialKind
    username: str | None = None
    roles: tuple[Role, ...] = ()

    @classmethod
    def anonymous(cls) -> "Identity":
        return cls(scheme=CredentialKind.NONE)

    @property
    def is_authenticated(self) -> bool:
        return self.scheme is not CredentialKind.NONE

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN in self.roles


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a bearer token."""

    subject: str
    role: str
    issuer: str
    audience: str
    issued_at: int
    expires_at: int


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed bearer token returned by the login flow."""

    token: str
    token_type: str
    username: str
    role: Role
    expires_at: datetime
