"""Pydantic DTOs for login and identity introspection."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    """Admin credentials. Presence is checked by the login use case, after throttling."""

    username: str | None = None
    password: str | None = None


class LoginUser(_CamelModel):
    username: str
    role: str


class LoginResponse(_CamelModel):
    """Signed bearer token plus the identity it represents."""

    token: str
    token_type: str = "Bearer"
    expires_at: datetime
    user: LoginUser


class MeUser(_CamelModel):
    username: str
    roles: list[str]


class MeResponse(_CamelModel):
    authenticated: bool
    user: MeUser
