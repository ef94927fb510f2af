"""Request authentication guards.

``get_current_identity`` resolves the caller for every endpoint that cares
about who is asking; ``require_admin`` additionally insists on the Admin role.
The two credential headers are declared as security schemes so they show up
in the OpenAPI document.
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader

from blog_api.application.services import AuthService, parse_credential
from blog_api.domain.entities import Identity
from blog_api.domain.exceptions import AuthenticationError
from blog_api.infrastructure.dependencies import get_auth_service

API_KEY_HEADER = "X-API-Key"

_bearer_header = APIKeyHeader(
    name="Authorization",
    scheme_name="Bearer",
    description="Bearer token from /auth/login: `Authorization: Bearer <token>`",
    auto_error=False,
)
_api_key_header = APIKeyHeader(
    name=API_KEY_HEADER,
    scheme_name="ApiKey",
    description="Static API key: `X-API-Key: <key>`",
    auto_error=False,
)


def _unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_identity(
    request: Request,
    authorization: str | None = Security(_bearer_header),
    api_key: str | None = Security(_api_key_header),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    """Resolve the caller. No credential means anonymous; a bad one is a 401."""
    credential = parse_credential(authorization, api_key)
    try:
        identity = auth_service.authenticate(credential)
    except AuthenticationError:
        raise _unauthorized("Invalid or expired credentials")
    request.state.identity = identity
    return identity


async def require_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """Only let authenticated admins through."""
    if not identity.is_admin:
        raise _unauthorized()
    return identity
