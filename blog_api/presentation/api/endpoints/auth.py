"""Login and identity endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from blog_api.application.schemas import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    MeResponse,
    MeUser,
)
from blog_api.application.services import AuthService
from blog_api.domain.entities import Identity
from blog_api.domain.exceptions import (
    ConfigurationError,
    InvalidCredentialsError,
    ValidationError,
)
from blog_api.infrastructure.dependencies import get_auth_service
from blog_api.infrastructure.security import enforce_login_rate_limit
from blog_api.presentation.api.security import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    dependencies=[Depends(enforce_login_rate_limit)],
)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange the admin username/password for a short-lived bearer token."""
    try:
        issued = service.login(data.username, data.password)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ConfigurationError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error",
        )

    return LoginResponse(
        token=issued.token,
        token_type=issued.token_type,
        expires_at=issued.expires_at,
        user=LoginUser(username=issued.username, role=issued.role.value),
    )


@router.get("/me", response_model=MeResponse)
async def me(identity: Identity = Depends(require_admin)) -> MeResponse:
    """Describe the authenticated caller."""
    return MeResponse(
        authenticated=identity.is_authenticated,
        user=MeUser(
            username=identity.username or "unknown",
            roles=[role.value for role in identity.roles],
        ),
    )
