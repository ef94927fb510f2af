"""FastAPI dependency injection — wires infrastructure to application layer.

Every provider receives the Settings object through ``Depends(get_settings)``
so tests can swap configuration with ``app.dependency_overrides``.
"""

from collections.abc import AsyncGenerator
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import ObjectStorage, TokenService
from blog_api.application.services import AuthService, PostService, UploadService
from blog_api.config import Settings, get_settings
from blog_api.infrastructure.database.repositories import SQLAlchemyPostRepository
from blog_api.infrastructure.database.session import get_db_session
from blog_api.infrastructure.security import JwtTokenService
from blog_api.infrastructure.storage.s3_object_storage import S3ObjectStorage


async def get_post_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PostService, None]:
    """Provides a PostService instance with its repository wired up."""
    repository = SQLAlchemyPostRepository(session)
    yield PostService(repository)


def get_token_service(
    settings: Settings = Depends(get_settings),
) -> TokenService | None:
    """Provides the JWT token service, or None when no signing secret is set."""
    if not settings.jwt_secret:
        return None
    return JwtTokenService(
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        lifetime=timedelta(minutes=settings.jwt_expire_minutes),
    )


def get_auth_service(
    settings: Settings = Depends(get_settings),
    token_service: TokenService | None = Depends(get_token_service),
) -> AuthService:
    """Provides an AuthService bound to the configured admin identity and API key."""
    return AuthService(
        admin_username=settings.admin_username,
        admin_password=settings.admin_password,
        api_key=settings.api_key,
        token_service=token_service,
    )


@lru_cache
def _build_s3_storage(
    bucket: str,
    endpoint: str,
    access_key: str,
    secret_key: str,
    region: str,
    cdn_base_url: str,
    use_http: bool,
) -> S3ObjectStorage:
    # One boto3 client per storage configuration
    return S3ObjectStorage(
        bucket=bucket,
        endpoint=endpoint,
        access_key=access_key,
        secret_key=secret_key,
        region=region,
        cdn_base_url=cdn_base_url,
        use_http=use_http,
    )


def get_object_storage(
    settings: Settings = Depends(get_settings),
) -> ObjectStorage:
    """Provides the S3-compatible object storage adapter."""
    return _build_s3_storage(
        settings.storage_bucket,
        settings.storage_endpoint,
        settings.storage_access_key,
        settings.storage_secret_key,
        settings.storage_region,
        settings.storage_cdn_base_url,
        settings.storage_use_http,
    )


def get_upload_service(
    settings: Settings = Depends(get_settings),
    storage: ObjectStorage = Depends(get_object_storage),
) -> UploadService:
    """Provides an UploadService enforcing the configured allow-list and size limit."""
    return UploadService(
        storage=storage,
        allowed_content_types=settings.upload_allowed_content_types,
        max_size_bytes=settings.max_upload_size_bytes,
        default_prefix=settings.upload_default_prefix,
    )
