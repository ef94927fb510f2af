"""Health check endpoint — no database or storage round-trip."""

from fastapi import APIRouter, Depends

from blog_api.config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    """Reports the running version and which auth schemes are configured."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "auth": {
            "apiKey": bool(settings.api_key),
            "bearer": bool(settings.jwt_secret),
        },
    }
