"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from blog_api.presentation.api.endpoints.auth import router as auth_router
from blog_api.presentation.api.endpoints.health import router as health_router
from blog_api.presentation.api.endpoints.posts import router as posts_router
from blog_api.presentation.api.endpoints.uploads import router as uploads_router

router = APIRouter()
router.include_router(health_router)
router.include_router(posts_router)
router.include_router(auth_router)
router.include_router(uploads_router)
