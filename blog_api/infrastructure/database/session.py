"""Async engine and per-request session for the posts database."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog_api.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite:///": "sqlite+aiosqlite:///",
    "postgresql://": "postgresql+asyncpg://",
    # Managed Postgres providers still hand out the legacy scheme
    "postgres://": "postgresql+asyncpg://",
}


def to_async_url(url: str) -> str:
    """Pick the async driver for a plain database URL; explicit drivers pass through."""
    for plain, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(plain):
            return async_prefix + url[len(plain):]
    return url


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    async_url = to_async_url(database_url)
    if async_url.startswith("sqlite"):
        return create_async_engine(async_url, echo=echo)
    # Server connections can be dropped by the provider between requests
    return create_async_engine(async_url, echo=echo, pool_pre_ping=True)


_settings = get_settings()
engine = build_engine(
    _settings.database_url,
    echo=(_settings.log_level_sql.upper() == "DEBUG"),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request: committed when the handler returns, rolled back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
