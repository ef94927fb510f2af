"""Shared fixtures: in-memory fakes for the ports and a wired-up HTTP client."""

from dataclasses import replace

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.application.interfaces import ObjectStorage, PostRepository
from blog_api.application.services import PostService
from blog_api.config import Settings, get_settings
from blog_api.domain.entities import Post
from blog_api.domain.exceptions import EntityNotFoundError, StorageError
from blog_api.infrastructure.dependencies import get_object_storage, get_post_service
from blog_api.infrastructure.security import limiter
from blog_api.main import app

TEST_API_KEY = "test-api-key-0123456789"
TEST_JWT_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"
ADMIN_USERNAME = "editor"
ADMIN_PASSWORD = "s3cret-pass"


# ── Fakes ────────────────────────────────────────────────────────────

class FakePostRepository(PostRepository):
    """In-memory fake repository; hands out copies like a real database would."""

    def __init__(self):
        self._posts: dict[int, Post] = {}
        self._next_id = 1

    async def get_by_id(self, post_id: int) -> Post | None:
        post = self._posts.get(post_id)
        return replace(post) if post else None

    async def list_all(self) -> list[Post]:
        posts = sorted(self._posts.values(), key=lambda p: (p.created_at, p.id), reverse=True)
        return [replace(p) for p in posts]

    async def list_published(self) -> list[Post]:
        published = [p for p in self._posts.values() if not p.is_draft]
        published.sort(key=lambda p: (p.published_at, p.id), reverse=True)
        return [replace(p) for p in published]

    async def create(self, post: Post) -> Post:
        post.id = self._next_id
        self._next_id += 1
        self._posts[post.id] = replace(post)
        return post

    async def update(self, post: Post) -> Post:
        if post.id not in self._posts:
            raise EntityNotFoundError("Post", post.id)
        self._posts[post.id] = replace(post)
        return post

    async def delete(self, post_id: int) -> bool:
        if post_id in self._posts:
            del self._posts[post_id]
            return True
        return False


class FakeObjectStorage(ObjectStorage):
    """Records every call instead of talking to a bucket."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.uploads: list[dict] = []
        self.deleted: list[str] = []

    async def upload(
        self, content: bytes, key: str, content_type: str, public: bool = True
    ) -> str:
        if self.fail:
            raise StorageError("upload", key, "connection refused")
        self.uploads.append(
            {"key": key, "size": len(content), "content_type": content_type, "public": public}
        )
        return self.get_url(key)

    async def delete(self, key: str) -> None:
        if self.fail:
            raise StorageError("delete", key, "connection refused")
        self.deleted.append(key)

    def get_url(self, key: str) -> str:
        return f"https://cdn.test/{key}"


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        api_key=TEST_API_KEY,
        jwt_secret=TEST_JWT_SECRET,
        jwt_issuer="BlogApiTest",
        jwt_audience="BlogApiTestAudience",
        storage_bucket="test-bucket",
        max_upload_size_mb=1,
    )


@pytest.fixture
def post_repository() -> FakePostRepository:
    return FakePostRepository()


@pytest.fixture
def object_storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
async def client(settings, post_repository, object_storage):
    """HTTP client against the real app, with the database and bucket swapped for fakes."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_post_service] = lambda: PostService(post_repository)
    app.dependency_overrides[get_object_storage] = lambda: object_storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def api_key_headers() -> dict[str, str]:
    return {"X-API-Key": TEST_API_KEY}
