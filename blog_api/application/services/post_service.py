"""Application service (use case) for Post operations."""

import logging
from datetime import datetime, timezone

from blog_api.application.interfaces import PostRepository
from blog_api.application.schemas import PostCreate, PostUpdate
from blog_api.domain.entities import Identity, Post
from blog_api.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class PostService:
    """Orchestrates post lifecycle and visibility. Depends on the repository port (DI).

    Drafts are only visible to admins. An anonymous caller asking for a draft
    gets exactly the same EntityNotFoundError as one asking for a missing id.
    """

    def __init__(self, repository: PostRepository):
        self._repository = repository

    async def get_post(self, post_id: int, identity: Identity) -> Post:
        post = await self._repository.get_by_id(post_id)
        if post is None or not post.is_visible_to(identity.is_admin):
            raise EntityNotFoundError("Post", post_id)
        return post

    async def list_posts(self, identity: Identity) -> list[Post]:
        if identity.is_admin:
            return await self._repository.list_all()
        return await self._repository.list_published()

    async def create_post(self, data: PostCreate) -> Post:
        now = datetime.now(timezone.utc)
        post = Post(
            title=data.title,
            content=data.content,
            is_draft=data.is_draft,
            created_at=now,
            updated_at=now,
        )
        created = await self._repository.create(post)
        logger.info("Created post %s (draft=%s)", created.id, created.is_draft)
        return created

    async def update_post(self, post_id: int, data: PostUpdate) -> Post:
        if data.id != post_id:
            raise ValidationError(
                f"Post id in body ({data.id}) does not match the URL ({post_id})"
            )
        post = await self._repository.get_by_id(post_id)
        if post is None:
            raise EntityNotFoundError("Post", post_id)
        post.revise(title=data.title, content=data.content, is_draft=data.is_draft)
        return await self._repository.update(post)

    async def delete_post(self, post_id: int) -> bool:
        exists = await self._repository.get_by_id(post_id)
        if exists is None:
            raise EntityNotFoundError("Post", post_id)
        if not await self._repository.delete(post_id):
            # Removed by a concurrent request after the existence check
            raise EntityNotFoundError("Post", post_id)
        return True
