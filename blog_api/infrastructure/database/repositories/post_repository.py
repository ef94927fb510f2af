"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from blog_api.application.interfaces import PostRepository
from blog_api.domain.entities import Post
from blog_api.domain.exceptions import EntityNotFoundError
from blog_api.infrastructure.database.models import PostModel


class SQLAlchemyPostRepository(PostRepository):
    """Implements the PostRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PostModel) -> Post:
        """Map ORM model → domain entity."""
        return Post(
            id=model.id,
            title=model.title,
            content=model.content,
            is_draft=model.is_draft,
            created_at=model.created_at,
            updated_at=model.updated_at,
            published_at=model.published_at,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Map domain entity → ORM model (for creation)."""
        return PostModel(
            title=entity.title,
            content=entity.content,
            is_draft=entity.is_draft,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            published_at=entity.published_at,
        )

    async def get_by_id(self, post_id: int) -> Post | None:
        result = await self._session.get(PostModel, post_id)
        return self._to_entity(result) if result else None

    async def list_all(self) -> list[Post]:
        stmt = select(PostModel).order_by(PostModel.created_at.desc(), PostModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def list_published(self) -> list[Post]:
        stmt = (
            select(PostModel)
            .where(PostModel.is_draft.is_(False))
            .order_by(PostModel.published_at.desc(), PostModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, post: Post) -> Post:
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        model = await self._session.get(PostModel, post.id)
        if model is None:
            raise EntityNotFoundError("Post", post.id)
        model.title = post.title
        model.content = post.content
        model.is_draft = post.is_draft
        model.updated_at = post.updated_at
        model.published_at = post.published_at
        try:
            await self._session.flush()
        except StaleDataError:
            # Row was deleted by a concurrent request between load and flush
            await self._session.rollback()
            if await self._session.get(PostModel, post.id) is None:
                raise EntityNotFoundError("Post", post.id)
            raise
        return self._to_entity(model)

    async def delete(self, post_id: int) -> bool:
        model = await self._session.get(PostModel, post_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
