"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Post


class PostRepository(ABC):
    """Port for post persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Post | None:
        """Retrieve a single post by its ID."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Post]:
        """Every post, newest created first."""
        ...

    @abstractmethod
    async def list_published(self) -> list[Post]:
        """Published posts only, most recently published first."""
        ...

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Persist a new post and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Update an existing post.

        Raises EntityNotFoundError if the row disappeared underneath us.
        """
        ...

    @abstractmethod
    async def delete(self, post_id: int) -> bool:
        """Delete a post. Returns True if deleted, False if not found."""
        ...
