"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Post:
    """Core domain entity representing a blog post.

    A post is either a draft or published. ``published_at`` records the first
    time the post was published and is never cleared afterwards, even when the
    post is turned back into a draft.
    """

    title: str
    content: str
    is_draft: bool = True
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    published_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.is_draft:
            self._stamp_published(self.created_at)

    @property
    def is_published(self) -> bool:
        return not self.is_draft

    def revise(self, title: str, content: str, is_draft: bool) -> None:
        """Replace the editable fields and apply the publish transition."""
        now = _utcnow()
        self.title = title
        self.content = content
        self.is_draft = is_draft
        self.updated_at = now
        if not is_draft:
            self._stamp_published(now)

    def is_visible_to(self, is_admin: bool) -> bool:
        """Admins see every post; everyone else only sees published ones."""
        return is_admin or self.is_published

    def _stamp_published(self, when: datetime) -> None:
        if self.published_at is None:
            self.published_at = when
