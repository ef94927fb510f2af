"""Application service for image uploads to the object store."""

import logging
import re
import uuid
from pathlib import PurePosixPath

from blog_api.application.interfaces import ObjectStorage
from blog_api.domain.entities import StoredObject
from blog_api.domain.exceptions import (
    UnsupportedMediaTypeError,
    UploadTooLargeError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "blog"
DEFAULT_ALLOWED_CONTENT_TYPES = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/avif",
)

# Characters that are not allowed in filenames on common filesystems, plus space
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f ]+')


def _slugify(stem: str) -> str:
    parts = [p for p in _INVALID_FILENAME_CHARS.split(stem) if p]
    return "-".join(parts).lower() or "file"


def build_object_key(
    prefix: str | None, filename: str, default_prefix: str = DEFAULT_PREFIX
) -> str:
    """Build ``<prefix>/<slug>-<random>.<ext>`` for an uploaded file.

    The random suffix keeps repeated uploads of the same filename apart.
    """
    name = PurePosixPath(filename.replace("\\", "/")).name
    path = PurePosixPath(name)
    slug = _slugify(path.stem)
    ext = path.suffix
    unique = uuid.uuid4().hex[:12]
    base = default_prefix if prefix is None or not prefix.strip() else prefix.strip("/")
    key = f"{base}/{slug}-{unique}{ext}"
    return key.replace(" ", "").replace("\\", "/")


class UploadService:
    """Validates uploads and hands them to the object storage port.

    Every check runs before the storage backend is touched.
    """

    def __init__(
        self,
        storage: ObjectStorage,
        allowed_content_types: list[str] | tuple[str, ...] = DEFAULT_ALLOWED_CONTENT_TYPES,
        max_size_bytes: int = 20 * 1024 * 1024,
        default_prefix: str = DEFAULT_PREFIX,
    ):
        self._storage = storage
        self._allowed = list(allowed_content_types)
        self._max_size = max_size_bytes
        self._default_prefix = default_prefix

    @property
    def max_size_bytes(self) -> int:
        return self._max_size

    def check(self, content_type: str | None, size: int | None) -> None:
        """Reject an upload from its declared type and size alone.

        ``size`` may be None when the client did not declare one; the size
        checks are then left to ``upload``.
        """
        if size == 0:
            raise ValidationError("No file uploaded")
        if content_type not in self._allowed:
            raise UnsupportedMediaTypeError(content_type, self._allowed)
        if size is not None and size > self._max_size:
            raise UploadTooLargeError(size, self._max_size)

    async def upload(
        self,
        content: bytes,
        filename: str,
        content_type: str | None,
        prefix: str | None = None,
    ) -> StoredObject:
        self.check(content_type, len(content))

        key = build_object_key(prefix, filename, default_prefix=self._default_prefix)
        url = await self._storage.upload(content, key, content_type, public=True)
        logger.info("Uploaded %s as %s (%d bytes)", filename, key, len(content))
        return StoredObject(key=key, url=url, content_type=content_type, size=len(content))

    async def delete(self, key: str) -> None:
        if not key or not key.strip():
            raise ValidationError("Key is required")
        await self._storage.delete(key)
