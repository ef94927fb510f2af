"""Abstract object storage interface.

Implementations forward bytes to a remote bucket and hand back a public URL.
Keeps the upload use case independent of any particular SDK.
"""

from abc import ABC, abstractmethod


class ObjectStorage(ABC):
    """Port for S3-compatible object storage."""

    @abstractmethod
    async def upload(
        self, content: bytes, key: str, content_type: str, public: bool = True
    ) -> str:
        """Store ``content`` under ``key`` and return its URL.

        Raises:
            StorageError: when the remote store fails or rejects the request.
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the object at ``key``. Missing objects are not an error."""
        ...

    @abstractmethod
    def get_url(self, key: str) -> str:
        """Public URL for ``key``."""
        ...
