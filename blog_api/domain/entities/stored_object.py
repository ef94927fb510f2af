"""Result of handing an upload to the object store."""

from dataclasses import dataclass


@dataclass
class StoredObject:
    """An object that now lives in the bucket."""

    key: str
    url: str
    content_type: str
    size: int
