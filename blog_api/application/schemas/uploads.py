"""Pydantic DTOs for object uploads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UploadResponse(BaseModel):
    """Where an uploaded object ended up."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    key: str
    url: str
    content_type: str
    size: int
