"""Pydantic DTOs (Data Transfer Objects) for the Post feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=200, examples=["Hello"])
    content: str = Field(..., min_length=1, examples=["World"])
    is_draft: bool = True


class PostUpdate(PostCreate):
    """Schema for replacing a post — every field is required except the draft flag."""

    id: int


class PostResponse(BaseModel):
    """Schema returned to the client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    title: str
    content: str
    is_draft: bool
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None = None
