"""
Pydantic schemas for Blog API.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, PositiveInt, field_validator

from apps.shared.schemas import reject_null
from apps.shared.utils import slugify


def _check_sluggable(title: Optional[str]) -> Optional[str]:
    if title is not None and not slugify(title):
        raise ValueError("must contain at least one letter or digit")
    return title


class BlogPostCreate(BaseModel):
    """Schema for creating a blog post. The slug is derived from the title."""
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    is_published: bool = False
    tags: Optional[str] = None
    reading_time_minutes: Optional[PositiveInt] = None

    @field_validator("title")
    @classmethod
    def title_has_slug(cls, value):
        return _check_sluggable(value)


class BlogPostUpdate(BaseModel):
    """
    Schema for updating a blog post. All fields optional.

    Changing the title re-derives the slug; writing is_published always
    resets published_at.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    is_published: Optional[bool] = None
    tags: Optional[str] = None
    reading_time_minutes: Optional[PositiveInt] = None

    @field_validator("title", "content", "is_published")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)

    @field_validator("title")
    @classmethod
    def title_has_slug(cls, value):
        return _check_sluggable(value)


class BlogPostResponse(BaseModel):
    """Schema for blog post responses."""
    id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    is_published: bool
    tags: Optional[str] = None
    tag_list: list[str] = Field(default_factory=list)
    reading_time_minutes: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None

    class Config:
        from_attributes = True
