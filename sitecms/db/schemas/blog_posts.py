from datetime import datetime
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from .common import NonEmptyStr, UrlStr, UtcDatetime, reject_explicit_null


class BlogPostBase(BaseModel):
    slug: NonEmptyStr
    title: NonEmptyStr
    excerpt: str | None = None
    content: str
    author: NonEmptyStr
    featured_image_url: UrlStr | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None
    is_published: bool = False
    # Caller-controlled, never derived from is_published
    published_at: UtcDatetime | None = None


class BlogPostCreate(BlogPostBase):
    pass


class BlogPostUpdate(BaseModel):
    id: StrictInt
    slug: NonEmptyStr | None = None
    title: NonEmptyStr | None = None
    excerpt: str | None = None
    content: str | None = None
    author: NonEmptyStr | None = None
    featured_image_url: UrlStr | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None
    is_published: bool | None = None
    published_at: UtcDatetime | None = None

    @field_validator('slug', 'title', 'content', 'author', 'is_published')
    @classmethod
    def _not_null(cls, value):
        return reject_explicit_null(value)


class BlogPost(BlogPostBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
