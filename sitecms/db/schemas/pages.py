from datetime import datetime
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from .common import NonEmptyStr, reject_explicit_null


class PageBase(BaseModel):
    slug: NonEmptyStr
    title: NonEmptyStr
    content: str
    meta_description: str | None = None
    meta_keywords: str | None = None
    is_published: bool = False


class PageCreate(PageBase):
    pass


class PageUpdate(BaseModel):
    id: StrictInt
    slug: NonEmptyStr | None = None
    title: NonEmptyStr | None = None
    content: str | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None
    is_published: bool | None = None

    @field_validator('slug', 'title', 'content', 'is_published')
    @classmethod
    def _not_null(cls, value):
        return reject_explicit_null(value)


class Page(PageBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class SlugLookup(BaseModel):
    slug: str
