from datetime import datetime
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from .common import NonEmptyStr, reject_explicit_null


class FeatureBase(BaseModel):
    name: NonEmptyStr
    description: NonEmptyStr
    icon: str | None = None
    is_highlighted: bool = False
    sort_order: StrictInt = 0
    is_active: bool = True


class FeatureCreate(FeatureBase):
    pass


class FeatureUpdate(BaseModel):
    id: StrictInt
    name: NonEmptyStr | None = None
    description: NonEmptyStr | None = None
    icon: str | None = None
    is_highlighted: bool | None = None
    sort_order: StrictInt | None = None
    is_active: bool | None = None

    @field_validator('name', 'description', 'is_highlighted', 'sort_order', 'is_active')
    @classmethod
    def _not_null(cls, value):
        return reject_explicit_null(value)


class Feature(FeatureBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
