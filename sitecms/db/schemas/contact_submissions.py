from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, StrictInt

from .common import NonEmptyStr


class ContactSubmissionCreate(BaseModel):
    # No is_read field: submissions always start unread
    name: NonEmptyStr
    email: EmailStr
    company: str | None = None
    message: NonEmptyStr


class ContactSubmission(BaseModel):
    id: int
    name: str
    email: str
    company: str | None = None
    message: str
    is_read: bool
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ContactSubmissionId(BaseModel):
    id: StrictInt
