"""Shared field types and validators for content schemas."""
from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the caller's spelling is what gets stored
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a well-formed URL") from None
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]


def _as_utc(value: datetime) -> datetime:
    # Naive input is taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def reject_explicit_null(value):
    """Allow a field to be omitted from an update but not set to null."""
    if value is None:
        raise ValueError("field may be omitted but cannot be null")
    return value
