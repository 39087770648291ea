"""Shared field types and base schemas"""

import re
from datetime import datetime, timezone
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field, StringConstraints
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
PHONE_ALLOWED = re.compile(r"^[\d\s\-()+.]+$")
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 20
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15


def ensure_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def check_uuid_format(value):
    if isinstance(value, str) and not UUID_PATTERN.match(value):
        raise PydanticCustomError("uuid_format", "Invalid UUID format")
    return value


def check_phone(value: str) -> str:
    if len(value) < PHONE_MIN_LENGTH:
        raise PydanticCustomError("phone_too_short", "Phone number too short")
    if len(value) > PHONE_MAX_LENGTH:
        raise PydanticCustomError("phone_too_long", "Phone number too long")
    if not PHONE_ALLOWED.match(value):
        raise PydanticCustomError(
            "phone_characters",
            "Phone number can only contain digits, spaces, hyphens, parentheses, dots, and plus sign",
        )
    digits = re.sub(r"\D", "", value)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        raise PydanticCustomError(
            "phone_digits",
            "Phone number must contain between 10 and 15 digits",
        )
    return value


# Accepts ISO strings and epoch numbers; always yields an aware UTC datetime
DateTime = Annotated[datetime, AfterValidator(ensure_utc)]

# "2025-01-15"
DateString = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]

# "14:30" or "14:30:00"
TimeString = Annotated[str, StringConstraints(pattern=r"^\d{2}:\d{2}(:\d{2})?$")]

UUIDString = Annotated[UUID, BeforeValidator(check_uuid_format)]
Email = EmailStr
Phone = Annotated[str, AfterValidator(check_phone)]

PositiveInt = Annotated[int, Field(strict=True, gt=0)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
NonEmptyString = Annotated[str, StringConstraints(min_length=1)]

# Smallest currency unit (cents); never a float
Money = Annotated[int, Field(strict=True, ge=0)]

# ISO 4217, e.g. "USD"
CurrencyCode = Annotated[
    str,
    StringConstraints(min_length=3, max_length=3, to_upper=True),
]


class CamelModel(BaseModel):
    """Base model using camelCase names on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BaseEntity(CamelModel):
    """Fields every stored entity carries"""
    id: UUIDString
    created_at: DateTime
    updated_at: DateTime


class ErrorResponse(BaseModel):
    """Standard error body"""
    error: str
    message: str
    details: Optional[List[str]] = None


class SuccessResponse(BaseModel):
    """Body for operations that only report a message"""
    message: str
