"""Room schemas"""

from typing import Optional

from seatkit.core.validation import partial_model
from seatkit.schemas.common import (
    BaseEntity,
    CamelModel,
    DateTime,
    NonEmptyString,
    NonNegativeInt,
    UUIDString,
)


class Room(BaseEntity):
    """A configurable area of the restaurant ("Main Dining", "Patio")"""
    name: NonEmptyString
    display_name: Optional[NonEmptyString] = None
    is_active: bool
    order: Optional[NonNegativeInt] = None
    color: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class RoomCreate(CamelModel):
    name: NonEmptyString
    display_name: Optional[NonEmptyString] = None
    is_active: bool = True
    order: Optional[NonNegativeInt] = None
    color: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class RoomUpdate(partial_model(Room)):
    id: UUIDString
    updated_at: DateTime


class RoomFilters(CamelModel):
    is_active: Optional[bool] = None
