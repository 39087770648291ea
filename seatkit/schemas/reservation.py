"""Reservation schemas"""

import enum
from typing import Dict, FrozenSet, List, Optional

from pydantic import field_validator
from pydantic_core import PydanticCustomError

from seatkit.schemas.common import (
    BaseEntity,
    CamelModel,
    DateTime,
    Email,
    NonEmptyString,
    Phone,
    PositiveInt,
    UUIDString,
)


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SEATED = "seated"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class ReservationCategory(str, enum.Enum):
    """Service the reservation belongs to"""
    LUNCH = "lunch"
    DINNER = "dinner"
    SPECIAL = "special"  # private dining, tasting menu, etc.
    WALK_IN = "walk_in"


class ReservationSource(str, enum.Enum):
    """Channel the reservation came in through"""
    PHONE = "phone"
    WEB = "web"
    WALK_IN = "walk_in"
    EMAIL = "email"
    OTHER = "other"


# Advisory only: the API accepts any status write.
STATUS_TRANSITIONS: Dict[ReservationStatus, FrozenSet[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset({
        ReservationStatus.CONFIRMED,
        ReservationStatus.CANCELLED,
        ReservationStatus.NO_SHOW,
    }),
    ReservationStatus.CONFIRMED: frozenset({
        ReservationStatus.SEATED,
        ReservationStatus.CANCELLED,
        ReservationStatus.NO_SHOW,
    }),
    ReservationStatus.SEATED: frozenset({ReservationStatus.COMPLETED}),
    ReservationStatus.COMPLETED: frozenset(),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.NO_SHOW: frozenset(),
}

# Status -> timestamp column that records reaching it
STATUS_TIMESTAMP_FIELDS: Dict[ReservationStatus, str] = {
    ReservationStatus.CONFIRMED: "confirmed_at",
    ReservationStatus.SEATED: "seated_at",
    ReservationStatus.COMPLETED: "completed_at",
    ReservationStatus.CANCELLED: "cancelled_at",
}


def can_transition(current: ReservationStatus, target: ReservationStatus) -> bool:
    """Whether moving from current to target follows the usual lifecycle"""
    if current == target:
        return True
    return target in STATUS_TRANSITIONS[current]


class CustomerInfo(CamelModel):
    """Customer contact information"""
    name: NonEmptyString
    phone: Phone
    email: Optional[Email] = None
    notes: Optional[str] = None  # dietary restrictions, special requests


class Reservation(BaseEntity):
    """Reservation as stored and returned by the API"""
    # When & where
    date: DateTime
    duration: PositiveInt  # minutes
    table_ids: Optional[List[str]] = None

    # Who
    customer: CustomerInfo
    party_size: PositiveInt

    # What
    category: ReservationCategory
    status: ReservationStatus

    notes: Optional[str] = None
    tags: Optional[List[str]] = None

    # Metadata
    created_by: str
    source: Optional[ReservationSource] = None
    confirmed_at: Optional[DateTime] = None
    seated_at: Optional[DateTime] = None
    completed_at: Optional[DateTime] = None
    cancelled_at: Optional[DateTime] = None
    cancelled_by: Optional[str] = None
    cancellation_reason: Optional[str] = None


class ReservationCreate(CamelModel):
    """Create reservation request"""
    date: DateTime
    duration: PositiveInt
    table_ids: Optional[List[str]] = None
    customer: CustomerInfo
    party_size: PositiveInt
    category: ReservationCategory
    status: ReservationStatus = ReservationStatus.PENDING
    notes: Optional[str] = None
    tags: Optional[List[str]] = None
    created_by: str
    source: Optional[ReservationSource] = None


# Fields that may be left out of an update but cannot be cleared
REQUIRED_ON_UPDATE = (
    "date",
    "duration",
    "customer",
    "party_size",
    "category",
    "status",
    "created_by",
)


class ReservationUpdate(CamelModel):
    """Update reservation request; only the fields sent are applied"""
    date: Optional[DateTime] = None
    duration: Optional[PositiveInt] = None
    table_ids: Optional[List[str]] = None
    customer: Optional[CustomerInfo] = None
    party_size: Optional[PositiveInt] = None
    category: Optional[ReservationCategory] = None
    status: Optional[ReservationStatus] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None
    created_by: Optional[str] = None
    source: Optional[ReservationSource] = None
    confirmed_at: Optional[DateTime] = None
    seated_at: Optional[DateTime] = None
    completed_at: Optional[DateTime] = None
    cancelled_at: Optional[DateTime] = None
    cancelled_by: Optional[str] = None
    cancellation_reason: Optional[str] = None

    @field_validator(*REQUIRED_ON_UPDATE, mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise PydanticCustomError("not_nullable", "Field cannot be null")
        return value


class ReservationFilters(CamelModel):
    """Query filters for searching reservations"""
    date_from: Optional[DateTime] = None
    date_to: Optional[DateTime] = None
    status: Optional[List[ReservationStatus]] = None
    category: Optional[List[ReservationCategory]] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    party_size: Optional[PositiveInt] = None
    table_ids: Optional[List[str]] = None
    tags: Optional[List[str]] = None


class ReservationIdParams(CamelModel):
    """Path parameters for routes addressing one reservation"""
    id: UUIDString


class ReservationEnvelope(CamelModel):
    """Single reservation response"""
    reservation: Reservation


class ReservationMessageResponse(CamelModel):
    """Create / update / delete response"""
    reservation: Reservation
    message: str


class ReservationListResponse(CamelModel):
    """All reservations"""
    reservations: List[Reservation]
    count: int

