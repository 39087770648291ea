"""Reservation model"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Enum, Integer, String, Text, TypeDecorator, Uuid
from sqlalchemy.dialects.postgresql import JSONB

from seatkit.database import Base
from seatkit.schemas.reservation import ReservationCategory, ReservationSource, ReservationStatus


class UTCDateTime(TypeDecorator):
    """Aware UTC datetimes in Python, naive UTC timestamps in the column"""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


# None is stored as SQL NULL rather than a JSON null
JSONColumn = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")


class Reservation(Base):
    """Customer reservations"""
    __tablename__ = "reservations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow)

    # When & where
    date = Column(UTCDateTime, nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # minutes
    table_ids = Column(JSONColumn)

    # Who: {"name", "phone", "email", "notes"}
    customer = Column(JSONColumn, nullable=False)
    party_size = Column(Integer, nullable=False)

    # What
    category = Column(
        Enum(ReservationCategory, name="reservation_category", values_callable=_enum_values),
        nullable=False,
    )
    status = Column(
        Enum(ReservationStatus, name="reservation_status", values_callable=_enum_values),
        nullable=False,
        default=ReservationStatus.PENDING,
    )

    notes = Column(Text)  # internal staff notes
    tags = Column(JSONColumn)

    # Metadata
    created_by = Column(String(255), nullable=False)
    source = Column(Enum(ReservationSource, name="reservation_source", values_callable=_enum_values))
    confirmed_at = Column(UTCDateTime)
    seated_at = Column(UTCDateTime)
    completed_at = Column(UTCDateTime)
    cancelled_at = Column(UTCDateTime)
    cancelled_by = Column(String(255))
    cancellation_reason = Column(Text)

    def __repr__(self) -> str:
        return f"<Reservation {self.id} {self.status}>"
