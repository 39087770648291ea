"""
Reservation persistence.

Schemas use None for "no value"; rows store SQL NULL. The helpers here are the
only place the two meet, so routes never see row-level details.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from seatkit.models.reservation import Reservation, utcnow
from seatkit.schemas.reservation import ReservationCreate, ReservationUpdate

logger = structlog.get_logger()


def to_column_values(data: BaseModel, exclude_unset: bool = False) -> Dict[str, Any]:
    """Translate a request schema into column values"""
    values = data.model_dump(exclude_unset=exclude_unset)
    customer = getattr(data, "customer", None)
    if "customer" in values and customer is not None:
        # Optional contact fields are left out of the JSON document
        values["customer"] = customer.model_dump(mode="json", exclude_none=True)
    return values


def next_updated_at(previous: Optional[datetime]) -> datetime:
    """Current time, strictly later than the previous stamp"""
    now = utcnow()
    if previous is not None and previous >= now:
        return previous + timedelta(microseconds=1)
    return now


async def list_reservations(db: AsyncSession) -> List[Reservation]:
    """All reservations, earliest first"""
    result = await db.execute(select(Reservation).order_by(Reservation.date, Reservation.created_at))
    return list(result.scalars().all())


async def get_reservation(
    db: AsyncSession,
    reservation_id: UUID,
    for_update: bool = False,
) -> Optional[Reservation]:
    query = select(Reservation).where(Reservation.id == reservation_id).limit(1)
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def create_reservation(db: AsyncSession, data: ReservationCreate) -> Reservation:
    """Insert a new reservation; id and timestamps are assigned here"""
    now = utcnow()
    reservation = Reservation(
        **to_column_values(data),
        created_at=now,
        updated_at=now,
    )
    db.add(reservation)
    await db.commit()
    await db.refresh(reservation)

    logger.info("Reservation created", reservation_id=str(reservation.id))
    return reservation


async def update_reservation(
    db: AsyncSession,
    reservation_id: UUID,
    changes: ReservationUpdate,
) -> Optional[Reservation]:
    """
    Apply the fields present in changes to an existing reservation.

    The row is read with a lock and written in the same transaction. Returns
    None when no reservation has the id.
    """
    reservation = await get_reservation(db, reservation_id, for_update=True)
    if reservation is None:
        await db.rollback()
        return None

    for field, value in to_column_values(changes, exclude_unset=True).items():
        setattr(reservation, field, value)
    reservation.updated_at = next_updated_at(reservation.updated_at)

    await db.commit()
    await db.refresh(reservation)

    logger.info("Reservation updated", reservation_id=str(reservation.id))
    return reservation


async def delete_reservation(db: AsyncSession, reservation_id: UUID) -> Optional[Reservation]:
    """Hard-delete a reservation and return its last known state"""
    reservation = await get_reservation(db, reservation_id, for_update=True)
    if reservation is None:
        await db.rollback()
        return None

    await db.delete(reservation)
    await db.commit()

    logger.info("Reservation deleted", reservation_id=str(reservation.id))
    return reservation
