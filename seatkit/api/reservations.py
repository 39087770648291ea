"""Reservation management API endpoints"""

from typing import Any, Dict
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from seatkit.core.errors import internal_error, not_found, validation_error
from seatkit.core.validation import validate
from seatkit.database import get_db
from seatkit.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationEnvelope,
    ReservationIdParams,
    ReservationListResponse,
    ReservationMessageResponse,
    ReservationUpdate,
)
from seatkit.services import reservation_service

logger = structlog.get_logger()

router = APIRouter()

NOT_FOUND_MESSAGE = "Reservation not found"


def _parse_id(reservation_id: str) -> UUID:
    result = validate(ReservationIdParams, {"id": reservation_id})
    if not result.ok:
        raise validation_error(result.error, "Invalid reservation ID")
    return result.value.id


@router.get("", response_model=ReservationListResponse)
async def list_reservations(db: AsyncSession = Depends(get_db)):
    """List every reservation"""
    try:
        rows = await reservation_service.list_reservations(db)
    except SQLAlchemyError as exc:
        logger.error("Failed to fetch reservations", exc_info=exc)
        raise internal_error("Failed to fetch reservations") from exc

    reservations = [Reservation.model_validate(row) for row in rows]
    return ReservationListResponse(reservations=reservations, count=len(reservations))


@router.get("/{reservation_id}", response_model=ReservationEnvelope)
async def get_reservation(reservation_id: str, db: AsyncSession = Depends(get_db)):
    """Get a single reservation"""
    rid = _parse_id(reservation_id)

    try:
        row = await reservation_service.get_reservation(db, rid)
    except SQLAlchemyError as exc:
        logger.error("Failed to fetch reservation", reservation_id=str(rid), exc_info=exc)
        raise internal_error("Failed to fetch reservation") from exc

    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)

    return ReservationEnvelope(reservation=Reservation.model_validate(row))


@router.post("", response_model=ReservationMessageResponse, status_code=201)
async def create_reservation(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create a new reservation; status defaults to pending"""
    result = validate(ReservationCreate, payload)
    if not result.ok:
        raise validation_error(result.error, "Invalid reservation data provided")

    try:
        row = await reservation_service.create_reservation(db, result.value)
    except SQLAlchemyError as exc:
        logger.error("Failed to create reservation", exc_info=exc)
        raise internal_error("Failed to create reservation") from exc

    return ReservationMessageResponse(
        reservation=Reservation.model_validate(row),
        message="Reservation created successfully",
    )


@router.put("/{reservation_id}", response_model=ReservationMessageResponse)
async def update_reservation(
    reservation_id: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Update a reservation.

    Only the fields present in the body are changed. id, createdAt and
    updatedAt are ignored if sent; updatedAt is always advanced.
    """
    rid = _parse_id(reservation_id)

    result = validate(ReservationUpdate, payload)
    if not result.ok:
        raise validation_error(result.error, "Invalid reservation data provided")

    try:
        row = await reservation_service.update_reservation(db, rid, result.value)
    except SQLAlchemyError as exc:
        logger.error("Failed to update reservation", reservation_id=str(rid), exc_info=exc)
        raise internal_error("Failed to update reservation") from exc

    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)

    return ReservationMessageResponse(
        reservation=Reservation.model_validate(row),
        message="Reservation updated successfully",
    )


@router.delete("/{reservation_id}", response_model=ReservationMessageResponse)
async def delete_reservation(reservation_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a reservation, returning what was removed"""
    rid = _parse_id(reservation_id)

    try:
        row = await reservation_service.delete_reservation(db, rid)
    except SQLAlchemyError as exc:
        logger.error("Failed to delete reservation", reservation_id=str(rid), exc_info=exc)
        raise internal_error("Failed to delete reservation") from exc

    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)

    return ReservationMessageResponse(
        reservation=Reservation.model_validate(row),
        message="Reservation deleted successfully",
    )
