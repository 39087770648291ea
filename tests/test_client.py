"""Tests for the async API client"""

import httpx
import pytest
from uuid import uuid4

from seatkit.client import ApiClientError, ReservationsClient
from seatkit.main import app
from seatkit.schemas.reservation import ReservationCreate, ReservationStatus, ReservationUpdate


@pytest.fixture
async def api(client):
    """Client wired to the app; depends on client for the database override"""
    async with ReservationsClient("http://test", transport=httpx.ASGITransport(app=app)) as api:
        yield api


@pytest.mark.asyncio
async def test_client_crud_flow(api: ReservationsClient, reservation_payload):
    created = await api.create(ReservationCreate.model_validate(reservation_payload))
    assert created.message == "Reservation created successfully"
    assert created.reservation.status == ReservationStatus.PENDING

    reservation_id = created.reservation.id

    fetched = await api.get(reservation_id)
    assert fetched == created.reservation

    updated = await api.update(reservation_id, ReservationUpdate(party_size=6))
    assert updated.reservation.party_size == 6
    assert updated.reservation.updated_at > created.reservation.updated_at

    listed = await api.list()
    assert [r.id for r in listed] == [reservation_id]

    deleted = await api.delete(reservation_id)
    assert deleted.reservation.id == reservation_id
    assert await api.list() == []


@pytest.mark.asyncio
async def test_client_sends_only_set_fields(api: ReservationsClient, reservation_payload):
    created = await api.create(reservation_payload)

    updated = await api.update(created.reservation.id, ReservationUpdate(notes="Quiet table"))

    assert updated.reservation.notes == "Quiet table"
    assert updated.reservation.customer == created.reservation.customer


@pytest.mark.asyncio
async def test_client_raises_on_not_found(api: ReservationsClient):
    with pytest.raises(ApiClientError) as exc_info:
        await api.get(uuid4())

    error = exc_info.value
    assert error.status == 404
    assert error.is_client_error
    assert not error.is_server_error
    assert error.error_body.message == "Reservation not found"


@pytest.mark.asyncio
async def test_client_raises_on_validation_error(api: ReservationsClient, reservation_payload):
    reservation_payload["partySize"] = 0

    with pytest.raises(ApiClientError) as exc_info:
        await api.create(reservation_payload)

    assert exc_info.value.status == 400
    assert exc_info.value.error_body.error == "Validation error"
    assert exc_info.value.error_body.details


@pytest.mark.asyncio
async def test_client_rejects_unexpected_response_shape():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"reservations": "nope"})

    async with ReservationsClient("http://test", transport=httpx.MockTransport(handler)) as api:
        with pytest.raises(ApiClientError) as exc_info:
            await api.list()

    error = exc_info.value
    assert error.is_server_error
    assert error.error_body.message == "API response does not match expected schema"
    assert any(line.startswith("reservations:") for line in error.error_body.details)


@pytest.mark.asyncio
async def test_client_handles_non_json_error_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    async with ReservationsClient("http://test", transport=httpx.MockTransport(handler)) as api:
        with pytest.raises(ApiClientError) as exc_info:
            await api.list()

    error = exc_info.value
    assert error.status == 502
    assert error.is_server_error
    assert error.error_body.message == "HTTP 502: Bad Gateway"
