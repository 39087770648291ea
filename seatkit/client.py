"""
Async HTTP client for the reservations API.

Responses are validated against the same schemas the server uses, so callers
get typed models back or an ApiClientError.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar, Union
from uuid import UUID

import httpx
import structlog
from pydantic import BaseModel

from seatkit.core.validation import validate
from seatkit.schemas.common import ErrorResponse
from seatkit.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationEnvelope,
    ReservationListResponse,
    ReservationMessageResponse,
    ReservationUpdate,
)

logger = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)

RESERVATIONS_PATH = "/api/reservations"


class ApiClientError(Exception):
    """Non-2xx response, or a response that does not match its schema"""

    def __init__(self, status: int, error_body: ErrorResponse):
        super().__init__(error_body.message)
        self.status = status
        self.error_body = error_body

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500


def _error_body(response: httpx.Response) -> ErrorResponse:
    try:
        data = response.json()
    except ValueError:
        data = None

    result = validate(ErrorResponse, data)
    if result.ok:
        return result.value
    return ErrorResponse(
        error=response.reason_phrase,
        message=f"HTTP {response.status_code}: {response.reason_phrase}",
    )


def _payload(data: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return data


class ReservationsClient:
    """Client for /api/reservations"""

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ReservationsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        schema: Type[M],
        body: Optional[Dict[str, Any]] = None,
    ) -> M:
        logger.debug("API request", method=method, path=path)
        response = await self._client.request(method, path, json=body)

        if response.is_error:
            raise ApiClientError(response.status_code, _error_body(response))

        result = validate(schema, response.json())
        if not result.ok:
            raise ApiClientError(
                500,
                ErrorResponse(
                    error="Validation error",
                    message="API response does not match expected schema",
                    details=result.error.details,
                ),
            )
        return result.value

    async def list(self) -> List[Reservation]:
        response = await self._request("GET", RESERVATIONS_PATH, ReservationListResponse)
        return response.reservations

    async def get(self, reservation_id: Union[UUID, str]) -> Reservation:
        response = await self._request(
            "GET", f"{RESERVATIONS_PATH}/{reservation_id}", ReservationEnvelope
        )
        return response.reservation

    async def create(
        self,
        data: Union[ReservationCreate, Dict[str, Any]],
    ) -> ReservationMessageResponse:
        return await self._request(
            "POST", RESERVATIONS_PATH, ReservationMessageResponse, _payload(data)
        )

    async def update(
        self,
        reservation_id: Union[UUID, str],
        changes: Union[ReservationUpdate, Dict[str, Any]],
    ) -> ReservationMessageResponse:
        """Send only the fields set on changes"""
        return await self._request(
            "PUT",
            f"{RESERVATIONS_PATH}/{reservation_id}",
            ReservationMessageResponse,
            _payload(changes),
        )

    async def delete(self, reservation_id: Union[UUID, str]) -> ReservationMessageResponse:
        return await self._request(
            "DELETE", f"{RESERVATIONS_PATH}/{reservation_id}", ReservationMessageResponse
        )
