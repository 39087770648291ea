"""
Centralized API error handling.

Routes raise ApiError (usually through the helpers below) and the handlers
registered on the app render every error in the same body shape:
{"error": str, "message": str, "details": [str] (optional)}.
"""

from http import HTTPStatus
from typing import List, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from seatkit.core.validation import GENERAL_FIELD, ValidationError

logger = structlog.get_logger()

STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_ERROR = 500

ERROR_VALIDATION = "Validation error"
ERROR_NOT_FOUND = "Not found"
ERROR_INTERNAL = "Internal server error"


class ApiError(Exception):
    """An error that maps directly onto an HTTP error response"""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


def validation_error(
    error: ValidationError,
    message: str = "Invalid request data provided",
) -> ApiError:
    """Client error carrying one detail line per violated field"""
    return ApiError(STATUS_BAD_REQUEST, ERROR_VALIDATION, message, error.details)


def not_found(message: str) -> ApiError:
    return ApiError(STATUS_NOT_FOUND, ERROR_NOT_FOUND, message)


def internal_error(message: str) -> ApiError:
    """Server error; never carries internal detail"""
    return ApiError(STATUS_INTERNAL_ERROR, ERROR_INTERNAL, message)


def _format_request_error(issue: dict) -> str:
    # Drop the leading "body"/"path"/"query" location segment
    loc = [str(part) for part in issue.get("loc", ())[1:]]
    path = ".".join(loc) or GENERAL_FIELD
    return f"{path}: {issue.get('msg')}"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ApiError(
        STATUS_BAD_REQUEST,
        ERROR_VALIDATION,
        "Invalid request data provided",
        [_format_request_error(issue) for issue in exc.errors()],
    ).to_dict()
    return JSONResponse(status_code=STATUS_BAD_REQUEST, content=jsonable_encoder(body))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == STATUS_NOT_FOUND:
        error = ERROR_NOT_FOUND
    else:
        error = HTTPStatus(exc.status_code).phrase
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=STATUS_INTERNAL_ERROR,
        content={"error": ERROR_INTERNAL, "message": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
