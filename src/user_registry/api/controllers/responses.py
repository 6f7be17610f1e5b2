"""Helpers building the response envelope. Only controllers use them."""

from datetime import UTC, datetime
from typing import Any

from user_registry.api.controllers.protocols import (
    HttpResponse,
    ResponseBody,
    ResponseMetadata,
)
from user_registry.core.errors import ApplicationError, ServerError


def _metadata(request_id: str | None) -> ResponseMetadata:
    timestamp = datetime.now(UTC).isoformat(timespec="milliseconds")
    return ResponseMetadata(
        timestamp=timestamp.replace("+00:00", "Z"), request_id=request_id
    )


def ok(data: Any, request_id: str | None = None) -> HttpResponse:
    return HttpResponse(
        status_code=200,
        body=ResponseBody(success=True, data=data, metadata=_metadata(request_id)),
    )


def created(request_id: str | None = None) -> HttpResponse:
    return HttpResponse(
        status_code=201,
        body=ResponseBody(success=True, metadata=_metadata(request_id)),
    )


def server_error(error: BaseException, request_id: str | None = None) -> HttpResponse:
    """500 envelope. Errors outside the taxonomy are reported as ServerError."""
    if not isinstance(error, ApplicationError):
        error = ServerError(error)
    return HttpResponse(
        status_code=500,
        body=ResponseBody(
            success=False,
            error_message=error.message,
            metadata=_metadata(request_id),
        ),
    )


def handle_error(error: BaseException, request_id: str | None = None) -> HttpResponse:
    """Map a raised error to its response; unknown errors become 500."""
    if isinstance(error, ApplicationError):
        return HttpResponse(
            status_code=error.status_code,
            body=ResponseBody(
                success=False,
                error_message=error.message,
                metadata=_metadata(request_id),
            ),
        )
    return server_error(error, request_id)
