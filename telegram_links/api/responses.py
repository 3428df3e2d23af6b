"""Response Envelopes — the single place a service Result becomes an HTTP response.

Invariants:
    - Err → error.http_status with {success: false, error, details?}
    - Ok → given status with {success: true, data?, message?, ...meta}
"""

from typing import Any, Callable

from fastapi import status
from fastapi.responses import JSONResponse

from telegram_links.core.result import Err, Result


def respond(
    result: Result,
    status_code: int = status.HTTP_200_OK,
    *,
    render: Callable[[Any], Any] | None = None,
    message: str | None = None,
    meta: Callable[[Any], dict] | None = None,
) -> JSONResponse:
    """Map a service Result to a JSON envelope."""
    if isinstance(result, Err):
        return JSONResponse(
            status_code=result.error.http_status,
            content=result.error.to_response(),
        )
    body: dict[str, Any] = {"success": True}
    if render is not None:
        body["data"] = render(result.value)
    if message:
        body["message"] = message
    if meta is not None:
        body.update(meta(result.value))
    return JSONResponse(status_code=status_code, content=body)


def error_envelope(error: str, details: list[str] | None = None) -> dict:
    """Failure envelope for errors raised outside the service layer."""
    body: dict[str, Any] = {"success": False, "error": error}
    if details:
        body["details"] = details
    return body
