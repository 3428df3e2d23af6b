"""Error Handlers — global exception handlers for the Telegram links API.

Invariants:
    - LinkServiceError → its http_status with the {success: false, error, details?} envelope
    - RequestValidationError → 400 "Validation error" with one detail per bad field
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LinkServiceError), validation (Pydantic), catch-all (Exception)
    - Service operations return Results, so the domain handler only sees errors raised
      outside them (e.g. StoreError from the session manager)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from telegram_links.api.responses import error_envelope
from telegram_links.core.errors import LinkServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_link_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_link_error_handler(app: FastAPI) -> None:
    """Register link domain/infrastructure error handler."""

    @app.exception_handler(LinkServiceError)
    async def link_error_handler(request: Request, exc: LinkServiceError):
        """Handle link service errors raised outside a Result."""
        logger.error(
            f"LinkServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("An unexpected error occurred"),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 envelope: one "field: message" detail per error."""
    return error_envelope(
        "Validation error",
        [
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ],
    )
