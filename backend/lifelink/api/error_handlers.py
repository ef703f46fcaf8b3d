"""Error Handlers: global exception handlers for the Lifelink API.

Invariants:
    - LifelinkError → its own envelope and http_status
    - RequestValidationError → 400 envelope with field-level details in `error`
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LifelinkError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from lifelink.api.responses import PrettyJSONResponse
from lifelink.core.errors import LifelinkError, StorageError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_lifelink_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_lifelink_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(LifelinkError)
    async def lifelink_error_handler(request: Request, exc: LifelinkError):
        """Handle all gateway errors."""
        log = logger.error if isinstance(exc, StorageError) else logger.warning
        log(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return PrettyJSONResponse(
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
        return PrettyJSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PrettyJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "An unexpected error occurred",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 envelope; one `field: message` entry per problem."""
    details = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    return {
        "success": False,
        "message": "Invalid request data",
        "error": "; ".join(details),
    }
