"""Error Handlers - global exception handlers for the Warehouser API.

Invariants:
    - ErrorKind -> HTTP status mapping exists only in HTTP_STATUS_BY_KIND
    - Error bodies are plain text: the human-readable message
    - RequestValidationError -> 400 listing each offending field
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Layered handlers: domain (WarehouserError), validation (Pydantic),
      response encoding, database driver, catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from warehouser.core.errors import (
    ErrorKind, SerializationFailureError, StoreUnavailableError, WarehouserError,
)

logger = logging.getLogger(__name__)

HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INCONSISTENCY: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORE_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.NOT_IMPLEMENTED: status.HTTP_501_NOT_IMPLEMENTED,
    ErrorKind.SERIALIZATION_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_serialization_error_handler(app)
    _register_database_error_handler(app)
    _register_generic_error_handler(app)


def error_response(request: Request, exc: WarehouserError) -> PlainTextResponse:
    """Log a domain error and render it with its mapped status code."""
    code = HTTP_STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    level = logging.WARNING if code < 500 else logging.ERROR
    logger.log(
        level,
        f"WarehouserError: {exc.message}",
        extra={**exc.log_extra(), "path": request.url.path, "method": request.method},
    )
    return PlainTextResponse(exc.message, status_code=code)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(WarehouserError)
    async def warehouser_error_handler(request: Request, exc: WarehouserError):
        """Handle all Warehouser domain/infrastructure errors."""
        return error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(
            _format_validation_errors(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_serialization_error_handler(app: FastAPI) -> None:
    @app.exception_handler(ResponseValidationError)
    async def serialization_error_handler(
        request: Request, exc: ResponseValidationError,
    ):
        """A response that fails its own schema is a programming error."""
        return error_response(
            request, SerializationFailureError("Failed to serialize response"),
        )


def _register_database_error_handler(app: FastAPI) -> None:
    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        """Driver errors that escaped the session manager."""
        logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
        return error_response(
            request, StoreUnavailableError("Database operation failed", "execute"),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _format_validation_errors(exc: RequestValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"Invalid request data: {details}"
