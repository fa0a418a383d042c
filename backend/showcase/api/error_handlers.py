"""Error Handlers — global exception handlers for the showcase API.

Invariants:
    - ShowcaseError → structured JSON with error code, message, severity
    - UseCaseValidationError and RequestValidationError both carry a
      `details` list of {field, message}, so clients read one shape for 400s
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ShowcaseError), validation (Pydantic), catch-all (Exception)
    - Log level follows the HTTP status: warning below 500, error from 500 up
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from showcase.core.errors import (
    ErrorSeverity, ShowcaseError, UseCaseValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_showcase_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_showcase_error_handler(app: FastAPI) -> None:
    """Register the handler for use case domain/storage errors."""

    @app.exception_handler(ShowcaseError)
    async def showcase_error_handler(request: Request, exc: ShowcaseError):
        """Map a ShowcaseError to its envelope and HTTP status."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"ShowcaseError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "use_case_id": exc.context.use_case_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=_build_showcase_error_response(exc),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register the handler for malformed request bodies and query params."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all handler for unexpected errors."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_showcase_error_response(exc: ShowcaseError) -> dict:
    content = exc.to_response()
    if isinstance(exc, UseCaseValidationError):
        content["error"]["details"] = [
            {"field": exc.field, "message": exc.message, "type": "use_case_rule"},
        ]
    return content


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build field-level error details from a RequestValidationError."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
