"""Error Handlers — the single boundary translating failures into the error envelope.

Invariants:
    - CreditSystemError → its own http_status and to_response() envelope
    - RequestValidationError → ValidationFailure envelope, 400 (never 422)
    - Exception (catch-all) → 500 envelope, never leaks internal details
    - Every body has the same shape: title, timestamp, status, exception, details

Design Decisions:
    - Three-layer handler: domain (CreditSystemError), validation (Pydantic), catch-all (Exception)
    - Pydantic errors are re-expressed as ValidationFailure so clients see one taxonomy
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from credit_system.core.errors import (
    CreditSystemError, ValidationFailure, build_error_envelope,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CreditSystemError)
    async def domain_error_handler(request: Request, exc: CreditSystemError):
        """Handle all domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "customer_id": exc.context.customer_id,
                "credit_code": exc.context.credit_code,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        failure = validation_failure_from(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=failure.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "InternalError",
                ["An unexpected error occurred"],
            ),
        )


def validation_failure_from(exc: RequestValidationError) -> ValidationFailure:
    """One detail per pydantic error, message only."""
    return ValidationFailure([e["msg"] for e in exc.errors()])
