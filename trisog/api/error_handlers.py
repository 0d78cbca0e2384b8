"""Error Handlers — global exception handlers for the Trisog API.

Invariants:
    - Every error response body is {"msg": str}
    - TrisogError → its own status and message
    - RequestValidationError → 400 with the first error, phrased per field
    - HTTPException (unknown route, wrong method) → its status and detail
    - Exception (catch-all) → 500 "Internal server error", never leaks internal details

Design Decisions:
    - Four-layer handler: domain (TrisogError), validation (Pydantic), HTTP, catch-all
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from trisog.core.errors import ErrorSeverity, TrisogError
from trisog.core.validation import first_error_message

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"msg": "Internal server error"}

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_trisog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_trisog_error_handler(app: FastAPI) -> None:
    """Register Trisog domain/infrastructure error handler."""

    @app.exception_handler(TrisogError)
    async def trisog_error_handler(request: Request, exc: TrisogError):
        """Handle all Trisog domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"TrisogError: {exc.message}",
            extra={
                **exc.log_extra(),
                "path": request.url.path,
                "method": request.method,
            },
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
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"msg": first_error_message(exc.errors())},
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework-raised HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR,
        )
