# baas/core/errors.py
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from baas.core.middleware import cors_headers

__all__ = [
    "BaasError",
    "ValidationError",
    "NotFound",
    "InternalError",
    "StartupError",
    "format_validation_errors",
    "register_exception_handlers",
]


class BaasError(Exception):
    """Base class of errors that map onto an HTTP status and `{error, message}` body."""

    status_code: int = 500
    default_error: str = "Internal server error"

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error or self.default_error


class ValidationError(BaasError):
    status_code = 400
    default_error = "Invalid request"


class NotFound(BaasError):
    status_code = 404
    default_error = "Not found"


class InternalError(BaasError):
    status_code = 500
    default_error = "Internal server error"


class StartupError(RuntimeError):
    """Raised when the service cannot start (missing configuration, failed table creation)."""


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message},
    )


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into `field: msg; field: msg`."""
    parts = []
    for e in errors:
        # integer parts are list indexes or JSON decode offsets, not field names
        loc = [p for p in e.get("loc", ()) if isinstance(p, str) and p != "body"]
        where = ".".join(loc) or "body"
        parts.append(f"{where}: {e.get('msg')}")
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the global exception handlers.

    - BaasError subclasses: their own status and summary
    - RequestValidationError: malformed request (400)
    - StarletteHTTPException: routing errors (404, 405)
    - Exception: anything else (500)
    """

    @app.exception_handler(BaasError)
    async def baas_error_handler(request: Request, exc: BaasError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "{} {} -> {} ({}: {})",
                request.method,
                request.url.path,
                exc.status_code,
                exc.error,
                exc.message,
            )
        else:
            logger.info(
                "{} {} -> {} ({})",
                request.method,
                request.url.path,
                exc.status_code,
                exc.error,
            )
        return _error_response(exc.status_code, exc.error, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = list(exc.errors())
        logger.info(
            "Request validation failed: {} {} ({} errors)",
            request.method,
            request.url.path,
            len(errors),
        )
        return _error_response(400, "Invalid request", format_validation_errors(errors))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        logger.warning(
            "HTTPException: {} {} -> {} ({})",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )
        message = str(exc.detail) if exc.detail else "HTTP error"
        return _error_response(exc.status_code, message, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.opt(exception=exc).error(
            "Unhandled exception: {} {}",
            request.method,
            request.url.path,
        )
        response = _error_response(500, "Internal server error", "An unexpected error occurred")
        # served by the outermost error middleware, outside cors_middleware
        response.headers.update(cors_headers(request.headers.get("origin")))
        return response
