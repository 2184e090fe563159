"""Global exception handlers for consistent error responses.

Every error leaves the API as ``{"type": ..., "message": ...}``. Domain
messages (e.g. "This account has been banned.") are meant for end users
and are passed through unchanged.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from barberbook.core.exceptions import AppException

logger = logging.getLogger("barberbook.exception")


def _error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"type": error_type, "message": message},
    )


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses raised by the store or the routes."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": exc.error_type,
    }
    if exc.status_code >= 500:
        logger.error("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    else:
        logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    return _error_response(exc.status_code, exc.error_type, exc.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors (unknown path, wrong method)."""
    return _error_response(exc.status_code, "http_error", str(exc.detail))


def _describe_validation_error(error: dict) -> str:
    field = ".".join(
        str(loc) for loc in error["loc"] if loc not in {"body", "query", "path"}
    )
    return f"{field}: {error['msg']}" if field else error["msg"]


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with the unified format."""
    message = "; ".join(_describe_validation_error(error) for error in exc.errors())
    return _error_response(422, "validation_error", message)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=True,
    )
    return _error_response(500, "internal_error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
