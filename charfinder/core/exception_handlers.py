"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error leaves the app
in the same body shape as a failed search: status "error", a message, and
charNames null.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from charfinder.core.config import get_settings
from charfinder.domain.enums import ErrorReason, ResultStatus
from charfinder.domain.exceptions import CharFinderException

logger = logging.getLogger(__name__)


def error_body(message: Any) -> dict[str, Any]:
    """Response body for an error result."""
    return {"status": ResultStatus.ERROR.value, "message": message, "charNames": None}


def status_for(exc: CharFinderException) -> int:
    """HTTP status for a domain error code; unknown codes are server errors."""
    if exc.error_code in ErrorReason.values():
        return ErrorReason(exc.error_code).http_status
    return 500


def _charfinder_exception_handler(
    request: Request, exc: CharFinderException
) -> JSONResponse:
    """Return the error body with the status mapped from exc.error_code."""
    status = status_for(exc)
    if status >= 500:
        logger.error("%s: %s %s", exc.error_code, exc.message, exc.details)
    return JSONResponse(status_code=status, content=error_body(exc.message))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request shape is an invalid query (400)."""
    logger.info("Request validation failed: %s", exc.errors())
    return JSONResponse(status_code=400, content=error_body("Invalid query given"))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the error body for Starlette HTTP exceptions (e.g. 404, 405)."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.detail))


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(status_code=500, content=error_body(detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: CharFinderException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(CharFinderException, _charfinder_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
