"""Error Handlers: global exception handlers for the NC News API.

Invariants:
    - NcNewsError → plain-text body equal to its message, status from HTTP_STATUS_BY_KIND
    - Unmatched path (framework 404) → 404 "Path not found"
    - Exception (catch-all) → 500 "Internal server error", never leaks internal details
    - Every error body is a single line of text/plain, never JSON

Design Decisions:
    - Three-layer handler: domain (NcNewsError), routing (HTTPException), catch-all (Exception)
    - Registered from main.py via register_error_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nc_news.core.errors import (
    INTERNAL_ERROR_MESSAGE, NcNewsError, PathNotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_news_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(exc: NcNewsError, request: Request) -> PlainTextResponse:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "status_code": exc.http_status,
        "debug_info": exc.debug_info or None,
    }
    if exc.http_status >= 500:
        logger.error(f"NcNewsError: {exc.message}", extra=extra)
    else:
        logger.warning(f"NcNewsError: {exc.message}", extra=extra)
    return PlainTextResponse(exc.to_response(), status_code=exc.http_status)


def _register_news_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(NcNewsError)
    async def news_error_handler(request: Request, exc: NcNewsError):
        return _error_response(exc, request)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (fallback route)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return _error_response(PathNotFoundError(request.url.path), request)
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
        )
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
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
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
