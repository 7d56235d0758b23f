"""Error Hierarchy: typed exceptions and the single kind -> HTTP status table.

Invariants:
    - Every error has a message (str), kind (ErrorKind), severity (ErrorSeverity)
    - HTTP_STATUS_BY_KIND is the only place a failure kind becomes a status code
    - to_response() is the plain-text body sent to the client, one line, no internals
    - BAD_REQUEST maps to 404, not 400 (kept for client compatibility)

Design Decisions:
    - Single hierarchy with NcNewsError base: one global handler catches all
    - Internal details go into debug_info for logging, never into message
"""

from typing import Any

from nc_news.core.domain_types import ErrorKind, ErrorSeverity


INVALID_ID_MESSAGE = "Invalid id"
BAD_REQUEST_MESSAGE = "Bad request - invalid input"
PATH_NOT_FOUND_MESSAGE = "Path not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    # Compatibility: existing clients expect 404 for a rejected PATCH body.
    ErrorKind.BAD_REQUEST: 404,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


def map_failure(kind: ErrorKind, message: str) -> tuple[int, str]:
    """Translate a failure kind into (HTTP status, client-facing message)."""
    if kind is ErrorKind.INTERNAL:
        return HTTP_STATUS_BY_KIND[kind], INTERNAL_ERROR_MESSAGE
    return HTTP_STATUS_BY_KIND[kind], message


class NcNewsError(Exception):
    """Base exception for all NC News errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        debug_info: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.severity = severity
        self.debug_info = debug_info or {}

    @property
    def code(self) -> str:
        return self.kind.value.upper()

    @property
    def http_status(self) -> int:
        return map_failure(self.kind, self.message)[0]

    def to_response(self) -> str:
        """Plain-text body for the HTTP response."""
        return map_failure(self.kind, self.message)[1]


# ─── Client Errors ──────────────────────────────────────────────

class InvalidInputError(NcNewsError):
    """Malformed path parameter (e.g. non-numeric article id)."""
    def __init__(self, message: str = INVALID_ID_MESSAGE):
        super().__init__(message, ErrorKind.INVALID_INPUT, ErrorSeverity.WARNING)


class BadRequestError(NcNewsError):
    """Request body present but semantically invalid."""
    def __init__(self, message: str = BAD_REQUEST_MESSAGE):
        super().__init__(message, ErrorKind.BAD_REQUEST, ErrorSeverity.WARNING)


class PathNotFoundError(NcNewsError):
    """No route matches the request path."""
    def __init__(self, path: str | None = None):
        super().__init__(
            PATH_NOT_FOUND_MESSAGE, ErrorKind.NOT_FOUND, ErrorSeverity.INFO,
            debug_info={"path": path} if path else None,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(NcNewsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            ErrorKind.INTERNAL, ErrorSeverity.CRITICAL,
            debug_info={"operation": operation},
        )
        self.operation = operation


_ERROR_BY_KIND: dict[ErrorKind, type[NcNewsError]] = {
    ErrorKind.INVALID_INPUT: InvalidInputError,
    ErrorKind.BAD_REQUEST: BadRequestError,
}


def error_for(kind: ErrorKind, message: str) -> NcNewsError:
    """Build the exception that carries a failure to the error handlers."""
    error_cls = _ERROR_BY_KIND.get(kind)
    if error_cls is not None:
        return error_cls(message)
    severity = ErrorSeverity.CRITICAL if kind is ErrorKind.INTERNAL else ErrorSeverity.INFO
    return NcNewsError(message, kind, severity)
