"""
Exception hierarchy for the oEQ client library.

Every failure leaving the library is an ``OeqClientError`` and belongs to
exactly one of three kinds:

- ``NETWORK_FAILURE``: no HTTP response was obtained (connection refused,
  DNS failure, timeout, ...)
- ``HTTP_ERROR``: the server answered with a non-2xx status
- ``SHAPE_MISMATCH``: the server answered, but the payload does not have the
  shape the caller declared

``normalize_error`` is the single place where transport exceptions are
translated into this taxonomy.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

import httpx


class ErrorKind(str, Enum):
    NETWORK_FAILURE = "network_failure"
    HTTP_ERROR = "http_error"
    SHAPE_MISMATCH = "shape_mismatch"


class OeqClientError(Exception):
    """
    Base exception for all oEQ client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (only for HTTP errors)
        details: Additional error details, e.g. the decoded error body
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"kind={self.kind.value!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Network Errors (no response)
# =============================================================================


class NetworkError(OeqClientError):
    """
    The request failed before any HTTP response was received.

    Raised on connection problems, DNS failures, protocol errors and
    transport-enforced timeouts.
    """

    kind = ErrorKind.NETWORK_FAILURE

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# HTTP Errors (non-2xx response)
# =============================================================================


class HttpError(OeqClientError):
    """
    The server responded with an error status.

    ``message`` is the server supplied message when the body carried one,
    otherwise the HTTP status text.
    """

    kind = ErrorKind.HTTP_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class BadRequestError(HttpError):
    """The server rejected the request parameters (400)."""


class AuthenticationError(HttpError):
    """No valid session, or the credentials were rejected (401)."""


class AuthorizationError(HttpError):
    """The session user lacks the privilege for this operation (403)."""


class NotFoundError(HttpError):
    """Requested resource was not found (404)."""


class ConflictError(HttpError):
    """Request conflicts with the current state of the resource (409)."""


class ServerError(HttpError):
    """Server-side error occurred (5xx)."""


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable (503)."""


# =============================================================================
# Shape Errors (response received, payload rejected)
# =============================================================================


MISMATCH_MESSAGE = "Data format mismatch with data received from server."


class ShapeMismatchError(OeqClientError):
    """The response payload does not conform to the declared shape."""

    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(
        self,
        message: str = MISMATCH_MESSAGE,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


# =============================================================================
# Normalization
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}

# Keys an oEQ error body may carry its message under, most specific first
_MESSAGE_KEYS = ("error_description", "message", "detail", "error")

_MAX_MESSAGE_CHARS = 2048


def exception_from_status(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> HttpError:
    """
    Create the appropriate HttpError subclass for a status code.

    Args:
        status_code: HTTP status code
        message: Error message
        details: Additional error details

    Returns:
        HttpError or one of its subclasses
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else HttpError
    return exception_class(message, status_code=status_code, details=details)


def _server_message(response: httpx.Response) -> Tuple[Optional[str], Dict[str, Any]]:
    """Pull the server's error message (and JSON body, if any) out of a response."""
    try:
        body = response.json()
    except (ValueError, UnicodeDecodeError):
        text = (response.text or "").strip()
        return (text[:_MAX_MESSAGE_CHARS] or None), {}

    if isinstance(body, dict):
        for key in _MESSAGE_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip(), body
        return None, body
    if isinstance(body, str) and body.strip():
        return body.strip(), {}
    return None, {}


def error_from_response(response: httpx.Response) -> HttpError:
    """Convert a non-2xx response into an HttpError carrying its status."""
    status_code = response.status_code
    message, details = _server_message(response)
    if not message:
        message = response.reason_phrase or f"HTTP {status_code}"
    return exception_from_status(status_code, message, details)


def normalize_error(exc: BaseException) -> OeqClientError:
    """
    Translate any request failure into an OeqClientError.

    Errors that are already normalized pass through unchanged.
    """
    if isinstance(exc, OeqClientError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        return error_from_response(exc.response)
    if isinstance(exc, httpx.TimeoutException):
        return TimeoutError(f"Request timed out: {exc}")
    if isinstance(exc, httpx.ConnectError):
        return ConnectionError(f"Connection failed: {exc}")
    # Any other transport failure (DNS, protocol, redirects) has no response either
    return NetworkError(f"Request failed: {exc}")
