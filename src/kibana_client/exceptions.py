"""
Exception hierarchy for the Kibana client library.

Every failure surfaced by the library derives from KibanaClientError. API
errors (non-success status codes) are ErrorResponse instances, specialised
by status code; they keep the raw body and the response envelope so callers
can still inspect transport-level metadata.
"""

from typing import TYPE_CHECKING, Dict, Optional, Type
from urllib.parse import unquote

if TYPE_CHECKING:
    from kibana_client.http import Response


UNKNOWN_ERROR_FORMAT = "failed to parse unknown error format"


class KibanaClientError(Exception):
    """
    Base exception for all Kibana client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if a response was received)
        response: Response envelope (if a response was received)
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response: Optional["Response"] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Construction Errors
# =============================================================================


class ConfigurationError(KibanaClientError):
    """Invalid client configuration, raised before any request is possible."""


# =============================================================================
# Build Errors
# =============================================================================


class RequestBuildError(KibanaClientError):
    """The request could not be constructed; nothing was sent."""


class InvalidPathError(RequestBuildError):
    """The relative request path contains a malformed percent escape."""

    def __init__(self, path: str, *, message: Optional[str] = None):
        super().__init__(message or f"invalid URL escape in path: {path!r}")
        self.path = path


# =============================================================================
# Network Errors (no response received)
# =============================================================================


class NetworkError(KibanaClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport failure. The originating httpx exception is available as
    ``__cause__``. ``response`` is set only when the failure happened while
    reading the body of a response that did arrive.
    """

    def __init__(self, message: str = "Network error", *, response: Optional["Response"] = None):
        super().__init__(
            message,
            status_code=response.status_code if response is not None else None,
            response=response,
        )


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(self, message: str = "Request timed out", *, response: Optional["Response"] = None):
        super().__init__(message, response=response)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(self, message: str = "Failed to connect to server", *, response: Optional["Response"] = None):
        super().__init__(message, response=response)


# =============================================================================
# Decode Errors
# =============================================================================


class DecodeError(KibanaClientError):
    """A success response body could not be decoded into the requested type."""


# =============================================================================
# API Errors
# =============================================================================


class ErrorResponse(KibanaClientError):
    """
    The API answered with a status code outside the success set.

    Attributes:
        body: Raw response body bytes
        response: Response envelope of the failed call
        message: Message derived from the error payload
    """

    def __init__(
        self,
        message: str,
        *,
        response: "Response",
        body: bytes = b"",
    ):
        super().__init__(
            message,
            status_code=response.status_code,
            response=response,
        )
        self.body = body

    def __str__(self) -> str:
        request = self.response.request
        path = unquote(request.url.path)
        url = f"{request.url.scheme}://{request.url.netloc.decode('ascii')}{path}"
        return f"{request.method} {url}: {self.status_code} {self.message}"


class ValidationError(ErrorResponse):
    """The API rejected the request payload (400)."""


class AuthenticationError(ErrorResponse):
    """Missing or invalid credentials (401)."""


class AuthorizationError(ErrorResponse):
    """Authenticated, but not allowed to perform the operation (403)."""


class NotFoundError(ErrorResponse):
    """The requested resource does not exist (404)."""


class ConflictError(ErrorResponse):
    """The resource already exists or was modified concurrently (409)."""


class ServerError(ErrorResponse):
    """The server failed to handle the request (5xx)."""


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS: Dict[int, Type[ErrorResponse]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
}


def exception_from_response(
    response: "Response",
    message: str,
    body: bytes = b"",
) -> ErrorResponse:
    """
    Create an appropriate exception from an API error response.

    Args:
        response: Response envelope of the failed call
        message: Error message derived from the payload
        body: Raw response body

    Returns:
        Appropriate ErrorResponse subclass
    """
    status_code = response.status_code
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else ErrorResponse
    return exception_class(message, response=response, body=body)
