"""
Custom exception hierarchy for the lang‑services library.

All public exceptions inherit from :class:`LangServicesError`, allowing callers
to catch a single base class for any service‑related failure while still being
able to differentiate specific error conditions when needed.

Transport failures raised by ``requests`` (connection errors, timeouts) are
not wrapped and reach the caller unchanged.
"""

from typing import Optional


class LangServicesError(Exception):
    """Base exception for all lang‑services‑specific errors."""

    pass


class InvalidArgumentError(LangServicesError, ValueError):
    """Raised before any network I/O when a required argument is missing or empty."""

    pass


class DeserializationError(LangServicesError):
    """Raised when a response body is not JSON or does not match the expected shape."""

    pass


class ServiceResponseError(LangServicesError):
    """
    Raised when the server answers with a non‑2xx status.

    Attributes
    ----------
    status_code : int
        HTTP status returned by the service.
    message : str
        Error message provided by the service (or the raw body).
    """

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message or ""
        super().__init__(f"HTTP {status_code}: {self.message}")


class BadRequestError(ServiceResponseError):
    """Raised when the server returns HTTP 400 – malformed request payload."""

    pass


class AuthenticationError(ServiceResponseError):
    """Raised when the server returns HTTP 401/403 – invalid or missing credentials."""

    pass


class NotFoundError(ServiceResponseError):
    """Raised when the server returns HTTP 404 – unknown model, voice or path."""

    pass


class RateLimitError(ServiceResponseError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass


class InternalServerError(ServiceResponseError):
    """Raised when the server returns any HTTP 5xx status."""

    pass
