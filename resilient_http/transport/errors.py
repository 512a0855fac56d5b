"""Exception types raised by the HTTP transport.

All errors derive from HTTPTransportError so callers can catch the whole
family with one clause.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import Response


class HTTPTransportError(Exception):
    """Base class for all transport errors."""


class TransportError(HTTPTransportError):
    """Connection-level failure (refused, reset, timeout, DNS).

    Treated as transient by the retry policy.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RetriesExhaustedError(HTTPTransportError):
    """Retry budget consumed without a successful or fatal outcome."""

    def __init__(
        self,
        attempts: int,
        last_error: Optional[BaseException] = None,
        last_response: Optional["Response"] = None,
    ):
        if last_error is not None:
            reason = str(last_error) or type(last_error).__name__
        elif last_response is not None:
            reason = f"last response status {last_response.status_code}"
        else:
            reason = "no outcome recorded"
        super().__init__(f"request failed after {attempts} attempts: {reason}")
        self.attempts = attempts
        self.last_error = last_error
        self.last_response = last_response


class RequestCancelledError(HTTPTransportError):
    """The caller cancelled the request."""

    reason = "cancelled"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or f"request {self.reason}")


class DeadlineExceededError(RequestCancelledError):
    """The caller's deadline expired."""

    reason = "deadline exceeded"


class HTTPStatusError(HTTPTransportError):
    """Raised by Response.raise_for_status() for 4xx/5xx responses."""

    def __init__(self, message: str, response: "Response"):
        super().__init__(message)
        self.response = response


class InvalidRequestError(HTTPTransportError):
    """The request itself is malformed (bad URL, scheme or header).

    Never retried.
    """


class NonReplayableBodyError(HTTPTransportError, ValueError):
    """A retrying transport was given a body that can only be read once."""


class ConfigError(HTTPTransportError, ValueError):
    """Invalid transport or client configuration."""
