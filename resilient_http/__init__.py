"""HTTP transport with bounded retry, exponential backoff and jitter."""

__version__ = "0.1.0"

from .client import HTTPClient
from .config import HTTPOptions, parse_config, validate_options
from .transport import (
    BackoffCalculator,
    BackoffConfig,
    CancellationToken,
    HTTPTransportError,
    Request,
    RequestCancelledError,
    RequestsExecutor,
    Response,
    RetriesExhaustedError,
    RetryableTransport,
    RetryPolicy,
    TransportError,
    select_transport,
)

__all__ = [
    "__version__",
    "HTTPClient",
    "HTTPOptions",
    "parse_config",
    "validate_options",
    "BackoffCalculator",
    "BackoffConfig",
    "CancellationToken",
    "HTTPTransportError",
    "Request",
    "RequestCancelledError",
    "RequestsExecutor",
    "Response",
    "RetriesExhaustedError",
    "RetryableTransport",
    "RetryPolicy",
    "TransportError",
    "select_transport",
]
