"""Transport module - retrying HTTP request execution."""

from .backoff import BackoffCalculator, BackoffConfig
from .cancellation import CancellationToken
from .errors import (
    ConfigError,
    DeadlineExceededError,
    HTTPStatusError,
    HTTPTransportError,
    InvalidRequestError,
    NonReplayableBodyError,
    RequestCancelledError,
    RetriesExhaustedError,
    TransportError,
)
from .models import (
    Attempt,
    Decision,
    OutcomeKind,
    Request,
    RequestExecutor,
    Response,
    RetryOutcome,
)
from .requests_executor import RequestsExecutor
from .retry_policy import RetryPolicy, default_retry_policy
from .retryable import RetryableTransport
from .selector import select_transport

__all__ = [
    "BackoffCalculator",
    "BackoffConfig",
    "CancellationToken",
    "ConfigError",
    "DeadlineExceededError",
    "HTTPStatusError",
    "HTTPTransportError",
    "InvalidRequestError",
    "NonReplayableBodyError",
    "RequestCancelledError",
    "RetriesExhaustedError",
    "TransportError",
    "Attempt",
    "Decision",
    "OutcomeKind",
    "Request",
    "RequestExecutor",
    "Response",
    "RetryOutcome",
    "RequestsExecutor",
    "RetryPolicy",
    "default_retry_policy",
    "RetryableTransport",
    "select_transport",
]
