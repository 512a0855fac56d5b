"""Retry policy for HTTP transport.

Classifies the outcome of a single attempt: server errors and connection
failures are transient, client errors are not.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import RequestCancelledError, TransportError
from .models import Decision, Response


@dataclass(frozen=True)
class RetryPolicy:
    """Outcome classifier for one attempt."""
    retryable_exceptions: tuple = (TransportError,)
    server_error_threshold: int = 500
    client_error_threshold: int = 400

    def classify(
        self,
        response: Optional[Response] = None,
        error: Optional[BaseException] = None,
    ) -> Decision:
        """Decide what to do after one attempt.

        Args:
            response: Response returned by the executor, if any.
            error: Exception raised by the executor, if any.

        Returns:
            RETRY for transport errors and 5xx, FATAL for 4xx and
            cancellation, SUCCESS for anything below 400.
        """
        if error is not None:
            if isinstance(error, RequestCancelledError):
                return Decision.FATAL
            if isinstance(error, self.retryable_exceptions):
                return Decision.RETRY
            return Decision.FATAL

        if response is None:
            raise ValueError("classify() needs a response or an error")

        if response.status_code >= self.server_error_threshold:
            return Decision.RETRY
        if response.status_code >= self.client_error_threshold:
            return Decision.FATAL
        return Decision.SUCCESS


def default_retry_policy() -> RetryPolicy:
    """5xx and connection failures retried, 4xx fatal."""
    return RetryPolicy()
