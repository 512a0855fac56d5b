"""Construction-time choice between a plain and a retrying transport."""

from typing import Optional

from .backoff import BackoffConfig
from .models import RequestExecutor
from .retry_policy import RetryPolicy
from .retryable import RetryableTransport, RetryHook


def select_transport(
    executor: RequestExecutor,
    max_retries: int,
    backoff: Optional[BackoffConfig] = None,
    policy: Optional[RetryPolicy] = None,
    on_retry: Optional[RetryHook] = None,
) -> RequestExecutor:
    """Wrap `executor` with retries when `max_retries` is positive.

    Args:
        executor: Underlying single-attempt executor.
        max_retries: Retry budget. Zero or less disables retrying.
        backoff: Backoff settings for the retrying transport.
        policy: Outcome classifier for the retrying transport.
        on_retry: Optional retry hook for the retrying transport.

    Returns:
        `executor` itself when retries are disabled, else a RetryableTransport.
    """
    if max_retries <= 0:
        return executor

    return RetryableTransport(
        executor,
        max_retries=max_retries,
        backoff=backoff,
        policy=policy,
        on_retry=on_retry,
    )
