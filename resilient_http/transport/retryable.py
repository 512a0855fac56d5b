"""Retrying transport.

Wraps a RequestExecutor with a bounded attempt loop:

1. Execute the request
2. Classify the outcome (RetryPolicy)
3. Return on success or fatal outcome
4. Otherwise sleep for the backoff delay and try again
5. Give up with RetriesExhaustedError when the budget is spent
"""

import time
from typing import Callable, Optional

from .backoff import BackoffCalculator, BackoffConfig
from .cancellation import CancellationToken
from .errors import (
    ConfigError,
    NonReplayableBodyError,
    RequestCancelledError,
    RetriesExhaustedError,
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
from .retry_policy import RetryPolicy, default_retry_policy

RetryHook = Callable[[Attempt, float], None]


class RetryableTransport:
    """RequestExecutor that retries transient failures with backoff.

    Configuration is fixed at construction and all per-call state lives in
    execute(), so one instance can serve concurrent callers without locking.
    The wrapped executor must itself be safe for concurrent use.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        max_retries: int,
        backoff: Optional[BackoffConfig] = None,
        policy: Optional[RetryPolicy] = None,
        on_retry: Optional[RetryHook] = None,
        calculator: Optional[BackoffCalculator] = None,
    ):
        """Initialize the transport.

        Args:
            executor: Underlying single-attempt executor.
            max_retries: Retries after the first attempt (>= 0).
            backoff: Backoff settings. Default: BackoffConfig().
            policy: Outcome classifier. Default: default_retry_policy().
            on_retry: Optional callback(attempt, delay) before each backoff sleep.
            calculator: Pre-built calculator (overrides `backoff`).
        """
        if max_retries < 0:
            raise ConfigError(f"max_retries must be non-negative, got {max_retries}")

        self._executor = executor
        self._max_retries = max_retries
        self._policy = policy or default_retry_policy()
        self._calculator = calculator or BackoffCalculator(backoff or BackoffConfig())
        self._on_retry = on_retry

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def backoff(self) -> BackoffConfig:
        return self._calculator.config

    def do(self, request: Request) -> Response:
        """Execute a request, retrying transient failures.

        Args:
            request: Request to send. Its body must be replayable.

        Returns:
            The first successful or 4xx response, unmodified.

        Raises:
            RetriesExhaustedError: If every attempt failed transiently.
            RequestCancelledError: If the request's token is cancelled.
            NonReplayableBodyError: If the body is a one-shot stream.
        """
        return self.execute(request).unwrap()

    def execute(self, request: Request) -> RetryOutcome:
        """Run the attempt loop and report the terminal outcome.

        Cancellation is raised rather than reported.
        """
        if not request.is_replayable:
            raise NonReplayableBodyError(
                "request body is a one-shot stream and cannot be retried; "
                "pass bytes or a body factory instead"
            )

        token = request.cancel_token
        last: Optional[Attempt] = None

        for index in range(self._max_retries + 1):
            if token is not None:
                token.raise_if_cancelled()

            attempt = self._attempt(index, request, token)
            decision = self._policy.classify(attempt.response, attempt.error)

            if decision == Decision.SUCCESS:
                return RetryOutcome(
                    kind=OutcomeKind.SUCCESS,
                    attempts=attempt.number,
                    response=attempt.response,
                )

            if decision == Decision.FATAL:
                if isinstance(attempt.error, RequestCancelledError):
                    raise attempt.error
                return RetryOutcome(
                    kind=OutcomeKind.FATAL,
                    attempts=attempt.number,
                    response=attempt.response if attempt.error is None else None,
                    error=attempt.error,
                )

            last = attempt
            if index < self._max_retries:
                delay = self._calculator.delay(index)
                if self._on_retry is not None:
                    self._on_retry(attempt, delay)
                self._sleep(delay, token)

        attempts = self._max_retries + 1
        error = RetriesExhaustedError(
            attempts=attempts,
            last_error=last.error,
            last_response=last.response,
        )
        error.__cause__ = last.error
        return RetryOutcome(kind=OutcomeKind.EXHAUSTED, attempts=attempts, error=error)

    def _attempt(
        self,
        index: int,
        request: Request,
        token: Optional[CancellationToken],
    ) -> Attempt:
        """Run one executor call and capture its outcome.

        If the token was cancelled while the call was in flight, the
        outcome is the cancellation: any response is discarded and a
        transient error is chained as its cause.
        """
        try:
            response = self._executor.do(request)
        except RequestCancelledError as e:
            return Attempt(index=index, error=e)
        except Exception as e:
            # A failure caused by the caller cancelling is not transient
            retryable = isinstance(e, self._policy.retryable_exceptions)
            if retryable and token is not None and token.cancelled:
                cancelled = token.error()
                cancelled.__cause__ = e
                return Attempt(index=index, error=cancelled)
            return Attempt(index=index, error=e)

        if token is not None and token.cancelled:
            return Attempt(index=index, error=token.error())
        return Attempt(index=index, response=response)

    @staticmethod
    def _sleep(delay: float, token: Optional[CancellationToken]) -> None:
        if token is not None:
            token.sleep(delay)
        elif delay > 0:
            time.sleep(delay)
