"""Cancellation tokens for in-flight requests.

A token combines an explicit cancel signal with an optional deadline and is
carried on a Request. The retrying transport checks it before each attempt
and waits on it during backoff, so a cancel wakes the sleeper at once.
"""

import threading
import time
from typing import Optional

from .errors import DeadlineExceededError, RequestCancelledError


class CancellationToken:
    """Cancel signal with an optional deadline.

    Safe to share between threads: one thread may call cancel() while
    another is sleeping in wait().
    """

    def __init__(self, timeout: Optional[float] = None):
        """Initialize the token.

        Args:
            timeout: Seconds from now until the deadline. None = no deadline.
        """
        if timeout is not None and timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")
        self._event = threading.Event()
        self._deadline: Optional[float] = (
            time.monotonic() + timeout if timeout is not None else None
        )

    @classmethod
    def with_timeout(cls, timeout: float) -> "CancellationToken":
        """Create a token that expires after `timeout` seconds."""
        return cls(timeout=timeout)

    @property
    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    @property
    def is_expired(self) -> bool:
        """Whether the deadline has passed."""
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def cancelled(self) -> bool:
        """Whether cancel() was called or the deadline has passed."""
        return self._event.is_set() or self.is_expired

    def cancel(self) -> None:
        """Signal cancellation. Idempotent."""
        self._event.set()

    def error(self) -> RequestCancelledError:
        """Build the exception describing why the token is done."""
        if self._event.is_set():
            return RequestCancelledError()
        return DeadlineExceededError()

    def raise_if_cancelled(self) -> None:
        """Raise the matching cancellation error if the token is done."""
        if self.cancelled:
            raise self.error()

    def sleep(self, seconds: float) -> None:
        """Sleep for `seconds` unless cancelled first.

        Raises:
            RequestCancelledError: If cancel() is called during the wait.
            DeadlineExceededError: If the deadline expires during the wait.
        """
        self.raise_if_cancelled()

        remaining = self.remaining
        if remaining is not None and remaining < seconds:
            # Deadline falls inside the wait
            if self._event.wait(remaining):
                raise RequestCancelledError()
            raise DeadlineExceededError()

        if self._event.wait(seconds):
            raise RequestCancelledError()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"CancellationToken({state}, remaining={self.remaining})"
