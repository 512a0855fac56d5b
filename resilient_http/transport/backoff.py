"""Exponential backoff with jitter.

Provides the immutable backoff configuration and the delay calculation used
between retry attempts.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

# OS-entropy generator: no shared seed state, safe to call from any thread
_jitter_source = random.SystemRandom()


@dataclass(frozen=True)
class BackoffConfig:
    """Backoff settings. All durations in seconds."""
    initial_delay: float = 0.002
    max_delay: float = 0.010
    exponent_factor: float = 2.0
    max_jitter: float = 0.002

    def __post_init__(self):
        for name in ("initial_delay", "max_delay", "max_jitter"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(f"{name} must be non-negative, got {value}")
        if self.max_delay < self.initial_delay:
            raise ConfigError(
                f"max_delay ({self.max_delay}) must be >= initial_delay ({self.initial_delay})"
            )
        if self.exponent_factor < 1.0:
            raise ConfigError(
                f"exponent_factor must be >= 1, got {self.exponent_factor}"
            )


class BackoffCalculator:
    """Maps a 0-indexed attempt number to the delay before the next attempt."""

    def __init__(
        self,
        config: BackoffConfig,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the calculator.

        Args:
            config: Backoff settings.
            rng: Jitter source. Default: process-wide SystemRandom.
        """
        self.config = config
        self._rng = rng or _jitter_source
        self._cap_attempt = self._attempt_reaching_cap(config)

    @staticmethod
    def _attempt_reaching_cap(config: BackoffConfig) -> Optional[float]:
        """Smallest (fractional) attempt index whose base delay hits max_delay."""
        if config.initial_delay <= 0 or config.exponent_factor <= 1.0:
            return None
        return math.log(config.max_delay / config.initial_delay, config.exponent_factor)

    def base_delay(self, attempt: int) -> float:
        """Capped exponential delay without jitter."""
        if attempt < 0:
            raise ValueError(f"attempt must be non-negative, got {attempt}")

        cfg = self.config
        if cfg.initial_delay <= 0:
            return 0.0
        # Well past the cap: skip the power, it may overflow
        if self._cap_attempt is not None and attempt > self._cap_attempt + 1:
            return cfg.max_delay
        try:
            return min(cfg.max_delay, cfg.initial_delay * cfg.exponent_factor ** attempt)
        except OverflowError:
            return cfg.max_delay

    def delay(self, attempt: int) -> float:
        """Delay to wait after the `attempt`-th failure.

        Args:
            attempt: 0-indexed attempt that just failed.

        Returns:
            Seconds to sleep: base delay plus jitter in [0, max_jitter].
        """
        delay = self.base_delay(attempt)
        if self.config.max_jitter > 0:
            delay += self._rng.uniform(0.0, self.config.max_jitter)
        return delay
