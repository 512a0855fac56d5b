"""Configuration data models for the HTTP client.

Defines dataclasses for client options and validation results.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from .. import __version__
from ..transport.backoff import BackoffConfig

DEFAULT_USER_AGENT = f"resilient-http/{__version__}"

# camelCase spellings accepted in config files
OPTION_ALIASES = {
    "retryCount": "retry_count",
    "initialDelay": "initial_delay",
    "maxDelay": "max_delay",
    "exponentFactor": "exponent_factor",
    "maxJitterInterval": "max_jitter_interval",
    "requestTimeout": "request_timeout",
    "connectTimeout": "connect_timeout",
    "maxIdleConnections": "max_idle_connections",
    "userAgent": "user_agent",
}

DURATION_FIELDS = {
    "initial_delay",
    "max_delay",
    "max_jitter_interval",
    "request_timeout",
    "connect_timeout",
}


@dataclass
class HTTPOptions:
    """HTTP client options. Durations in seconds."""
    retry_count: int = 2
    initial_delay: float = 0.002
    max_delay: float = 0.010
    exponent_factor: float = 2.0
    max_jitter_interval: float = 0.002
    request_timeout: float = 30.0
    connect_timeout: float = 5.0
    max_idle_connections: int = 10
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def retries_enabled(self) -> bool:
        return self.retry_count > 0

    @property
    def backoff(self) -> BackoffConfig:
        """Backoff settings for the retrying transport.

        Raises:
            ConfigError: If the delay values are inconsistent.
        """
        return BackoffConfig(
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
            exponent_factor=self.exponent_factor,
            max_jitter=self.max_jitter_interval,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary for serialization."""
        return asdict(self)


def default_http_options() -> HTTPOptions:
    """Create default options.

    2 retries, 2ms initial delay, 2x backoff, 10ms max, 2ms jitter.
    """
    return HTTPOptions()


def aggressive_http_options() -> HTTPOptions:
    """Create aggressive options for flaky connections.

    5 retries, 0.5s initial delay, 1.5x backoff, 10s max.
    """
    return HTTPOptions(
        retry_count=5,
        initial_delay=0.5,
        exponent_factor=1.5,
        max_delay=10.0,
        max_jitter_interval=0.25,
    )


def no_retry_http_options() -> HTTPOptions:
    """Create options that fail immediately (single attempt)."""
    return HTTPOptions(retry_count=0)


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of options validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [asdict(e) for e in self.errors],
            "warnings": [asdict(w) for w in self.warnings],
        }

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
