"""Config module - client options, YAML parsing and validation."""

from .schema import (
    DEFAULT_USER_AGENT,
    HTTPOptions,
    ValidationError,
    ValidationResult,
    aggressive_http_options,
    default_http_options,
    no_retry_http_options,
)
from .parser import parse_config, parse_config_data, parse_duration
from .validator import validate_options

__all__ = [
    "DEFAULT_USER_AGENT",
    "HTTPOptions",
    "ValidationError",
    "ValidationResult",
    "aggressive_http_options",
    "default_http_options",
    "no_retry_http_options",
    "parse_config",
    "parse_config_data",
    "parse_duration",
    "validate_options",
]
