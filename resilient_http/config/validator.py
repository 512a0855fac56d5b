"""Options validator for the HTTP client.

Validates HTTPOptions against the backoff and transport rules.
"""

from .schema import HTTPOptions, ValidationError, ValidationResult

# Retry budgets above this are usually a misconfiguration
MAX_REASONABLE_RETRIES = 10


def validate_options(options: HTTPOptions) -> ValidationResult:
    """Validate an HTTPOptions object.

    Checks:
    - Retry count and backoff delays are non-negative
    - max_delay >= initial_delay and exponent_factor >= 1
    - Timeouts, pool size and user agent

    Args:
        options: Options to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    _validate_retry(options, errors, warnings)
    _validate_backoff(options, errors, warnings)
    _validate_transport(options, errors)

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_retry(
    options: HTTPOptions,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    if options.retry_count < 0:
        errors.append(ValidationError(
            path="retry_count",
            message=f"Retry count must be non-negative, got {options.retry_count}.",
        ))
    elif options.retry_count == 0:
        warnings.append(ValidationError(
            path="retry_count",
            message="Retry count is 0. Requests will not be retried.",
            severity="warning",
        ))
    elif options.retry_count > MAX_REASONABLE_RETRIES:
        warnings.append(ValidationError(
            path="retry_count",
            message=f"Retry count {options.retry_count} is unusually high (> {MAX_REASONABLE_RETRIES}).",
            severity="warning",
        ))


def _validate_backoff(
    options: HTTPOptions,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    for name in ("initial_delay", "max_delay", "max_jitter_interval"):
        value = getattr(options, name)
        if value < 0:
            errors.append(ValidationError(
                path=name,
                message=f"'{name}' must be non-negative, got {value}.",
            ))

    if options.max_delay < options.initial_delay:
        errors.append(ValidationError(
            path="max_delay",
            message=f"'max_delay' ({options.max_delay}) must be >= 'initial_delay' ({options.initial_delay}).",
        ))

    if options.exponent_factor < 1.0:
        errors.append(ValidationError(
            path="exponent_factor",
            message=f"'exponent_factor' must be >= 1, got {options.exponent_factor}.",
        ))
    elif options.exponent_factor == 1.0:
        warnings.append(ValidationError(
            path="exponent_factor",
            message="'exponent_factor' is 1. Backoff delay will not grow between attempts.",
            severity="warning",
        ))

    if options.max_jitter_interval == 0 and options.retry_count > 0:
        warnings.append(ValidationError(
            path="max_jitter_interval",
            message="No jitter configured. Concurrent clients will retry in lockstep.",
            severity="warning",
        ))


def _validate_transport(
    options: HTTPOptions,
    errors: list[ValidationError],
) -> None:
    for name in ("request_timeout", "connect_timeout"):
        value = getattr(options, name)
        if value <= 0:
            errors.append(ValidationError(
                path=name,
                message=f"'{name}' must be positive, got {value}.",
            ))

    if options.max_idle_connections <= 0:
        errors.append(ValidationError(
            path="max_idle_connections",
            message=f"'max_idle_connections' must be positive, got {options.max_idle_connections}.",
        ))

    if not options.user_agent:
        errors.append(ValidationError(
            path="user_agent",
            message="'user_agent' must not be empty.",
        ))
