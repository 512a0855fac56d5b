"""CLI entry point for resilient-http.

Usage:
    resilient-http request <url> [options]
    resilient-http check-config <config.yaml>
"""

import json
import logging
import sys
import time
from dataclasses import replace
from typing import Optional

import click

from .client import HTTPClient
from .config.parser import parse_config
from .config.schema import HTTPOptions
from .config.validator import validate_options
from .logging_config import setup_logging
from .transport.cancellation import CancellationToken
from .transport.errors import HTTPTransportError, RetriesExhaustedError

logger = logging.getLogger(__name__)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Resilient HTTP client with automatic retry."""
    setup_logging("DEBUG" if verbose else None)


@main.command("request")
@click.argument("url")
@click.option("-X", "--method", default="GET", show_default=True, help="HTTP method.")
@click.option("-H", "--header", "headers", multiple=True, help="Header as 'Name: value'.")
@click.option("-d", "--data", default=None, help="Request body.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML config file.")
@click.option("--retry", "retry_count", type=int, default=None, help="Retry count (0 disables retry).")
@click.option("--initial-delay", type=float, default=None, help="Initial backoff in seconds.")
@click.option("--max-delay", type=float, default=None, help="Backoff cap in seconds.")
@click.option("--exponent-factor", type=float, default=None, help="Backoff growth factor.")
@click.option("--max-jitter", type=float, default=None, help="Maximum jitter in seconds.")
@click.option("--deadline", type=float, default=None, help="Overall deadline in seconds.")
@click.option("--pretty", is_flag=True, help="Pretty print output.")
def request_command(
    url: str,
    method: str,
    headers: tuple[str, ...],
    data: Optional[str],
    config_path: Optional[str],
    retry_count: Optional[int],
    initial_delay: Optional[float],
    max_delay: Optional[float],
    exponent_factor: Optional[float],
    max_jitter: Optional[float],
    deadline: Optional[float],
    pretty: bool,
):
    """Send a request to URL and print the response as JSON."""
    start_time = time.time()

    try:
        options = parse_config(config_path) if config_path else HTTPOptions()
        logger.debug("Loaded options: %s", options)
    except (FileNotFoundError, ValueError) as e:
        output_error("request", f"Failed to load config: {e}", pretty=pretty)
        sys.exit(1)

    overrides = {
        "retry_count": retry_count,
        "initial_delay": initial_delay,
        "max_delay": max_delay,
        "exponent_factor": exponent_factor,
        "max_jitter_interval": max_jitter,
    }
    options = replace(options, **{k: v for k, v in overrides.items() if v is not None})

    header_map = parse_headers(headers)
    token = CancellationToken.with_timeout(deadline) if deadline is not None else None

    try:
        with HTTPClient(options=options) as client:
            response = client.request(
                method,
                url,
                headers=header_map,
                body=data.encode("utf-8") if data is not None else None,
                cancel_token=token,
            )
    except KeyboardInterrupt:
        duration_ms = int((time.time() - start_time) * 1000)
        output_error("request", "Request interrupted by user", pretty=pretty, duration_ms=duration_ms)
        sys.exit(130)
    except RetriesExhaustedError as e:
        duration_ms = int((time.time() - start_time) * 1000)
        output_error("request", str(e), pretty=pretty, attempts=e.attempts, duration_ms=duration_ms)
        sys.exit(1)
    except HTTPTransportError as e:
        duration_ms = int((time.time() - start_time) * 1000)
        output_error("request", f"{type(e).__name__}: {e}", pretty=pretty, duration_ms=duration_ms)
        sys.exit(1)

    output = {
        "success": response.ok,
        "command": "request",
        "data": {
            "status_code": response.status_code,
            "url": response.url,
            "headers": response.headers,
            "body": response.text,
            "duration_ms": int((time.time() - start_time) * 1000),
        },
        "message": None if response.ok else f"HTTP {response.status_code}",
    }
    print_json(output, pretty)

    if not response.ok:
        sys.exit(1)


@main.command("check-config")
@click.argument("config_path", type=click.Path(dir_okay=False))
@click.option("--pretty", is_flag=True, help="Pretty print output.")
def check_config_command(config_path: str, pretty: bool):
    """Validate a YAML config file."""
    try:
        options = parse_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        output_error("check-config", f"Failed to parse config: {e}", pretty=pretty)
        sys.exit(1)

    validation = validate_options(options)
    output = {
        "success": validation.valid,
        "command": "check-config",
        "data": {
            "options": options.to_dict(),
            "validation": validation.to_dict(),
        },
        "message": str(validation),
    }
    print_json(output, pretty)

    if not validation.valid:
        sys.exit(1)


def parse_headers(headers: tuple[str, ...]) -> dict[str, str]:
    """Parse 'Name: value' header strings."""
    parsed: dict[str, str] = {}
    for header in headers:
        name, sep, value = header.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"Invalid header '{header}'. Expected 'Name: value'.",
                param_hint="'-H' / '--header'",
            )
        parsed[name.strip()] = value.strip()
    return parsed


def output_error(command: str, message: str, pretty: bool = False, **extra):
    """Output error in the CLI's JSON format."""
    output = {
        "success": False,
        "command": command,
        "data": extra or None,
        "message": message,
    }
    print_json(output, pretty)


def print_json(output: dict, pretty: bool = False):
    click.echo(json.dumps(output, ensure_ascii=False, indent=2 if pretty else None))


if __name__ == "__main__":
    main()
