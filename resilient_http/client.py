"""HTTP client with automatic retry.

Builds the transport stack from HTTPOptions:
- RequestsExecutor  - one pooled HTTP request per attempt
- RetryableTransport - bounded retry with backoff (when retry_count > 0)
"""

import json as jsonlib
import logging
from typing import Any, Optional
from urllib.parse import urljoin

from .config.schema import HTTPOptions, default_http_options
from .config.validator import validate_options
from .transport.cancellation import CancellationToken
from .transport.errors import ConfigError
from .transport.models import Attempt, Request, RequestExecutor, Response
from .transport.requests_executor import RequestsExecutor
from .transport.selector import select_transport

logger = logging.getLogger(__name__)


class HTTPClient:
    """HTTP client that retries transient failures.

    4xx responses are returned as-is; call Response.raise_for_status() to
    turn them into exceptions.
    """

    def __init__(
        self,
        base_url: str = "",
        options: Optional[HTTPOptions] = None,
        executor: Optional[RequestExecutor] = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Prefix for relative request paths (e.g., https://api.example.com).
            options: Client options. Default: default_http_options().
            executor: Single-attempt executor. Default: a RequestsExecutor
                built from `options` (closed by close()).

        Raises:
            ConfigError: If the options are invalid.
        """
        self.base_url = base_url.rstrip("/")
        self.options = options or default_http_options()

        validation = validate_options(self.options)
        if not validation.valid:
            errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
            raise ConfigError(f"Invalid HTTP options: {errors_str}")
        for warning in validation.warnings:
            logger.debug("HTTP options warning: %s: %s", warning.path, warning.message)

        self._owns_executor = executor is None
        self._executor = executor or RequestsExecutor.from_options(self.options)
        self.transport = select_transport(
            self._executor,
            max_retries=self.options.retry_count,
            backoff=self.options.backoff if self.options.retries_enabled else None,
            on_retry=self._log_retry,
        )

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[dict[str, str]] = None,
        body: Any = None,
        json: Any = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Response:
        """Send a request through the retrying transport.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: Absolute URL or path relative to base_url.
            headers: Extra request headers.
            body: Raw body (bytes, str or a body factory).
            json: Object to send as a JSON body (overrides `body`).
            cancel_token: Token to cancel the request or bound its duration.

        Returns:
            Response object.

        Raises:
            RetriesExhaustedError: If all attempts failed transiently.
            RequestCancelledError: If `cancel_token` fired.
            HTTPTransportError: For other transport failures.
        """
        request_headers = {"User-Agent": self.options.user_agent}
        if json is not None:
            body = jsonlib.dumps(json).encode("utf-8")
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)

        request = Request(
            method=method,
            url=self._url(path),
            headers=request_headers,
            body=body,
            cancel_token=cancel_token,
        )

        logger.debug("%s %s", request.method, request.url)
        response = self.transport.do(request)
        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
        return response

    def get(self, path: str, **kwargs) -> Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Response:
        return self.request("DELETE", path, **kwargs)

    def _url(self, path: str) -> str:
        if not self.base_url or "://" in path:
            return path
        return urljoin(self.base_url + "/", path.lstrip("/"))

    def _log_retry(self, attempt: Attempt, delay: float) -> None:
        logger.warning(
            "Retry %d/%d after %s. Waiting %.3fs",
            attempt.number, self.options.retry_count, attempt.describe(), delay,
        )

    def close(self) -> None:
        """Close the underlying executor if this client created it."""
        if self._owns_executor and hasattr(self._executor, "close"):
            self._executor.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
