"""Single-attempt executor backed by a pooled requests.Session."""

from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from .errors import InvalidRequestError, TransportError
from .models import Request, Response

# Malformed requests: retrying cannot help
_INVALID_REQUEST_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidHeader,
    requests.exceptions.URLRequired,
)


class RequestsExecutor:
    """Performs exactly one HTTP request per do() call.

    The session's connection pool is shared by all callers; requests'
    own urllib3 retries are disabled so the retrying transport is the only
    place attempts are counted.

    A running requests call cannot be interrupted. An explicit cancel()
    takes effect only once the in-flight call returns, and the retrying
    transport then discards its result. A token deadline shortens the
    connect and per-read timeouts, but requests applies the read timeout to
    each socket read, so a slowly dripping body can outlast the deadline.
    """

    def __init__(
        self,
        connect_timeout: float = 5.0,
        request_timeout: float = 30.0,
        max_idle_connections: int = 10,
        session: Optional[requests.Session] = None,
        allow_redirects: bool = True,
    ):
        """Initialize the executor.

        Args:
            connect_timeout: Per-attempt connect timeout in seconds.
            request_timeout: Per-attempt read timeout in seconds.
            max_idle_connections: Connection pool size per host.
            session: Existing session to use (not closed by close()).
            allow_redirects: Follow redirects.
        """
        self.connect_timeout = connect_timeout
        self.request_timeout = request_timeout
        self.allow_redirects = allow_redirects
        self._owns_session = session is None

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=max_idle_connections,
                pool_maxsize=max_idle_connections,
                max_retries=0,
            )
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self._session = session

    @classmethod
    def from_options(cls, options) -> "RequestsExecutor":
        """Build an executor from HTTPOptions."""
        return cls(
            connect_timeout=options.connect_timeout,
            request_timeout=options.request_timeout,
            max_idle_connections=options.max_idle_connections,
        )

    def do(self, request: Request) -> Response:
        """Send one request and read the full response.

        Args:
            request: Request to send.

        Returns:
            Response with the body fully read.

        Raises:
            RequestCancelledError: If the request's token is already done.
            TransportError: On connection failures and timeouts.
            InvalidRequestError: If the request is malformed.
        """
        token = request.cancel_token
        if token is not None:
            token.raise_if_cancelled()

        try:
            resp = self._session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.read_body(),
                timeout=self._timeout(request),
                allow_redirects=self.allow_redirects,
            )
        except _INVALID_REQUEST_ERRORS as e:
            raise InvalidRequestError(f"Invalid request {request.method} {request.url}: {e}") from e
        except requests.Timeout as e:
            raise TransportError(f"Timed out: {request.method} {request.url}", cause=e) from e
        except requests.ConnectionError as e:
            raise TransportError(f"Connection failed: {request.method} {request.url}", cause=e) from e
        except requests.RequestException as e:
            raise TransportError(f"Request failed: {request.method} {request.url}: {e}", cause=e) from e

        return Response(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content,
            url=resp.url,
            elapsed=resp.elapsed.total_seconds(),
        )

    def _timeout(self, request: Request) -> tuple[float, float]:
        """(connect, read) timeout, shortened to the token's remaining time."""
        connect, read = self.connect_timeout, self.request_timeout
        token = request.cancel_token
        remaining = token.remaining if token is not None else None
        if remaining is not None:
            # urllib3 rejects zero timeouts
            remaining = max(remaining, 0.001)
            connect = min(connect, remaining)
            read = min(read, remaining)
        return connect, read

    def close(self) -> None:
        """Close the HTTP session if this executor created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
