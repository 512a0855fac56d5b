"""Request and response values exchanged with executors."""

import json as jsonlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Union

from .cancellation import CancellationToken
from .errors import HTTPStatusError

# Zero-argument callable returning a fresh body for each attempt
BodyFactory = Callable[[], Union[bytes, str]]


@dataclass
class Request:
    """An HTTP request as handed to an executor.

    `body` may be None, bytes-like, str, a form mapping, a body factory, or
    a one-shot stream (file object or iterator). Streams cannot be resent,
    so retrying transports reject them up front.
    """
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    cancel_token: Optional[CancellationToken] = None

    def __post_init__(self):
        self.method = self.method.upper()

    @property
    def is_replayable(self) -> bool:
        """Whether the body can be sent again on a later attempt."""
        return (
            self.body is None
            or isinstance(self.body, (bytes, bytearray, memoryview, str, Mapping))
            or callable(self.body)
        )

    def read_body(self) -> Any:
        """Return the body to send for one attempt."""
        if callable(self.body):
            return self.body()
        if isinstance(self.body, (bytearray, memoryview)):
            return bytes(self.body)
        return self.body


@dataclass
class Response:
    """A fully-read HTTP response."""
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str = ""
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON."""
        return jsonlib.loads(self.body)

    def raise_for_status(self) -> None:
        """Raise HTTPStatusError for 4xx/5xx responses."""
        if self.ok:
            return
        kind = "Client error" if self.is_client_error else "Server error"
        raise HTTPStatusError(f"{kind} {self.status_code} for url: {self.url}", self)


class RequestExecutor(Protocol):
    """Anything that performs a single request attempt."""

    def do(self, request: Request) -> Response:
        ...


class Decision(str, Enum):
    """Retry policy verdict for one attempt."""
    SUCCESS = "success"
    FATAL = "fatal"
    RETRY = "retry"


@dataclass
class Attempt:
    """Outcome of one attempt within a single call."""
    index: int
    response: Optional[Response] = None
    error: Optional[BaseException] = None

    @property
    def number(self) -> int:
        """1-based attempt number."""
        return self.index + 1

    def describe(self) -> str:
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        if self.response is not None:
            return f"status {self.response.status_code}"
        return "no outcome"


class OutcomeKind(str, Enum):
    """Terminal outcome of a retrying call."""
    SUCCESS = "success"
    FATAL = "fatal"
    EXHAUSTED = "exhausted"


@dataclass
class RetryOutcome:
    """Result of RetryableTransport.execute().

    Exactly one of `response` / `error` is set for SUCCESS and FATAL;
    EXHAUSTED always carries a RetriesExhaustedError.
    """
    kind: OutcomeKind
    attempts: int
    response: Optional[Response] = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    def unwrap(self) -> Response:
        """Return the response, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.response
