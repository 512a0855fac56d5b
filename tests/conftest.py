"""Shared test fixtures for the resilient-http test suite."""

import threading
from typing import Optional, Union

import pytest

from resilient_http.transport import BackoffConfig, Request, Response

# Backoff with no waiting and no jitter, for deterministic fast tests
NO_WAIT = BackoffConfig(initial_delay=0.0, max_delay=0.0, exponent_factor=2.0, max_jitter=0.0)


class ScriptedExecutor:
    """Fake executor that plays back a script of outcomes.

    Each script entry is a status code (returned as a Response) or an
    exception instance (raised). Once the script runs out, the last entry
    repeats.
    """

    def __init__(self, script: list[Union[int, BaseException]]):
        self.script = list(script)
        self.call_count = 0
        self.requests: list[Request] = []
        self.bodies: list = []
        self._lock = threading.Lock()

    def do(self, request: Request) -> Response:
        with self._lock:
            index = min(self.call_count, len(self.script) - 1)
            self.call_count += 1
            self.requests.append(request)
            self.bodies.append(request.read_body())
        outcome = self.script[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return Response(status_code=outcome, body=f"call {index}".encode(), url=request.url)


@pytest.fixture
def no_wait() -> BackoffConfig:
    return NO_WAIT


@pytest.fixture
def make_executor():
    """Factory for ScriptedExecutor instances."""
    def _make(*script: Union[int, BaseException]) -> ScriptedExecutor:
        return ScriptedExecutor(list(script) or [200])
    return _make


@pytest.fixture
def get_request():
    def _make(url: str = "https://example.com", token: Optional[object] = None, body=None) -> Request:
        return Request(method="GET", url=url, body=body, cancel_token=token)
    return _make
