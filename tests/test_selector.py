"""Tests for resilient_http/transport/selector.py"""

from unittest.mock import patch

import pytest

from resilient_http.transport import BackoffConfig, RetryableTransport, select_transport


class TestSelectTransport:
    @pytest.mark.parametrize("retries", [0, -1, -10])
    def test_no_retries_returns_executor_itself(self, make_executor, retries):
        executor = make_executor(500)
        assert select_transport(executor, max_retries=retries) is executor

    def test_no_retries_builds_no_backoff(self, make_executor):
        executor = make_executor(200)
        with patch("resilient_http.transport.retryable.BackoffCalculator") as mock_calc:
            select_transport(executor, max_retries=0)
        mock_calc.assert_not_called()

    def test_no_retries_makes_single_call(self, make_executor, get_request):
        executor = make_executor(500, 200)
        transport = select_transport(executor, max_retries=0)

        assert transport.do(get_request()).status_code == 500
        assert executor.call_count == 1

    def test_positive_retries_wraps(self, make_executor):
        executor = make_executor(200)
        backoff = BackoffConfig(initial_delay=0.1, max_delay=1.0)

        transport = select_transport(executor, max_retries=3, backoff=backoff)

        assert isinstance(transport, RetryableTransport)
        assert transport.executor is executor
        assert transport.max_retries == 3
        assert transport.backoff is backoff

    def test_default_backoff(self, make_executor):
        transport = select_transport(make_executor(200), max_retries=1)
        assert transport.backoff == BackoffConfig()
