"""Tests for resilient_http/logging_config.py"""

import logging
import os
from unittest.mock import patch

from resilient_http.logging_config import setup_logging


class TestSetupLogging:
    def test_does_not_crash(self):
        setup_logging()

    def test_respects_log_level_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            setup_logging()
            assert logging.getLogger().level == logging.DEBUG

    def test_default_level_is_info(self):
        env = os.environ.copy()
        env.pop("LOG_LEVEL", None)
        with patch.dict(os.environ, env, clear=True):
            setup_logging()
            assert logging.getLogger().level == logging.INFO

    def test_explicit_level_wins(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}):
            setup_logging("warning")
            assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO
