"""Tests for logging configuration."""

import logging

import pytest
import structlog

from feetracker.log_config import configure_logging


class TestConfigureLogging:
    def test_quiets_httpx_request_logs(self):
        configure_logging("DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_keeps_stricter_httpx_level(self):
        configure_logging("ERROR")

        assert logging.getLogger("httpx").level == logging.ERROR

    def test_reads_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("FEE_TRACKER_LOG_LEVEL", "critical")

        configure_logging()

        assert logging.getLogger("httpx").level == logging.CRITICAL
        assert structlog.is_configured()

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")
