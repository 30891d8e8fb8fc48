"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from infrastructure.config import Settings
from infrastructure.logging import QUIET_LOGGERS, SERVER_LOGGERS, setup_logging


@pytest.fixture
def restore_logging():
    yield
    setup_logging()


class TestSetupLogging:
    def test_handlers_and_log_file(self, tmp_path, restore_logging) -> None:
        setup_logging(Settings(LOG_DIR=tmp_path / "logs", APP_ENV="production", LOG_LEVEL="info"))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 2
        assert (tmp_path / "logs" / "production.log").exists()
        for name in SERVER_LOGGERS:
            server_logger = logging.getLogger(name)
            assert server_logger.handlers == root_logger.handlers
            assert server_logger.propagate is False

    def test_client_loggers_quiet_at_info(self, tmp_path, restore_logging) -> None:
        setup_logging(Settings(LOG_DIR=tmp_path, LOG_LEVEL="INFO"))

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_client_loggers_verbose_at_debug(self, tmp_path, restore_logging) -> None:
        setup_logging(Settings(LOG_DIR=tmp_path, LOG_LEVEL="DEBUG"))

        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
