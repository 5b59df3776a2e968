"""Tests for the logging service."""

import logging
from datetime import datetime

import pytest

from quadmark.services import logging_service
from quadmark.services.logging_service import (
    LOG_LEVEL_ENV,
    log_file_path,
    resolve_log_level,
    setup_logging,
)


@pytest.fixture
def fresh_root_logger(monkeypatch):
    """Let setup_logging run again and put the root logger back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(logging_service, "_logging_initialized", False)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLogLevel:

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_log_level() == logging.INFO

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert resolve_log_level() == logging.DEBUG

    def test_unknown_name_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_log_level(logging.WARNING) == logging.WARNING


def test_log_file_is_dated(tmp_path):
    path = log_file_path(tmp_path, datetime(2024, 3, 9))
    assert path == tmp_path / "quadmark_20240309.log"


class TestSetupLogging:

    def test_writes_dated_file(self, fresh_root_logger, tmp_path):
        setup_logging(logging.DEBUG, log_dir=tmp_path)
        logging_service.get_logger("quadmark.test").debug("snapshot committed")
        for handler in fresh_root_logger.handlers:
            handler.flush()

        log_file = log_file_path(tmp_path)
        assert fresh_root_logger.level == logging.DEBUG
        assert "snapshot committed" in log_file.read_text(encoding="utf-8")

    def test_console_only(self, fresh_root_logger, tmp_path):
        setup_logging(logging.INFO, log_to_file=False, log_dir=tmp_path)
        assert len(fresh_root_logger.handlers) == 1
        assert not any(tmp_path.iterdir())

    def test_second_call_is_ignored(self, fresh_root_logger, tmp_path):
        setup_logging(logging.INFO, log_to_file=False)
        setup_logging(logging.DEBUG, log_dir=tmp_path)
        assert fresh_root_logger.level == logging.INFO
        assert len(fresh_root_logger.handlers) == 1
