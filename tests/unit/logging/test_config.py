"""Unit tests for logging configuration."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from podctl.logging.config import (
    RETENTION_DAYS,
    _cleanup_old_logs,
    _setup_file_logging,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Any:
    """Remove handlers added by configure_logging after each test."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    yield
    root.handlers = original_handlers


def _age(path: Path, days: int) -> None:
    old_time = (datetime.now() - timedelta(days=days)).timestamp()
    os.utime(path, (old_time, old_time))


@pytest.mark.unit
class TestCleanupOldLogs:
    """Tests for _cleanup_old_logs function."""

    def test_returns_early_when_log_dir_missing(self, tmp_path: Path) -> None:
        """_cleanup_old_logs should return early if LOG_DIR doesn't exist."""
        with patch("podctl.logging.config.LOG_DIR", tmp_path / "nonexistent"):
            _cleanup_old_logs()

    def test_deletes_old_log_files(self, tmp_path: Path) -> None:
        """_cleanup_old_logs should delete log files older than RETENTION_DAYS."""
        log_file = tmp_path / "podctl.log.1"
        log_file.write_text("old log data")
        _age(log_file, RETENTION_DAYS + 5)

        with patch("podctl.logging.config.LOG_DIR", tmp_path):
            _cleanup_old_logs()

        assert not log_file.exists()

    def test_keeps_recent_log_files(self, tmp_path: Path) -> None:
        """_cleanup_old_logs should keep log files newer than RETENTION_DAYS."""
        log_file = tmp_path / "podctl.log"
        log_file.write_text("recent log data")

        with patch("podctl.logging.config.LOG_DIR", tmp_path):
            _cleanup_old_logs()

        assert log_file.exists()

    def test_ignores_unrelated_files(self, tmp_path: Path) -> None:
        """Only podctl.log* files are subject to retention."""
        other = tmp_path / "notes.txt"
        other.write_text("keep me")
        _age(other, RETENTION_DAYS + 5)

        with patch("podctl.logging.config.LOG_DIR", tmp_path):
            _cleanup_old_logs()

        assert other.exists()

    def test_ignores_os_errors(self, tmp_path: Path) -> None:
        """_cleanup_old_logs should handle OSError gracefully."""
        log_file = tmp_path / "podctl.log.1"
        log_file.write_text("data")
        _age(log_file, RETENTION_DAYS + 5)

        with (
            patch("podctl.logging.config.LOG_DIR", tmp_path),
            patch.object(Path, "unlink", side_effect=OSError("permission denied")),
        ):
            _cleanup_old_logs()


@pytest.mark.unit
class TestSetupFileLogging:
    """Tests for _setup_file_logging function."""

    def test_creates_log_directory_and_handler(self, tmp_path: Path) -> None:
        """_setup_file_logging should create log dir and add a file handler."""
        log_dir = tmp_path / "logs"
        log_file = log_dir / "podctl.log"

        with (
            patch("podctl.logging.config.LOG_DIR", log_dir),
            patch("podctl.logging.config.LOG_FILE", log_file),
            patch("podctl.logging.config._cleanup_old_logs"),
        ):
            root = logging.getLogger()
            initial_count = len(root.handlers)
            _setup_file_logging()
            assert len(root.handlers) > initial_count
            assert log_dir.exists()
            for handler in root.handlers[initial_count:]:
                handler.close()
            root.handlers = root.handlers[:initial_count]


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging function."""

    def _console_handler(self, initial: list[logging.Handler]) -> logging.StreamHandler[Any]:
        added = [h for h in logging.getLogger().handlers if h not in initial]
        assert len(added) == 1
        handler = added[0]
        assert isinstance(handler, logging.StreamHandler)
        return handler

    def test_default_sets_warning_level(self) -> None:
        """configure_logging with no args should use WARNING level."""
        initial = list(logging.getLogger().handlers)
        with patch("podctl.logging.config._setup_file_logging"):
            configure_logging()
        assert self._console_handler(initial).level == logging.WARNING

    def test_verbose_sets_info_level(self) -> None:
        """configure_logging with verbose=True should use INFO level."""
        initial = list(logging.getLogger().handlers)
        with patch("podctl.logging.config._setup_file_logging"):
            configure_logging(verbose=True)
        assert self._console_handler(initial).level == logging.INFO

    def test_debug_sets_debug_level(self) -> None:
        """configure_logging with debug=True should use DEBUG level."""
        initial = list(logging.getLogger().handlers)
        with patch("podctl.logging.config._setup_file_logging"):
            configure_logging(debug=True)
        assert self._console_handler(initial).level == logging.DEBUG

    def test_console_writes_to_stderr(self) -> None:
        """Console logs must not share stdout with the picker."""
        initial = list(logging.getLogger().handlers)
        with patch("podctl.logging.config._setup_file_logging"):
            configure_logging()
        assert self._console_handler(initial).stream is sys.stderr


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_bound_logger(self) -> None:
        """get_logger should return a structlog logger."""
        assert get_logger("test") is not None

    def test_binds_initial_context(self) -> None:
        """get_logger should bind initial context when provided."""
        assert get_logger("test", component="wizard") is not None
