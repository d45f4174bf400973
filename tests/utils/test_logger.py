"""Tests for the application logger utility."""

from __future__ import annotations

import io
import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import vow_timer.utils.logger as logger_mod
from vow_timer.utils.logger import get_logger, log_file_path


def _file_handlers(logger: logging.Logger) -> list[RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_get_logger_creates_log_file(isolated_logger):
    """Logger creates the log file inside user_log_dir."""
    logger = get_logger()
    assert (isolated_logger / "vow.log").exists()
    assert isinstance(logger, logging.Logger)


def test_log_file_path(isolated_logger):
    assert log_file_path() == isolated_logger / "vow.log"


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_logger):
    logger = get_logger()
    logger.info("hello from test")
    for handler in _file_handlers(logger):
        handler.flush()

    content = (isolated_logger / "vow.log").read_text(encoding="utf-8")
    assert "hello from test" in content
    assert "INFO" in content


def test_one_file_handler_and_no_terminal_output():
    """The terminal belongs to the TUI, so nothing logs to stdout or stderr."""
    logger = get_logger()
    assert logger.propagate is False
    assert len(_file_handlers(logger)) == 1
    streams = [getattr(h, "stream", None) for h in logger.handlers]
    assert sys.stdout not in streams
    assert sys.stderr not in streams


def test_file_handler_added_beside_existing_handlers(isolated_logger):
    captured = logging.StreamHandler(io.StringIO())
    logging.getLogger("vow_timer").addHandler(captured)

    logger = get_logger()
    logger.warning("still reaches the file")
    for handler in _file_handlers(logger):
        handler.flush()

    assert captured in logger.handlers
    assert "still reaches the file" in (isolated_logger / "vow.log").read_text(encoding="utf-8")


def test_stale_file_handler_replaced(isolated_logger, monkeypatch):
    get_logger()
    monkeypatch.setattr(logger_mod, "_logger", None)
    logger = get_logger()
    assert len(_file_handlers(logger)) == 1


def test_get_logger_creates_parent_dirs(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    with patch("vow_timer.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()
    assert nested.is_dir()
