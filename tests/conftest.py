"""Shared test fixtures and configuration.

Keeps every test away from the real log directory and gives each test its
own SQLite database under ``tmp_path``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from vow_timer.config import AppConfig
from vow_timer.services.stats_service import StatsService
from vow_timer.services.store import Store, open_store
from vow_timer.ui.screens import ScreenContext

FIXED_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone(timedelta(hours=1)))


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path, monkeypatch):
    """Point the application logger at a per-test directory."""
    import vow_timer.utils.logger as logger_mod

    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logger_mod, "user_log_dir", lambda *_args, **_kw: str(log_dir))
    monkeypatch.setattr(logger_mod, "_logger", None)
    logging.getLogger("vow_timer").handlers.clear()
    yield log_dir
    for handler in logging.getLogger("vow_timer").handlers:
        handler.close()
    logging.getLogger("vow_timer").handlers.clear()


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'vow.db'}"


@pytest.fixture
def app_config(database_url) -> AppConfig:
    return AppConfig(database_url=database_url, session_minutes=1, rotation_interval=60)


@pytest.fixture
def store(app_config) -> Store:
    """Connected store backed by a fresh file database."""
    s = open_store(app_config)
    yield s
    s.close()


@pytest.fixture
def screen_ctx(store, app_config) -> ScreenContext:
    """Screen context wired to the tmp store with a frozen clock and calendar."""
    ctx = ScreenContext.from_store(store, app_config)
    ctx.clock = lambda: FIXED_NOW
    ctx.stats = StatsService(store.sessions, today=lambda: FIXED_NOW.date())
    return ctx
