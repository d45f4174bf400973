"""Tests for the vow CLI entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from vow_timer import __version__
from vow_timer.config import DATABASE_URL_ENV
from vow_timer.main import app, main
from vow_timer.services.seed_service import DEFAULT_QUOTES
from vow_timer.utils.exit_codes import ERROR_GENERAL

runner = CliRunner()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run from an empty directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(DATABASE_URL_ENV, raising=False)


def _invoke(*args, env: dict[str, str] | None = None):
    return runner.invoke(app, list(args), env=env)


# ---------------------------------------------------------------------------
# Version / help
# ---------------------------------------------------------------------------


class TestVersion:
    @pytest.mark.parametrize("flag", ["--version", "-v"])
    def test_prints_version(self, flag):
        result = _invoke(flag)
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_needs_no_database(self):
        assert _invoke("--version").exit_code == 0

    def test_help(self):
        result = _invoke("--help")
        assert result.exit_code == 0
        assert "seed" in result.output


# ---------------------------------------------------------------------------
# Startup failures
# ---------------------------------------------------------------------------


class TestStartupFailures:
    def test_missing_database_url_exits_1(self):
        result = _invoke()
        assert result.exit_code == ERROR_GENERAL
        assert DATABASE_URL_ENV in result.output

    def test_unreachable_store_exits_1(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        result = _invoke(env={DATABASE_URL_ENV: f"sqlite:///{blocker / 'vow.db'}"})
        assert result.exit_code == ERROR_GENERAL
        assert "Could not connect" in result.output
        assert "Details logged to" in result.output

    def test_unsupported_scheme_exits_1(self):
        result = _invoke("seed", env={DATABASE_URL_ENV: "mongodb://localhost:27017"})
        assert result.exit_code == ERROR_GENERAL


# ---------------------------------------------------------------------------
# Interactive launch
# ---------------------------------------------------------------------------


class TestLaunch:
    def test_runs_app_and_closes_store(self, tmp_path):
        env = {DATABASE_URL_ENV: f"sqlite:///{tmp_path / 'vow.db'}"}
        with patch("vow_timer.ui.app.VowApp.run") as run:
            result = _invoke(env=env)
        assert result.exit_code == 0
        run.assert_called_once()


# ---------------------------------------------------------------------------
# seed
# ---------------------------------------------------------------------------


class TestSeed:
    def test_seed_then_reseed(self, tmp_path):
        env = {DATABASE_URL_ENV: f"sqlite:///{tmp_path / 'vow.db'}"}

        first = _invoke("seed", env=env)
        assert first.exit_code == 0
        assert "Seed Summary" in first.output
        assert str(len(DEFAULT_QUOTES)) in first.output
        assert "new entries" in first.output

        second = _invoke("seed", env=env)
        assert second.exit_code == 0
        assert "Nothing to add" in second.output

    def test_typo_suggests_command(self):
        result = _invoke("sed")
        assert result.exit_code != 0
        assert "seed" in result.output


def test_main_is_callable():
    with patch("vow_timer.main.app") as mock_app:
        main()
    mock_app.assert_called_once()
