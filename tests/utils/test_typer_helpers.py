"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

import typer
from typer.testing import CliRunner

from vow_timer.utils.typer_helpers import SuggestingGroup

runner = CliRunner()


def _make_app(*names: str) -> typer.Typer:
    app = typer.Typer(name="vow", cls=SuggestingGroup)

    @app.callback()
    def root() -> None:
        """Force a command group even with a single command."""

    for name in names:
        app.command(name)(lambda: typer.echo("ran"))
    return app


class TestSuggestingGroup:
    def test_valid_command_passes_through(self):
        result = runner.invoke(_make_app("seed"), ["seed"])
        assert result.exit_code == 0
        assert "ran" in result.output

    def test_typo_prints_suggestion_and_exits(self):
        result = runner.invoke(_make_app("seed"), ["sead"])
        assert result.exit_code == 1
        assert "Did you mean this?" in result.output
        assert "seed" in result.output

    def test_unrelated_word_falls_back_to_usage_error(self):
        result = runner.invoke(_make_app("seed"), ["xyzzy"])
        assert result.exit_code == 2
        assert "Did you mean" not in result.output

    def test_multiple_suggestions(self):
        result = runner.invoke(_make_app("seed", "seeds"), ["see"])
        assert result.exit_code == 1
        assert "Did you mean one of these?" in result.output
