"""Unit tests for vow_timer.utils.exit_codes."""

from __future__ import annotations

from vow_timer.utils.exit_codes import ERROR_GENERAL, SUCCESS


class TestExitCodes:
    def test_values(self):
        assert SUCCESS == 0
        assert ERROR_GENERAL == 1

    def test_codes_distinct(self):
        assert SUCCESS != ERROR_GENERAL
