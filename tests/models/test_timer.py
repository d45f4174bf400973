"""Unit tests for the FocusTimer state machine.

The clock is injected, so outcomes carry deterministic timestamps.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vow_timer.models.timer import FocusTimer, SessionOutcome, TimerPhase

START = datetime(2024, 3, 15, 9, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FakeClock:
    def __init__(self, start: datetime = START):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


def _make_timer(minutes: int = 1, clock=None) -> FocusTimer:
    return FocusTimer(minutes, "subject-1", "GoLang", clock=clock or FakeClock())


def _tick(timer: FocusTimer, n: int) -> list[SessionOutcome]:
    outcomes = []
    for _ in range(n):
        outcome = timer.tick()
        if outcome is not None:
            outcomes.append(outcome)
    return outcomes


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    @pytest.mark.parametrize("minutes", [1, 25, 90])
    def test_remaining_equals_total(self, minutes):
        timer = _make_timer(minutes)
        assert timer.total_seconds == minutes * 60
        assert timer.remaining_seconds == timer.total_seconds
        assert timer.phase is TimerPhase.RUNNING

    def test_negative_minutes_rejected(self):
        with pytest.raises(ValueError):
            _make_timer(-1)

    def test_started_at_comes_from_clock(self):
        assert _make_timer().started_at == START

    def test_percent_starts_at_zero(self):
        assert _make_timer().percent_complete == 0.0

    def test_zero_length_percent_is_zero(self):
        assert _make_timer(0).percent_complete == 0.0


# ---------------------------------------------------------------------------
# Ticking
# ---------------------------------------------------------------------------


class TestTick:
    def test_tick_decrements(self):
        timer = _make_timer()
        assert timer.tick() is None
        assert timer.remaining_seconds == 59
        assert timer.running

    def test_percent_tracks_elapsed(self):
        timer = _make_timer()
        _tick(timer, 30)
        assert timer.percent_complete == pytest.approx(0.5)

    def test_last_tick_completes_once(self):
        clock = FakeClock()
        timer = _make_timer(clock=clock)
        _tick(timer, 59)
        assert timer.remaining_seconds == 1

        clock.advance(60)
        outcome = timer.tick()

        assert outcome is not None
        assert outcome.completed is True
        assert outcome.subject_id == "subject-1"
        assert outcome.subject_name == "GoLang"
        assert outcome.duration_minutes == 1
        assert outcome.started_at == START
        assert outcome.finished_at == START + timedelta(seconds=60)
        assert timer.phase is TimerPhase.COMPLETE
        assert timer.remaining_seconds == 0
        assert timer.percent_complete == 1.0

    def test_no_outcome_after_completion(self):
        timer = _make_timer()
        outcomes = _tick(timer, 120)
        assert len(outcomes) == 1
        assert timer.remaining_seconds == 0

    def test_zero_length_completes_on_first_tick(self):
        timer = _make_timer(0)
        outcome = timer.tick()
        assert outcome is not None and outcome.completed
        assert timer.complete


# ---------------------------------------------------------------------------
# Pause / resume / reset
# ---------------------------------------------------------------------------


class TestPauseResume:
    def test_pause_then_resume_keeps_remaining(self):
        timer = _make_timer()
        _tick(timer, 5)
        timer.pause()
        assert timer.phase is TimerPhase.PAUSED
        timer.resume()
        assert timer.running
        assert timer.remaining_seconds == 55

    def test_ticks_ignored_while_paused(self):
        timer = _make_timer()
        timer.pause()
        assert _tick(timer, 100) == []
        assert timer.remaining_seconds == 60

    def test_toggle(self):
        timer = _make_timer()
        timer.toggle_pause()
        assert timer.phase is TimerPhase.PAUSED
        timer.toggle_pause()
        assert timer.phase is TimerPhase.RUNNING

    def test_reset_restores_total_and_runs(self):
        timer = _make_timer()
        _tick(timer, 10)
        timer.pause()
        timer.reset()
        assert timer.remaining_seconds == 60
        assert timer.running

    def test_resume_when_running_is_ignored(self):
        timer = _make_timer()
        timer.resume()
        assert timer.running


# ---------------------------------------------------------------------------
# Abandoning
# ---------------------------------------------------------------------------


class TestAbandon:
    def test_request_enters_confirmation(self):
        timer = _make_timer()
        timer.request_abandon()
        assert timer.confirming

    def test_request_from_paused(self):
        timer = _make_timer()
        timer.pause()
        timer.request_abandon()
        assert timer.confirming

    def test_ticks_suspended_while_confirming(self):
        timer = _make_timer()
        timer.request_abandon()
        _tick(timer, 10)
        assert timer.remaining_seconds == 60

    def test_cancel_returns_to_running_unchanged(self):
        timer = _make_timer()
        _tick(timer, 3)
        timer.request_abandon()
        timer.cancel_abandon()
        assert timer.running
        assert timer.remaining_seconds == 57

    def test_confirm_emits_abandoned(self):
        timer = _make_timer()
        _tick(timer, 3)
        timer.request_abandon()
        outcome = timer.confirm_abandon()
        assert outcome is not None
        assert outcome.completed is False
        assert timer.complete
        assert timer.outcome is outcome

    def test_confirm_without_request_is_ignored(self):
        timer = _make_timer()
        assert timer.confirm_abandon() is None
        assert timer.running

    def test_reset_ignored_while_confirming(self):
        timer = _make_timer()
        _tick(timer, 3)
        timer.request_abandon()
        timer.reset()
        assert timer.confirming
        assert timer.remaining_seconds == 57


class TestCompleteIsTerminal:
    @pytest.mark.parametrize(
        "action",
        ["pause", "resume", "toggle_pause", "request_abandon", "cancel_abandon", "reset"],
    )
    def test_inputs_ignored_after_completion(self, action):
        timer = _make_timer()
        _tick(timer, 60)
        outcome = timer.outcome
        getattr(timer, action)()
        assert timer.complete
        assert timer.outcome is outcome
        assert timer.confirm_abandon() is None
