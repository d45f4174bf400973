"""Countdown state machine for a single focus session."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TimerPhase(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    CONFIRMING_ABANDON = "confirming_abandon"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SessionOutcome:
    """Terminal result of one timer, consumed by the caller to save a session."""

    completed: bool
    subject_id: str
    subject_name: str
    duration_minutes: int
    started_at: datetime
    finished_at: datetime


def _now() -> datetime:
    return datetime.now().astimezone()


class FocusTimer:
    """
    Countdown with pause, reset and a confirmation step before abandoning.

    The timer is driven from outside: the owner calls ``tick()`` once per
    elapsed second and forwards user input to the transition methods. Inputs
    that do not apply to the current phase are ignored. The outcome is
    produced exactly once, by the transition into ``COMPLETE``.
    """

    def __init__(
        self,
        minutes: int,
        subject_id: str,
        subject_name: str,
        clock: Callable[[], datetime] = _now,
    ):
        if minutes < 0:
            raise ValueError("minutes must be non-negative")
        self.total_seconds = minutes * 60
        self.remaining_seconds = self.total_seconds
        self.subject_id = subject_id
        self.subject_name = subject_name
        self.phase = TimerPhase.RUNNING
        self.outcome: SessionOutcome | None = None
        self._clock = clock
        self.started_at = clock()

    @property
    def running(self) -> bool:
        return self.phase is TimerPhase.RUNNING

    @property
    def confirming(self) -> bool:
        return self.phase is TimerPhase.CONFIRMING_ABANDON

    @property
    def complete(self) -> bool:
        return self.phase is TimerPhase.COMPLETE

    @property
    def duration_minutes(self) -> int:
        return self.total_seconds // 60

    @property
    def percent_complete(self) -> float:
        if self.total_seconds == 0:
            return 0.0
        elapsed = self.total_seconds - self.remaining_seconds
        return elapsed / self.total_seconds

    def tick(self) -> SessionOutcome | None:
        """Advance one second. Returns the outcome if this tick finished the timer."""
        if not self.running:
            return None
        if self.remaining_seconds > 1:
            self.remaining_seconds -= 1
            return None
        self.remaining_seconds = 0
        return self._finish(completed=True)

    def pause(self) -> None:
        if self.running:
            self.phase = TimerPhase.PAUSED

    def resume(self) -> None:
        if self.phase is TimerPhase.PAUSED:
            self.phase = TimerPhase.RUNNING

    def toggle_pause(self) -> None:
        if self.running:
            self.pause()
        else:
            self.resume()

    def request_abandon(self) -> None:
        if self.phase in (TimerPhase.RUNNING, TimerPhase.PAUSED):
            self.phase = TimerPhase.CONFIRMING_ABANDON

    def cancel_abandon(self) -> None:
        if self.confirming:
            self.phase = TimerPhase.RUNNING

    def confirm_abandon(self) -> SessionOutcome | None:
        if not self.confirming:
            return None
        return self._finish(completed=False)

    def reset(self) -> None:
        if self.phase in (TimerPhase.RUNNING, TimerPhase.PAUSED):
            self.remaining_seconds = self.total_seconds
            self.phase = TimerPhase.RUNNING

    def _finish(self, completed: bool) -> SessionOutcome:
        self.phase = TimerPhase.COMPLETE
        self.outcome = SessionOutcome(
            completed=completed,
            subject_id=self.subject_id,
            subject_name=self.subject_name,
            duration_minutes=self.duration_minutes,
            started_at=self.started_at,
            finished_at=self._clock(),
        )
        return self.outcome
