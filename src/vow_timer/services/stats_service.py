"""Session statistics: totals, streaks and per-subject breakdowns."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from vow_timer.models import (
    Session,
    SessionStats,
    SessionStatus,
    calculate_streaks,
    days_from_timestamps,
)
from vow_timer.repositories import SessionRepository


class StatsService:
    """Aggregate queries over finished sessions."""

    def __init__(
        self,
        session_repository: SessionRepository,
        today: Callable[[], date] = date.today,
    ):
        self.repository = session_repository
        self._today = today

    def get_session_stats(self) -> SessionStats:
        total = self.repository.count()
        completed = self.repository.count(SessionStatus.COMPLETED)
        days = days_from_timestamps(self.repository.completion_timestamps())
        streaks = calculate_streaks(days, today=self._today())

        return SessionStats(
            total_sessions=total,
            completed_sessions=completed,
            abandoned_sessions=total - completed,
            total_minutes=self.repository.total_completed_minutes(),
            current_streak=streaks.current,
            longest_streak=streaks.longest,
        )

    def sessions_by_subject(self) -> dict[str, int]:
        return self.repository.counts_by_subject()

    def recent_sessions(self, limit: int = 5) -> list[Session]:
        return self.repository.recent(limit)
