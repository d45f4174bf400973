"""Recording finished timers as sessions."""

from __future__ import annotations

from vow_timer.models import Session, SessionOutcome, SessionStatus
from vow_timer.repositories import SessionRepository
from vow_timer.utils.logger import get_logger


class SessionService:
    """Turns a timer outcome into exactly one stored session."""

    def __init__(self, session_repository: SessionRepository):
        self.repository = session_repository

    def record(self, outcome: SessionOutcome) -> Session:
        status = SessionStatus.COMPLETED if outcome.completed else SessionStatus.ABANDONED
        session = self.repository.create(
            subject_id=outcome.subject_id,
            subject_name=outcome.subject_name,
            duration=outcome.duration_minutes,
            status=status,
            started_at=outcome.started_at,
            completed_at=outcome.finished_at,
        )
        get_logger().info(
            "Session %s for %r %s (%d min)",
            session.id,
            session.subject_name,
            status.value,
            session.duration,
        )
        return session
