"""Tests for SessionService.record."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from vow_timer.models import SessionOutcome, SessionStatus
from vow_timer.services.session_service import SessionService

STARTED = datetime(2024, 3, 15, 9, 0, tzinfo=timezone.utc)


def _outcome(completed: bool) -> SessionOutcome:
    return SessionOutcome(
        completed=completed,
        subject_id="subject-1",
        subject_name="GoLang",
        duration_minutes=25,
        started_at=STARTED,
        finished_at=STARTED + timedelta(minutes=25),
    )


class TestRecord:
    def test_completed_outcome(self, store):
        session = SessionService(store.sessions).record(_outcome(True))
        stored = store.sessions.get(session.id)
        assert stored.status is SessionStatus.COMPLETED
        assert stored.subject_name == "GoLang"
        assert stored.duration == 25
        assert stored.started_at == STARTED
        assert stored.completed_at == STARTED + timedelta(minutes=25)

    def test_abandoned_outcome(self, store):
        session = SessionService(store.sessions).record(_outcome(False))
        assert session.status is SessionStatus.ABANDONED
        assert store.sessions.count(SessionStatus.ABANDONED) == 1

    def test_one_outcome_one_row(self, store):
        SessionService(store.sessions).record(_outcome(True))
        assert store.sessions.count() == 1

    def test_logs_outcome(self, store, isolated_logger):
        SessionService(store.sessions).record(_outcome(True))
        log_text = (isolated_logger / "vow.log").read_text(encoding="utf-8")
        assert "completed" in log_text
        assert "GoLang" in log_text
