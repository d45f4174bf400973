"""SQLite implementation of SessionRepository."""

from __future__ import annotations

from datetime import datetime

from vow_timer.adapters.sqlite.connection import DatabaseConnection
from vow_timer.adapters.sqlite.utils import (
    generate_uuid,
    parse_datetime,
    row_to_dict,
    to_iso,
)
from vow_timer.errors import NotFoundError
from vow_timer.models import Session, SessionStatus
from vow_timer.repositories import SessionRepository


class SqliteSessionRepository(SessionRepository):
    """SQLite implementation of session repository."""

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def create(
        self,
        subject_id: str,
        subject_name: str,
        duration: int,
        status: SessionStatus,
        started_at: datetime,
        completed_at: datetime,
    ) -> Session:
        session = Session(
            id=generate_uuid(),
            subject_id=subject_id,
            subject_name=subject_name,
            duration=duration,
            status=status,
            started_at=started_at,
            completed_at=completed_at,
        )
        with self.db.transaction() as conn:
            conn.execute(
                """INSERT INTO sessions (
                       id, subject_id, subject_name, duration, status,
                       started_at, completed_at
                   ) VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (
                    session.id,
                    session.subject_id,
                    session.subject_name,
                    session.duration,
                    session.status.value,
                    to_iso(session.started_at),
                    to_iso(session.completed_at),
                ),
            )
        return session

    def get(self, session_id: str) -> Session:
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT * FROM sessions WHERE id = ?", (session_id,)
            ).fetchone()
        if not row:
            raise NotFoundError(f"Session not found: {session_id}")
        return Session(**row_to_dict(row))

    def recent(self, limit: int = 10) -> list[Session]:
        with self.db.transaction() as conn:
            rows = conn.execute(
                "SELECT * FROM sessions ORDER BY completed_at DESC LIMIT ?", (limit,)
            ).fetchall()
        return [Session(**row_to_dict(row)) for row in rows]

    def delete(self, session_id: str) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
        return cursor.rowcount > 0

    def count(self, status: SessionStatus | None = None) -> int:
        with self.db.transaction() as conn:
            if status is None:
                row = conn.execute("SELECT COUNT(*) FROM sessions").fetchone()
            else:
                row = conn.execute(
                    "SELECT COUNT(*) FROM sessions WHERE status = ?", (status.value,)
                ).fetchone()
        return row[0]

    def total_completed_minutes(self) -> int:
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT COALESCE(SUM(duration), 0) FROM sessions WHERE status = ?",
                (SessionStatus.COMPLETED.value,),
            ).fetchone()
        return int(row[0])

    def completion_timestamps(self) -> list[datetime]:
        with self.db.transaction() as conn:
            rows = conn.execute(
                """SELECT completed_at FROM sessions
                   WHERE status = ?
                   ORDER BY completed_at DESC""",
                (SessionStatus.COMPLETED.value,),
            ).fetchall()
        return [parse_datetime(row["completed_at"]) for row in rows]

    def counts_by_subject(self) -> dict[str, int]:
        with self.db.transaction() as conn:
            rows = conn.execute(
                """SELECT subject_name, COUNT(*) AS count FROM sessions
                   WHERE status = ?
                   GROUP BY subject_name
                   ORDER BY count DESC, subject_name""",
                (SessionStatus.COMPLETED.value,),
            ).fetchall()
        return {row["subject_name"]: row["count"] for row in rows}
