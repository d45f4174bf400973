"""SQLite implementation of SubjectRepository."""

from __future__ import annotations

from vow_timer.adapters.sqlite.connection import DatabaseConnection
from vow_timer.adapters.sqlite.utils import generate_uuid, now_local, row_to_dict, to_iso
from vow_timer.errors import NotFoundError
from vow_timer.models import Subject
from vow_timer.repositories import SubjectRepository

DEFAULT_ICON = "📚"


class SqliteSubjectRepository(SubjectRepository):
    """SQLite implementation of subject repository."""

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def list_all(self) -> list[Subject]:
        with self.db.transaction() as conn:
            rows = conn.execute(
                "SELECT * FROM subjects ORDER BY created_at, rowid"
            ).fetchall()
        return [Subject(**row_to_dict(row)) for row in rows]

    def get(self, subject_id: str) -> Subject:
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT * FROM subjects WHERE id = ?", (subject_id,)
            ).fetchone()
        if not row:
            raise NotFoundError(f"Subject not found: {subject_id}")
        return Subject(**row_to_dict(row))

    def create(self, name: str, icon: str) -> Subject:
        subject = Subject(
            id=generate_uuid(),
            name=name.strip(),
            icon=icon.strip() or DEFAULT_ICON,
            created_at=now_local(),
        )
        with self.db.transaction() as conn:
            conn.execute(
                "INSERT INTO subjects (id, name, icon, created_at) VALUES (?, ?, ?, ?)",
                (subject.id, subject.name, subject.icon, to_iso(subject.created_at)),
            )
        return subject

    def add_if_missing(self, name: str, icon: str) -> tuple[Subject, bool]:
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT * FROM subjects WHERE name = ? LIMIT 1", (name.strip(),)
            ).fetchone()
        if row:
            return Subject(**row_to_dict(row)), False
        return self.create(name, icon), True

    def delete(self, subject_id: str) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute("DELETE FROM subjects WHERE id = ?", (subject_id,))
        return cursor.rowcount > 0
