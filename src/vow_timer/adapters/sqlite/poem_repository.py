"""SQLite implementation of PoemRepository."""

from __future__ import annotations

from vow_timer.adapters.sqlite.connection import DatabaseConnection
from vow_timer.adapters.sqlite.utils import generate_uuid, now_local, row_to_dict, to_iso
from vow_timer.errors import NotFoundError
from vow_timer.models import Poem
from vow_timer.repositories import PoemRepository


class SqlitePoemRepository(PoemRepository):
    """SQLite implementation of poem repository."""

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def list_all(self) -> list[Poem]:
        with self.db.transaction() as conn:
            rows = conn.execute("SELECT * FROM poems ORDER BY created_at, rowid").fetchall()
        return [Poem(**row_to_dict(row)) for row in rows]

    def get(self, poem_id: str) -> Poem:
        with self.db.transaction() as conn:
            row = conn.execute("SELECT * FROM poems WHERE id = ?", (poem_id,)).fetchone()
        if not row:
            raise NotFoundError(f"Poem not found: {poem_id}")
        return Poem(**row_to_dict(row))

    def create(
        self, old_english: str, modern_english: str, source: str, line_ref: str = ""
    ) -> Poem:
        poem = Poem(
            id=generate_uuid(),
            old_english=old_english,
            modern_english=modern_english,
            source=source,
            line_ref=line_ref,
            created_at=now_local(),
        )
        with self.db.transaction() as conn:
            conn.execute(
                """INSERT INTO poems
                   (id, old_english, modern_english, source, line_ref, created_at)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    poem.id,
                    poem.old_english,
                    poem.modern_english,
                    poem.source,
                    poem.line_ref,
                    to_iso(poem.created_at),
                ),
            )
        return poem

    def add_if_missing(
        self, old_english: str, modern_english: str, source: str, line_ref: str = ""
    ) -> tuple[Poem, bool]:
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT * FROM poems WHERE source = ? AND line_ref = ? LIMIT 1",
                (source, line_ref),
            ).fetchone()
        if row:
            return Poem(**row_to_dict(row)), False
        return self.create(old_english, modern_english, source, line_ref), True

    def random(self) -> Poem | None:
        with self.db.transaction() as conn:
            row = conn.execute("SELECT * FROM poems ORDER BY RANDOM() LIMIT 1").fetchone()
        return Poem(**row_to_dict(row)) if row else None

    def delete(self, poem_id: str) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute("DELETE FROM poems WHERE id = ?", (poem_id,))
        return cursor.rowcount > 0

    def count(self) -> int:
        with self.db.transaction() as conn:
            return conn.execute("SELECT COUNT(*) FROM poems").fetchone()[0]
