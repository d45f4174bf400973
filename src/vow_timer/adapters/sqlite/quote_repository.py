"""SQLite implementation of QuoteRepository."""

from __future__ import annotations

import json
import random
from typing import Any

from vow_timer.adapters.sqlite.connection import DatabaseConnection
from vow_timer.adapters.sqlite.utils import generate_uuid, now_local, row_to_dict, to_iso
from vow_timer.errors import NotFoundError
from vow_timer.models import Quote
from vow_timer.repositories import QuoteRepository


def _row_to_quote(row: Any) -> Quote:
    data = row_to_dict(row)
    data["subjects"] = json.loads(data.get("subjects") or "[]")
    return Quote(**data)


class SqliteQuoteRepository(QuoteRepository):
    """SQLite implementation of quote repository."""

    def __init__(self, db: DatabaseConnection, rng: random.Random | None = None):
        self.db = db
        self.rng = rng or random.Random()

    def list_all(self) -> list[Quote]:
        with self.db.transaction() as conn:
            rows = conn.execute("SELECT * FROM quotes ORDER BY created_at, rowid").fetchall()
        return [_row_to_quote(row) for row in rows]

    def get(self, quote_id: str) -> Quote:
        with self.db.transaction() as conn:
            row = conn.execute("SELECT * FROM quotes WHERE id = ?", (quote_id,)).fetchone()
        if not row:
            raise NotFoundError(f"Quote not found: {quote_id}")
        return _row_to_quote(row)

    def create(
        self, text: str, source: str = "", subjects: list[str] | None = None
    ) -> Quote:
        quote = Quote(
            id=generate_uuid(),
            text=text.strip(),
            source=source.strip(),
            subjects=list(subjects or []),
            created_at=now_local(),
        )
        with self.db.transaction() as conn:
            conn.execute(
                """INSERT INTO quotes (id, text, source, subjects, created_at)
                   VALUES (?, ?, ?, ?, ?)""",
                (
                    quote.id,
                    quote.text,
                    quote.source,
                    json.dumps(quote.subjects),
                    to_iso(quote.created_at),
                ),
            )
        return quote

    def add_if_missing(
        self, text: str, source: str = "", subjects: list[str] | None = None
    ) -> tuple[Quote, bool]:
        with self.db.transaction() as conn:
            row = conn.execute(
                "SELECT * FROM quotes WHERE text = ? LIMIT 1", (text.strip(),)
            ).fetchone()
        if row:
            return _row_to_quote(row), False
        return self.create(text, source, subjects), True

    def random_for_subject(self, subject_name: str) -> Quote | None:
        # Subject lists live in a JSON column, so filtering happens here.
        candidates = [q for q in self.list_all() if q.applies_to(subject_name)]
        if not candidates:
            return None
        return self.rng.choice(candidates)

    def delete(self, quote_id: str) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute("DELETE FROM quotes WHERE id = ?", (quote_id,))
        return cursor.rowcount > 0

    def count(self) -> int:
        with self.db.transaction() as conn:
            return conn.execute("SELECT COUNT(*) FROM quotes").fetchone()[0]
