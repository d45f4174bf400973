"""Store container: one connection and the repositories built on it.

Created once at startup and injected into services and the UI. Nothing
below this point knows which backend is in use.
"""

from __future__ import annotations

from dataclasses import dataclass

from vow_timer.adapters.sqlite import (
    DatabaseConnection,
    SqlitePoemRepository,
    SqliteQuoteRepository,
    SqliteSessionRepository,
    SqliteSubjectRepository,
)
from vow_timer.config import AppConfig
from vow_timer.repositories import (
    PoemRepository,
    QuoteRepository,
    SessionRepository,
    SubjectRepository,
)


@dataclass
class Store:
    subjects: SubjectRepository
    quotes: QuoteRepository
    poems: PoemRepository
    sessions: SessionRepository
    connection: DatabaseConnection | None = None

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()


def open_store(config: AppConfig) -> Store:
    """Connect to the configured store and build its repositories.

    Raises:
        ConfigError: If the connection string is malformed.
        StoreConnectionError: If the store cannot be reached.
    """
    db = DatabaseConnection(config.database_url, timeout=config.operation_timeout)
    db.connect()
    return Store(
        subjects=SqliteSubjectRepository(db),
        quotes=SqliteQuoteRepository(db),
        poems=SqlitePoemRepository(db),
        sessions=SqliteSessionRepository(db),
        connection=db,
    )
