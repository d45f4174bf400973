"""SQLite storage adapter for Vow Timer."""

from vow_timer.adapters.sqlite.connection import DatabaseConnection, parse_database_url
from vow_timer.adapters.sqlite.poem_repository import SqlitePoemRepository
from vow_timer.adapters.sqlite.quote_repository import SqliteQuoteRepository
from vow_timer.adapters.sqlite.session_repository import SqliteSessionRepository
from vow_timer.adapters.sqlite.subject_repository import SqliteSubjectRepository

__all__ = [
    "DatabaseConnection",
    "parse_database_url",
    "SqliteSubjectRepository",
    "SqliteQuoteRepository",
    "SqlitePoemRepository",
    "SqliteSessionRepository",
]
