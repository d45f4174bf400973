"""Database connection management for the SQLite store.

One ``DatabaseConnection`` is created at startup from the configured
connection string and shared by every repository. Background tasks may use
it from worker threads, so access is serialised behind a lock whose wait is
bounded by the operation timeout.
"""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from vow_timer.adapters.sqlite.schema import ALL_TABLES, INDEXES, SCHEMA_VERSION
from vow_timer.adapters.sqlite.utils import now_local, to_iso
from vow_timer.errors import ConfigError, StoreConnectionError, StoreError
from vow_timer.utils.logger import get_logger

MEMORY = ":memory:"
_SQLITE_PREFIX = "sqlite:///"


def parse_database_url(url: str) -> str:
    """Turn a connection string into a sqlite3 database argument.

    Accepts ``sqlite:///relative/path.db``, ``sqlite:////absolute/path.db``,
    ``sqlite:///:memory:`` or a bare filesystem path.

    Raises:
        ConfigError: For empty strings or non-SQLite schemes.
    """
    url = url.strip()
    if not url:
        raise ConfigError("Connection string cannot be empty")
    if url.startswith(_SQLITE_PREFIX):
        target = url[len(_SQLITE_PREFIX) :]
        if not target:
            raise ConfigError(f"Connection string has no database path: {url}")
        return target
    if "://" in url:
        scheme = url.split("://", 1)[0]
        raise ConfigError(f"Unsupported connection string scheme: {scheme}")
    return url


class DatabaseConnection:
    """Shared connection to the SQLite store.

    Provides:
    - Connection and schema setup with a reachability check
    - Serialised access across worker threads
    - Bounded waits (no retries): a timeout is an ordinary failure
    """

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.target = parse_database_url(url)
        self.timeout = timeout
        self._connection: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> sqlite3.Connection:
        """Open the database, create the schema and verify it answers.

        Raises:
            StoreConnectionError: If the database cannot be opened or queried.
        """
        if self._connection is not None:
            return self._connection

        logger = get_logger()
        try:
            database = self.target
            if database != MEMORY:
                path = Path(database).expanduser()
                path.parent.mkdir(parents=True, exist_ok=True)
                database = str(path)
            connection = sqlite3.connect(
                database,
                check_same_thread=False,  # used from Textual worker threads
                timeout=self.timeout,
            )
            connection.row_factory = sqlite3.Row
            self._init_schema(connection)
            connection.execute("SELECT 1").fetchone()
        except (sqlite3.Error, OSError) as e:
            logger.error("Could not connect to store %s: %s", self.url, e)
            raise StoreConnectionError(f"Could not connect to store: {e}") from e

        logger.info("Connected to store %s", self.url)
        self._connection = connection
        return connection

    @staticmethod
    def _init_schema(connection: sqlite3.Connection) -> None:
        for statement in ALL_TABLES:
            connection.execute(statement)
        for statement in INDEXES:
            connection.execute(statement)
        connection.execute(
            "INSERT OR IGNORE INTO schema_version (version, applied_at) VALUES (?, ?)",
            (SCHEMA_VERSION, to_iso(now_local())),
        )
        connection.commit()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection for one unit of work and commit it.

        Raises:
            StoreError: On lock timeout or any SQLite failure (rolled back).
        """
        if self._connection is None:
            raise StoreError("Store is not connected")
        if not self._lock.acquire(timeout=self.timeout):
            raise StoreError(f"Timed out after {self.timeout}s waiting for the store")
        try:
            try:
                yield self._connection
                self._connection.commit()
            except sqlite3.Error as e:
                self._connection.rollback()
                raise StoreError(str(e)) from e
        finally:
            self._lock.release()

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._connection is None:
            return
        with self._lock:
            self._connection.close()
            self._connection = None
