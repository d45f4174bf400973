"""Repository abstraction layer for Vow Timer.

Abstract base classes (ports) for every record kind the application stores.
The UI and services depend only on these interfaces; the SQLite adapter in
``vow_timer.adapters.sqlite`` provides the implementation.

All methods are blocking. Callers on the UI side run them inside background
tasks so the event loop never waits on the store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from vow_timer.models import Poem, Quote, Session, SessionStatus, Subject


class SubjectRepository(ABC):
    """Persistence operations for subjects."""

    @abstractmethod
    def list_all(self) -> list[Subject]:
        """List all subjects in creation order."""

    @abstractmethod
    def get(self, subject_id: str) -> Subject:
        """Get a subject by ID.

        Raises:
            NotFoundError: If the subject doesn't exist
        """

    @abstractmethod
    def create(self, name: str, icon: str) -> Subject:
        """Create a new subject."""

    @abstractmethod
    def add_if_missing(self, name: str, icon: str) -> tuple[Subject, bool]:
        """Create a subject unless one with the same name exists.

        Returns:
            (subject, created) where created is False for an existing subject
        """

    @abstractmethod
    def delete(self, subject_id: str) -> bool:
        """Delete a subject. Returns True if a row was removed."""


class QuoteRepository(ABC):
    """Persistence operations for motivational quotes."""

    @abstractmethod
    def list_all(self) -> list[Quote]:
        """List all quotes in creation order."""

    @abstractmethod
    def get(self, quote_id: str) -> Quote:
        """Get a quote by ID.

        Raises:
            NotFoundError: If the quote doesn't exist
        """

    @abstractmethod
    def create(
        self, text: str, source: str = "", subjects: list[str] | None = None
    ) -> Quote:
        """Create a new quote. An empty subject list makes it general."""

    @abstractmethod
    def add_if_missing(
        self, text: str, source: str = "", subjects: list[str] | None = None
    ) -> tuple[Quote, bool]:
        """Create a quote unless one with the same text exists."""

    @abstractmethod
    def random_for_subject(self, subject_name: str) -> Quote | None:
        """Pick a random quote that applies to the subject, or None."""

    @abstractmethod
    def delete(self, quote_id: str) -> bool:
        """Delete a quote. Returns True if a row was removed."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored quotes."""


class PoemRepository(ABC):
    """Persistence operations for Old English passages."""

    @abstractmethod
    def list_all(self) -> list[Poem]:
        """List all passages in creation order."""

    @abstractmethod
    def get(self, poem_id: str) -> Poem:
        """Get a passage by ID.

        Raises:
            NotFoundError: If the passage doesn't exist
        """

    @abstractmethod
    def create(
        self, old_english: str, modern_english: str, source: str, line_ref: str = ""
    ) -> Poem:
        """Create a new passage."""

    @abstractmethod
    def add_if_missing(
        self, old_english: str, modern_english: str, source: str, line_ref: str = ""
    ) -> tuple[Poem, bool]:
        """Create a passage unless one with the same source and line_ref exists."""

    @abstractmethod
    def random(self) -> Poem | None:
        """Pick a random passage, or None when none are stored."""

    @abstractmethod
    def delete(self, poem_id: str) -> bool:
        """Delete a passage. Returns True if a row was removed."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored passages."""


class SessionRepository(ABC):
    """Persistence operations and aggregate queries for focus sessions."""

    @abstractmethod
    def create(
        self,
        subject_id: str,
        subject_name: str,
        duration: int,
        status: SessionStatus,
        started_at: datetime,
        completed_at: datetime,
    ) -> Session:
        """Write a finished session. Sessions are never updated afterwards."""

    @abstractmethod
    def get(self, session_id: str) -> Session:
        """Get a session by ID.

        Raises:
            NotFoundError: If the session doesn't exist
        """

    @abstractmethod
    def recent(self, limit: int = 10) -> list[Session]:
        """Most recent sessions first."""

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Delete a session. Returns True if a row was removed."""

    @abstractmethod
    def count(self, status: SessionStatus | None = None) -> int:
        """Count sessions, optionally restricted to one status."""

    @abstractmethod
    def total_completed_minutes(self) -> int:
        """Sum of durations of completed sessions."""

    @abstractmethod
    def completion_timestamps(self) -> list[datetime]:
        """``completed_at`` of every completed session, newest first."""

    @abstractmethod
    def counts_by_subject(self) -> dict[str, int]:
        """Completed session counts keyed by subject name."""
