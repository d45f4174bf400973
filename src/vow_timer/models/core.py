"""Record models persisted by the store."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class SessionStatus(str, Enum):
    """Terminal status of a focus session."""

    COMPLETED = "completed"
    ABANDONED = "abandoned"


class Subject(BaseModel):
    """Something the user focuses on (e.g. "Reading").

    Attributes:
        id: Unique identifier
        name: Display name
        icon: Single emoji shown beside the name
        created_at: Creation timestamp
    """

    id: str
    name: str
    icon: str = "📚"
    created_at: datetime


class Quote(BaseModel):
    """Motivational quote shown during a session.

    Attributes:
        id: Unique identifier
        text: Quote body
        source: Optional attribution
        subjects: Subject names the quote belongs to; empty means all subjects
        created_at: Creation timestamp
    """

    id: str
    text: str
    source: str = ""
    subjects: list[str] = Field(default_factory=list)
    created_at: datetime

    def applies_to(self, subject_name: str) -> bool:
        return not self.subjects or subject_name in self.subjects


class Poem(BaseModel):
    """Old English passage with its modern translation."""

    id: str
    old_english: str
    modern_english: str
    source: str
    line_ref: str = ""
    created_at: datetime


class Session(BaseModel):
    """One finished focus session.

    Attributes:
        id: Unique identifier
        subject_id: Subject reference
        subject_name: Subject name at the time of the session
        duration: Planned length in minutes
        status: completed or abandoned
        started_at: When the countdown began
        completed_at: When the outcome was reached
    """

    id: str
    subject_id: str
    subject_name: str
    duration: int
    status: SessionStatus
    started_at: datetime
    completed_at: datetime


class SessionStats(BaseModel):
    """Aggregate statistics over all sessions."""

    total_sessions: int = 0
    completed_sessions: int = 0
    abandoned_sessions: int = 0
    total_minutes: int = 0
    current_streak: int = 0
    longest_streak: int = 0

    @property
    def total_time_display(self) -> str:
        """Total focus time as ``Xh Ym`` or ``Ym``."""
        hours, minutes = divmod(self.total_minutes, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"
