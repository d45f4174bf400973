"""Vow Timer domain models.

Pydantic records owned by the store, plus the in-memory timer state machine
and the streak calculator.
"""

from .core import Poem, Quote, Session, SessionStats, SessionStatus, Subject
from .streaks import StreakSummary, calculate_streaks, days_from_timestamps
from .timer import FocusTimer, SessionOutcome, TimerPhase

__all__ = [
    # Records
    "Subject",
    "Quote",
    "Poem",
    "Session",
    "SessionStatus",
    "SessionStats",
    # Streaks
    "StreakSummary",
    "calculate_streaks",
    "days_from_timestamps",
    # Timer
    "FocusTimer",
    "SessionOutcome",
    "TimerPhase",
]
