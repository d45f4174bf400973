"""Repository interfaces for Vow Timer.

Abstract base classes (ABCs) that define the contracts for data persistence.
The implementation lives in ``vow_timer.adapters.sqlite``.
"""

from .repository import (
    PoemRepository,
    QuoteRepository,
    SessionRepository,
    SubjectRepository,
)

__all__ = [
    "SubjectRepository",
    "QuoteRepository",
    "PoemRepository",
    "SessionRepository",
]
