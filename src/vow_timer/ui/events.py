"""Events flowing through the app's single message queue, and the effects
screens ask the router to perform.

Screens never touch the store, the clock or the terminal directly. They
react to events and return effects; the router turns effects into timers,
background tasks and new events.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union

from vow_timer.models import Poem, Quote, Session, SessionOutcome, SessionStats, Subject
from vow_timer.utils.logger import get_logger

# ---------------------------------------------------------------------------
# Input and wake-up events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyPressed:
    key: str
    character: str | None = None


@dataclass(frozen=True)
class TextPasted:
    """Bracketed paste from the terminal."""

    text: str


@dataclass(frozen=True)
class Tick:
    """One-second countdown wake-up for the timer identified by ``owner``."""

    owner: int = 0


@dataclass(frozen=True)
class RotationTick:
    """Content-rotation wake-up for the timer identified by ``owner``."""

    owner: int = 0


# ---------------------------------------------------------------------------
# Navigation events
# ---------------------------------------------------------------------------


class MenuChoice(IntEnum):
    START_SESSION = 0
    VIEW_STATS = 1
    MANAGE_QUOTES = 2
    TOGGLE_DISPLAY = 3
    QUIT = 4


@dataclass(frozen=True)
class MenuSelected:
    choice: MenuChoice


@dataclass(frozen=True)
class SubjectSelected:
    subject: Subject


@dataclass(frozen=True)
class BackToMenu:
    pass


@dataclass(frozen=True)
class SessionFinished:
    outcome: SessionOutcome


# ---------------------------------------------------------------------------
# Task results
# ---------------------------------------------------------------------------


@dataclass
class StatsReport:
    stats: SessionStats
    by_subject: dict[str, int] = field(default_factory=dict)
    recent: list[Session] = field(default_factory=list)


@dataclass(frozen=True)
class StatsLoaded:
    report: StatsReport | None = None
    error: str | None = None


@dataclass(frozen=True)
class SubjectsLoaded:
    subjects: list[Subject] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class SubjectAdded:
    subject: Subject | None = None
    error: str | None = None


@dataclass(frozen=True)
class QuotesLoaded:
    quotes: list[Quote] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class QuoteAdded:
    quote: Quote | None = None
    error: str | None = None


@dataclass(frozen=True)
class QuoteDeleted:
    error: str | None = None


@dataclass(frozen=True)
class ContentLoaded:
    content: Quote | Poem | None = None
    error: str | None = None
    owner: int = 0


@dataclass(frozen=True)
class SessionSaved:
    session: Session | None = None
    completed: bool = True
    error: str | None = None


Event = Union[
    KeyPressed,
    TextPasted,
    Tick,
    RotationTick,
    MenuSelected,
    SubjectSelected,
    BackToMenu,
    SessionFinished,
    StatsLoaded,
    SubjectsLoaded,
    SubjectAdded,
    QuotesLoaded,
    QuoteAdded,
    QuoteDeleted,
    ContentLoaded,
    SessionSaved,
]

# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScheduleTick:
    delay: float = 1.0
    owner: int = 0


@dataclass(frozen=True)
class ScheduleRotation:
    delay: float
    owner: int = 0


@dataclass(frozen=True)
class Emit:
    """Enqueue an event behind whatever is already waiting."""

    event: Event


@dataclass(frozen=True)
class RingBell:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class RunTask:
    """A blocking unit of work whose completion becomes a result event.

    ``work`` runs off the event loop. ``to_event`` receives either the work's
    return value or, if it raised, ``None`` and the error message.
    """

    name: str
    work: Callable[[], Any]
    to_event: Callable[[Any, str | None], Event]

    def execute(self) -> Event:
        try:
            result = self.work()
        except Exception as e:
            get_logger().warning("Task %s failed: %s", self.name, e, exc_info=True)
            return self.to_event(None, str(e) or e.__class__.__name__)
        return self.to_event(result, None)


Effect = Union[ScheduleTick, ScheduleRotation, Emit, RingBell, Quit, RunTask]
