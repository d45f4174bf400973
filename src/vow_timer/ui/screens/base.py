"""Screen interface shared by every view the router can show."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from rich.console import RenderableType

from vow_timer import __version__
from vow_timer.config import AppConfig
from vow_timer.repositories import QuoteRepository, SubjectRepository
from vow_timer.services.content_service import ContentService
from vow_timer.services.session_service import SessionService
from vow_timer.services.stats_service import StatsService
from vow_timer.services.store import Store
from vow_timer.ui.events import Effect, Event, RunTask, StatsLoaded, StatsReport
from vow_timer.ui.theme import DEFAULT_THEME, Theme


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class ScreenContext:
    """Collaborators handed to every screen at construction."""

    subjects: SubjectRepository
    quotes: QuoteRepository
    content: ContentService
    stats: StatsService
    sessions: SessionService
    theme: Theme = DEFAULT_THEME
    session_minutes: int = 25
    rotation_interval: float = 180.0
    version: str = __version__
    clock: Callable[[], datetime] = field(default=_now)

    @classmethod
    def from_store(
        cls, store: Store, config: AppConfig, theme: Theme = DEFAULT_THEME
    ) -> ScreenContext:
        return cls(
            subjects=store.subjects,
            quotes=store.quotes,
            content=ContentService(store.quotes, store.poems),
            stats=StatsService(store.sessions),
            sessions=SessionService(store.sessions),
            theme=theme,
            session_minutes=config.session_minutes,
            rotation_interval=config.rotation_interval,
        )

    def load_stats_task(self, recent: int = 5) -> RunTask:
        """Background task producing a full StatsLoaded event."""

        def work() -> StatsReport:
            return StatsReport(
                stats=self.stats.get_session_stats(),
                by_subject=self.stats.sessions_by_subject(),
                recent=self.stats.recent_sessions(recent),
            )

        return RunTask(
            name="load-stats",
            work=work,
            to_event=lambda report, error: StatsLoaded(report=report, error=error),
        )


class ScreenState(ABC):
    """One view of the app: reacts to events and describes what to draw."""

    def __init__(self, ctx: ScreenContext):
        self.ctx = ctx

    @property
    def theme(self) -> Theme:
        return self.ctx.theme

    def start(self) -> list[Effect]:
        """Effects to run when the screen becomes active."""
        return []

    @abstractmethod
    def handle_event(self, event: Event) -> list[Effect]:
        """Update state for one event and return the effects it causes."""

    @abstractmethod
    def current_view(self) -> RenderableType:
        """Renderable for the current state."""
