"""Navigation between screens.

The router owns the active screen. Navigation events are handled here,
everything else goes to the active screen. It never performs effects
itself; ``VowApp`` realises whatever it returns.
"""

from __future__ import annotations

from rich.console import RenderableType

from vow_timer.ui.events import (
    BackToMenu,
    Effect,
    Event,
    KeyPressed,
    MenuChoice,
    MenuSelected,
    Quit,
    RunTask,
    SessionFinished,
    SessionSaved,
    StatsLoaded,
    SubjectSelected,
)
from vow_timer.ui.screens import (
    MenuScreen,
    QuotesAdminScreen,
    ScreenContext,
    ScreenState,
    StatsScreen,
    SubjectSelectScreen,
    TimerScreen,
)


class Router:
    def __init__(self, ctx: ScreenContext):
        self.ctx = ctx
        self.menu = MenuScreen(ctx)
        self.active: ScreenState = self.menu

    def start(self) -> list[Effect]:
        """Initial effects: the menu needs the current streak."""
        return [self.ctx.load_stats_task()]

    def current_view(self) -> RenderableType:
        return self.active.current_view()

    def show(self, screen: ScreenState) -> list[Effect]:
        self.active = screen
        return screen.start()

    def dispatch(self, event: Event) -> list[Effect]:
        if isinstance(event, KeyPressed) and event.key == "ctrl+c":
            return [Quit()]

        if isinstance(event, MenuSelected):
            return self._select(event.choice)

        if isinstance(event, SubjectSelected):
            return self.show(TimerScreen(self.ctx, event.subject, self.menu.display_mode))

        if isinstance(event, BackToMenu):
            self.active = self.menu
            return []

        if isinstance(event, StatsLoaded):
            effects = self.menu.handle_event(event)
            if isinstance(self.active, StatsScreen):
                effects += self.active.handle_event(event)
            return effects

        if isinstance(event, SessionFinished):
            return self._save_session(event)

        if isinstance(event, SessionSaved):
            effects = []
            if self.active is not self.menu:
                effects += self.active.handle_event(event)
            if event.error:
                self.menu.notice = f"Could not save session: {event.error}"
            return effects + [self.ctx.load_stats_task()]

        return self.active.handle_event(event)

    def _select(self, choice: MenuChoice) -> list[Effect]:
        if choice is MenuChoice.START_SESSION:
            return self.show(SubjectSelectScreen(self.ctx))
        if choice is MenuChoice.VIEW_STATS:
            return self.show(StatsScreen(self.ctx))
        if choice is MenuChoice.MANAGE_QUOTES:
            return self.show(QuotesAdminScreen(self.ctx))
        if choice is MenuChoice.QUIT:
            return [Quit()]
        return []

    def _save_session(self, event: SessionFinished) -> list[Effect]:
        outcome = event.outcome
        task = RunTask(
            name="save-session",
            work=lambda: self.ctx.sessions.record(outcome),
            to_event=lambda session, error: SessionSaved(
                session=session, completed=outcome.completed, error=error
            ),
        )
        if not outcome.completed:
            self.active = self.menu
        return [task]
