"""Focus session countdown screen."""

from __future__ import annotations

import itertools

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vow_timer.models import FocusTimer, Poem, Quote, Subject
from vow_timer.services.content_service import DEFAULT_POEM, DEFAULT_QUOTE, DisplayMode
from vow_timer.ui.events import (
    BackToMenu,
    ContentLoaded,
    Effect,
    Emit,
    Event,
    KeyPressed,
    RingBell,
    RotationTick,
    RunTask,
    ScheduleRotation,
    ScheduleTick,
    SessionFinished,
    SessionSaved,
    Tick,
)
from vow_timer.ui.screens.base import ScreenContext, ScreenState
from vow_timer.ui.theme import format_clock, render_content, render_header, render_progress
from vow_timer.utils.logger import get_logger

_tokens = itertools.count(1)


class TimerScreen(ScreenState):
    """
    Drives a FocusTimer from wake-ups and key presses.

    The one-second tick and the content-rotation wake-up are each scheduled
    only while the timer is running, and never twice: ``tick_pending`` and
    ``rotation_pending`` record whether a wake-up is already on its way. A
    paused, confirming or finished timer lets the pending wake-up arrive, does
    nothing with it, and schedules no successor.

    Wake-ups and loaded content carry the ``token`` of the screen that asked
    for them. Anything addressed to an earlier session is dropped.
    """

    def __init__(self, ctx: ScreenContext, subject: Subject, mode: DisplayMode):
        super().__init__(ctx)
        self.subject = subject
        self.mode = mode
        self.token = next(_tokens)
        self.timer = FocusTimer(ctx.session_minutes, subject.id, subject.name, clock=ctx.clock)
        self.content: Quote | Poem = DEFAULT_POEM if mode is DisplayMode.POEMS else DEFAULT_QUOTE
        self.tick_pending = False
        self.rotation_pending = False
        self.saved = False
        self.save_error: str | None = None

    def start(self) -> list[Effect]:
        self.tick_pending = True
        self.rotation_pending = True
        return [
            self._load_content_task(),
            ScheduleTick(owner=self.token),
            ScheduleRotation(self.ctx.rotation_interval, owner=self.token),
        ]

    def _load_content_task(self) -> RunTask:
        return RunTask(
            name="load-content",
            work=lambda: self.ctx.content.content_for(self.mode, self.subject.name),
            to_event=lambda content, error: ContentLoaded(
                content=content, error=error, owner=self.token
            ),
        )

    def _reschedule(self) -> list[Effect]:
        effects: list[Effect] = []
        if not self.timer.running:
            return effects
        if not self.tick_pending:
            self.tick_pending = True
            effects.append(ScheduleTick(owner=self.token))
        if not self.rotation_pending:
            self.rotation_pending = True
            effects.append(ScheduleRotation(self.ctx.rotation_interval, owner=self.token))
        return effects

    def handle_event(self, event: Event) -> list[Effect]:
        if isinstance(event, (Tick, RotationTick, ContentLoaded)) and event.owner != self.token:
            return []

        if isinstance(event, Tick):
            self.tick_pending = False
            outcome = self.timer.tick()
            if outcome is not None:
                return [RingBell(), Emit(SessionFinished(outcome))]
            return self._reschedule()

        if isinstance(event, RotationTick):
            self.rotation_pending = False
            if not self.timer.running:
                return []
            self.rotation_pending = True
            return [
                self._load_content_task(),
                ScheduleRotation(self.ctx.rotation_interval, owner=self.token),
            ]

        if isinstance(event, ContentLoaded):
            if event.error:
                get_logger().warning("Content rotation failed: %s", event.error)
            elif event.content is not None:
                self.content = event.content
            return []

        if isinstance(event, SessionSaved):
            self.saved = event.error is None
            self.save_error = event.error
            return []

        if isinstance(event, KeyPressed):
            return self._handle_key(event)
        return []

    def _handle_key(self, event: KeyPressed) -> list[Effect]:
        timer = self.timer
        if timer.complete:
            if timer.outcome is not None and timer.outcome.completed:
                return [Emit(BackToMenu())]
            return []

        if timer.confirming:
            if event.key == "y":
                outcome = timer.confirm_abandon()
                if outcome is not None:
                    return [Emit(SessionFinished(outcome))]
            elif event.key in ("n", "escape"):
                timer.cancel_abandon()
                return self._reschedule()
            return []

        if event.key == "q":
            timer.request_abandon()
        elif event.key == "space":
            timer.toggle_pause()
            return self._reschedule()
        elif event.key == "r":
            timer.reset()
            return self._reschedule()
        return []

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def current_view(self) -> RenderableType:
        if self.timer.confirming:
            return self._render_confirmation()
        if self.timer.complete:
            return self._render_complete()
        return self._render_timer()

    def _render_timer(self) -> RenderableType:
        theme = self.theme
        timer = self.timer
        percent = timer.percent_complete

        if timer.running:
            status = Text(f"Focus Time: {self.subject.name}", style=theme.normal)
        else:
            status = Text("Paused", style=theme.normal)

        clock = Table.grid(padding=(0, 2))
        clock.add_row(
            Text(format_clock(timer.remaining_seconds), style=theme.timer),
            Text(f"({int(percent * 100)}% complete)", style=theme.help),
        )

        return Group(
            render_header(theme),
            Text(""),
            render_content(theme, self.content),
            Text(""),
            status,
            Text(""),
            render_progress(theme, percent),
            Text(""),
            clock,
            Text(""),
            Text("Spacebar to pause/resume • r reset • q quit", style=theme.help),
        )

    def _render_confirmation(self) -> RenderableType:
        theme = self.theme
        return Group(
            Text("Give up?", style=theme.error),
            Text(""),
            Text("This will be logged as abandoned 💀", style=theme.normal),
            Text(""),
            Text("[y] yes, abandon • [n] no, continue", style=theme.help),
        )

    def _render_complete(self) -> RenderableType:
        theme = self.theme
        body: list[RenderableType] = [
            Text("Your vow is kept.", style=theme.ok),
            Text(""),
            Text(
                f"You held to your word for {self.timer.duration_minutes} minutes.\n"
                "Your honour remains unbroken.",
                style=theme.normal,
            ),
            Text(""),
            Text(f"Subject: {self.subject.name}", style=theme.normal),
        ]
        if self.save_error:
            body += [Text(""), Text(f"Could not save session: {self.save_error}", style=theme.error)]
        body += [Text(""), Text("Press any key to continue", style=theme.help)]
        return Panel(Group(*body), border_style=theme.primary, padding=(1, 2), expand=False)
