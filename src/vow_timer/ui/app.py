"""Textual app hosting the router."""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from vow_timer.ui.events import (
    Effect,
    Emit,
    Event,
    KeyPressed,
    Quit,
    RingBell,
    RotationTick,
    RunTask,
    ScheduleRotation,
    ScheduleTick,
    TextPasted,
    Tick,
)
from vow_timer.ui.router import Router
from vow_timer.ui.screens import ScreenContext
from vow_timer.utils.logger import get_logger


class RouterEvent(Message):
    """Carries one router event through Textual's message queue."""

    def __init__(self, event: Event) -> None:
        super().__init__()
        self.event = event


class VowApp(App):
    """Single-view app: every event goes through the router, then the view is redrawn."""

    TITLE = "Vow Timer"
    CSS = """
    Screen {
        background: #1a1a1a;
        padding: 1 2;
    }

    #view {
        width: 100%;
        height: auto;
    }
    """
    # tab and escape would otherwise be taken by Textual's focus and screen bindings
    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("tab", "route_key('tab')", show=False, priority=True),
        Binding("escape", "route_key('escape')", show=False, priority=True),
    ]

    def __init__(self, ctx: ScreenContext):
        super().__init__()
        self.router = Router(ctx)

    def compose(self) -> ComposeResult:
        yield Static(id="view")

    def on_mount(self) -> None:
        self.apply_effects(self.router.start())

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.route(KeyPressed(event.key, event.character))

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self.route(TextPasted(event.text))

    def action_route_key(self, key: str) -> None:
        self.route(KeyPressed(key))

    def on_router_event(self, message: RouterEvent) -> None:
        self.route(message.event)

    def route(self, event: Event) -> None:
        self.apply_effects(self.router.dispatch(event))

    def show_view(self) -> None:
        self.query_one("#view", Static).update(self.router.current_view())

    def apply_effects(self, effects: list[Effect]) -> None:
        """Realise effects, then redraw the active screen."""
        for effect in effects:
            if isinstance(effect, ScheduleTick):
                self.set_timer(effect.delay, lambda owner=effect.owner: self.route(Tick(owner)))
            elif isinstance(effect, ScheduleRotation):
                self.set_timer(
                    effect.delay, lambda owner=effect.owner: self.route(RotationTick(owner))
                )
            elif isinstance(effect, Emit):
                self.post_message(RouterEvent(effect.event))
            elif isinstance(effect, RunTask):
                self.start_task(effect)
            elif isinstance(effect, RingBell):
                self.bell()
            elif isinstance(effect, Quit):
                self.exit()
                return
        self.show_view()

    def start_task(self, task: RunTask) -> None:
        def work() -> None:
            self.post_message(RouterEvent(task.execute()))

        get_logger().debug("Starting task %s", task.name)
        self.run_worker(work, name=task.name, thread=True, exit_on_error=False)
