"""Main menu."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.text import Text

from vow_timer.services.content_service import DisplayMode
from vow_timer.ui.events import (
    Effect,
    Emit,
    Event,
    KeyPressed,
    MenuChoice,
    MenuSelected,
    Quit,
    StatsLoaded,
)
from vow_timer.ui.screens.base import ScreenContext, ScreenState
from vow_timer.ui.theme import render_header


@dataclass(frozen=True)
class MenuItem:
    icon: str
    text: str


_DISPLAY_ITEMS = {
    DisplayMode.QUOTES: MenuItem("💬", "Display: Quotes"),
    DisplayMode.POEMS: MenuItem("📖", "Display: Old English Poems"),
}


class MenuScreen(ScreenState):
    """Entry screen. Lives for the whole app so the streak and display mode persist."""

    def __init__(self, ctx: ScreenContext):
        super().__init__(ctx)
        self.cursor = 0
        self.streak = 0
        self.display_mode = DisplayMode.QUOTES
        self.notice: str | None = None

    @property
    def choices(self) -> list[MenuItem]:
        return [
            MenuItem("🎯", "Start Focus Session"),
            MenuItem("📜", "View Statistics"),
            MenuItem("💬", "Manage Quotes"),
            _DISPLAY_ITEMS[self.display_mode],
            MenuItem("🚪", "Quit"),
        ]

    def handle_event(self, event: Event) -> list[Effect]:
        if isinstance(event, StatsLoaded):
            if event.report is not None:
                self.streak = event.report.stats.current_streak
            return []
        if not isinstance(event, KeyPressed):
            return []

        if event.key in ("up", "k"):
            self.cursor = max(0, self.cursor - 1)
        elif event.key in ("down", "j"):
            self.cursor = min(len(self.choices) - 1, self.cursor + 1)
        elif event.key in ("enter", "space"):
            self.notice = None
            choice = MenuChoice(self.cursor)
            if choice is MenuChoice.TOGGLE_DISPLAY:
                self.display_mode = self.display_mode.toggled()
                return []
            return [Emit(MenuSelected(choice))]
        elif event.key == "q":
            return [Quit()]
        return []

    def current_view(self) -> RenderableType:
        theme = self.theme
        lines: list[RenderableType] = [
            render_header(theme),
            Text(f"v{self.ctx.version}", style=theme.help),
            Text(""),
        ]

        for i, item in enumerate(self.choices):
            selected = i == self.cursor
            line = Text("▸ " if selected else "  ")
            line.append(f"{item.icon}  ")
            line.append(item.text, style=theme.selected if selected else theme.normal)
            lines.append(line)

        lines.append(Text(""))
        if self.streak > 0:
            lines.append(Text(f"⚡ {self.streak} day streak", style=theme.streak))
        else:
            lines.append(Text("Start a session to begin your streak!", style=theme.help))

        if self.notice:
            lines.append(Text(""))
            lines.append(Text(self.notice, style=theme.error))

        lines.append(Text(""))
        lines.append(Text("↑/↓ navigate • enter select • q quit", style=theme.help))
        return Group(*lines)
