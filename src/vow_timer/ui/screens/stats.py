"""Statistics view."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from vow_timer.models import SessionStatus
from vow_timer.ui.events import (
    BackToMenu,
    Effect,
    Emit,
    Event,
    KeyPressed,
    StatsLoaded,
    StatsReport,
)
from vow_timer.ui.screens.base import ScreenContext, ScreenState

_HELP = "esc/q back to menu"


class StatsScreen(ScreenState):
    def __init__(self, ctx: ScreenContext):
        super().__init__(ctx)
        self.report: StatsReport | None = None
        self.error: str | None = None

    def start(self) -> list[Effect]:
        return [self.ctx.load_stats_task()]

    def handle_event(self, event: Event) -> list[Effect]:
        if isinstance(event, StatsLoaded):
            self.report = event.report
            self.error = event.error
        elif isinstance(event, KeyPressed) and event.key in ("escape", "q"):
            return [Emit(BackToMenu())]
        return []

    def current_view(self) -> RenderableType:
        theme = self.theme
        title = Text("📜 Statistics", style=theme.title)
        help_text = Text(_HELP, style=theme.help)

        if self.error:
            return Group(
                title,
                Text(""),
                Text(f"Error loading stats: {self.error}", style=theme.error),
                Text(""),
                help_text,
            )
        if self.report is None:
            return Group(title, Text(""), Text("Loading...", style=theme.normal), Text(""), help_text)

        s = self.report.stats
        summary = Table.grid(padding=(0, 2))
        summary.add_column(width=3)
        summary.add_column(style=theme.normal)
        summary.add_column(justify="right", style=theme.selected)
        summary.add_row("✓", "Sessions Completed", str(s.completed_sessions))
        summary.add_row("💀", "Sessions Abandoned", str(s.abandoned_sessions))
        summary.add_row("⏱", "Total Focus Time", s.total_time_display)

        streaks = Table.grid(padding=(0, 2))
        streaks.add_column(width=3)
        streaks.add_column(style=theme.normal)
        streaks.add_column(justify="right", style=theme.streak)
        streaks.add_row("⚡", "Current Streak", f"{s.current_streak} days")
        streaks.add_row("🏆", "Longest Streak", f"{s.longest_streak} days")

        parts: list[RenderableType] = [
            title,
            Text(""),
            Text("Sessions", style=theme.selected),
            summary,
            Text(""),
            Text("Streaks", style=theme.selected),
            streaks,
        ]

        if self.report.by_subject:
            parts += [Text(""), Text("By Subject", style=theme.selected)]
            for name, count in self.report.by_subject.items():
                parts.append(Text(f"  {name}: {count} sessions", style=theme.normal))

        if self.report.recent:
            recent = Table(box=None, show_header=True, header_style=theme.help, pad_edge=False)
            recent.add_column("Date")
            recent.add_column("Subject")
            recent.add_column("Length", justify="right")
            recent.add_column("", justify="center")
            for session in self.report.recent:
                if session.status is SessionStatus.COMPLETED:
                    mark = Text("✓", style=theme.ok)
                else:
                    mark = Text("✗", style=theme.error)
                recent.add_row(
                    session.completed_at.strftime("%Y-%m-%d %H:%M"),
                    session.subject_name,
                    f"{session.duration}m",
                    mark,
                )
            parts += [Text(""), Text("Recent Sessions", style=theme.selected), recent]

        parts += [Text(""), help_text]
        return Group(*parts)
