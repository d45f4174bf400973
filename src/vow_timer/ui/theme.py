"""Colours and text styles, plus the small rendering helpers that use them.

A ``Theme`` is built once and handed to the app and every screen; nothing
here is mutated at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.text import Text

from vow_timer.models import Poem, Quote


@dataclass(frozen=True)
class Theme:
    """Rich style strings for every element the screens draw."""

    primary: str = "#E6DCC7"  # parchment
    secondary: str = "#A9A393"  # ash
    muted: str = "#7C776C"
    gold: str = "#DAA520"
    success: str = "green"
    danger: str = "red"
    progress_complete: str = "#C9A84C"
    progress_remaining: str = "#4A3728"
    progress_width: int = 60
    content_width: int = 70

    @property
    def title(self) -> str:
        return f"bold {self.primary}"

    @property
    def selected(self) -> str:
        return f"bold {self.primary}"

    @property
    def normal(self) -> str:
        return self.secondary

    @property
    def help(self) -> str:
        return self.muted

    @property
    def error(self) -> str:
        return f"bold {self.danger}"

    @property
    def ok(self) -> str:
        return f"bold {self.success}"

    @property
    def streak(self) -> str:
        return f"bold {self.gold}"

    @property
    def timer(self) -> str:
        return f"bold {self.primary}"

    @property
    def quote(self) -> str:
        return f"italic {self.secondary}"

    @property
    def old_english(self) -> str:
        return f"italic {self.gold}"


DEFAULT_THEME = Theme()


def render_header(theme: Theme) -> Text:
    return Text("Bēot", style=theme.title)


def render_quote(theme: Theme, quote: Quote) -> RenderableType:
    parts: list[RenderableType] = [
        Padding(Text(f'"{quote.text}"', style=theme.quote), (0, 0, 0, 2))
    ]
    if quote.source:
        parts.append(Text(f"    — {quote.source}", style=theme.help))
    return Group(*parts)


def render_poem(theme: Theme, poem: Poem) -> RenderableType:
    attribution = poem.source
    if poem.line_ref:
        attribution += f", {poem.line_ref}"
    return Group(
        Padding(Text(poem.old_english, style=theme.old_english), (0, 0, 0, 2)),
        Text(""),
        Padding(Text(poem.modern_english, style=theme.normal), (0, 0, 0, 2)),
        Text(f"    — {attribution}", style=theme.help),
    )


def render_content(theme: Theme, content: Quote | Poem) -> RenderableType:
    if isinstance(content, Poem):
        return render_poem(theme, content)
    return render_quote(theme, content)


def render_progress(theme: Theme, fraction: float) -> ProgressBar:
    return ProgressBar(
        total=100,
        completed=round(fraction * 100, 1),
        width=theme.progress_width,
        style=theme.progress_remaining,
        complete_style=theme.progress_complete,
        finished_style=theme.progress_complete,
    )


def format_clock(seconds: int) -> str:
    """Seconds as MM:SS."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
