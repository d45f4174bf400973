"""Quote management: list, add, delete."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.text import Text

from vow_timer.models import Quote
from vow_timer.ui.events import (
    BackToMenu,
    Effect,
    Emit,
    Event,
    KeyPressed,
    QuoteAdded,
    QuoteDeleted,
    QuotesLoaded,
    RunTask,
    TextPasted,
)
from vow_timer.ui.screens.base import ScreenContext, ScreenState
from vow_timer.ui.screens.forms import TextField, TwoFieldForm
from vow_timer.ui.theme import truncate

PREVIEW_LENGTH = 50


class QuotesAdminScreen(ScreenState):
    def __init__(self, ctx: ScreenContext):
        super().__init__(ctx)
        self.quotes: list[Quote] = []
        self.cursor = 0
        self.loading = True
        self.adding = False
        self.error: str | None = None
        self.form = TwoFieldForm(
            TextField("Enter quote text...", char_limit=500),
            TextField("Source (optional)", char_limit=100),
        )

    def start(self) -> list[Effect]:
        return [self._load_task()]

    def _load_task(self) -> RunTask:
        return RunTask(
            name="load-quotes",
            work=self.ctx.quotes.list_all,
            to_event=lambda quotes, error: QuotesLoaded(quotes=quotes or [], error=error),
        )

    def _add_task(self, text: str, source: str) -> RunTask:
        return RunTask(
            name="add-quote",
            work=lambda: self.ctx.quotes.create(text, source),
            to_event=lambda quote, error: QuoteAdded(quote=quote, error=error),
        )

    def _delete_task(self, quote_id: str) -> RunTask:
        return RunTask(
            name="delete-quote",
            work=lambda: self.ctx.quotes.delete(quote_id),
            to_event=lambda _, error: QuoteDeleted(error=error),
        )

    def handle_event(self, event: Event) -> list[Effect]:
        if isinstance(event, QuotesLoaded):
            self.loading = False
            if event.error:
                self.error = event.error
            else:
                self.quotes = list(event.quotes)
                self.cursor = min(self.cursor, max(0, len(self.quotes) - 1))
            return []

        if isinstance(event, QuoteAdded):
            if event.error:
                self.error = event.error
            elif event.quote is not None:
                self.quotes.append(event.quote)
                self.adding = False
                self.form.reset()
            return []

        if isinstance(event, QuoteDeleted):
            if event.error:
                self.error = event.error
            return [self._load_task()]

        if isinstance(event, TextPasted):
            if self.adding:
                self.form.paste(event.text)
            return []

        if not isinstance(event, KeyPressed):
            return []
        if self.adding:
            return self._handle_form_key(event)

        if event.key in ("escape", "q"):
            return [Emit(BackToMenu())]
        if self.error:
            return []
        if event.key in ("up", "k"):
            self.cursor = max(0, self.cursor - 1)
        elif event.key in ("down", "j"):
            self.cursor = min(max(0, len(self.quotes) - 1), self.cursor + 1)
        elif event.key == "a":
            self.adding = True
            self.form.reset()
        elif event.key in ("d", "delete"):
            if self.quotes and self.cursor < len(self.quotes):
                return [self._delete_task(self.quotes[self.cursor].id)]
        return []

    def _handle_form_key(self, event: KeyPressed) -> list[Effect]:
        if event.key == "escape":
            self.adding = False
            self.form.reset()
            return []
        if event.key == "tab":
            self.form.switch_focus()
            return []
        if event.key == "enter":
            if self.form.focus == 0:
                self.form.switch_focus()
                return []
            text = self.form.first.value.strip()
            if not text:
                return []
            return [self._add_task(text, self.form.second.value.strip())]
        self.form.handle_edit(event)
        return []

    def current_view(self) -> RenderableType:
        theme = self.theme
        title = Text("💬 Manage Quotes", style=theme.title)

        if self.error:
            return Group(
                title,
                Text(""),
                Text(f"Error: {self.error}", style=theme.error),
                Text(""),
                Text("esc/q back to menu", style=theme.help),
            )

        if self.adding:
            return Group(
                title,
                Text(""),
                Text("Quote:", style=theme.normal),
                self.form.first.render(theme, focused=self.form.focus == 0),
                Text(""),
                Text("Source:", style=theme.normal),
                self.form.second.render(theme, focused=self.form.focus == 1),
                Text(""),
                Text("tab switch field • enter next/submit • esc cancel", style=theme.help),
            )

        if self.loading:
            return Group(title, Text(""), Text("Loading...", style=theme.normal))

        if not self.quotes:
            return Group(
                title,
                Text(""),
                Text("No quotes yet. Press 'a' to add one.", style=theme.normal),
                Text(""),
                Text("a add • esc/q back to menu", style=theme.help),
            )

        lines: list[RenderableType] = [title, Text("")]
        for i, quote in enumerate(self.quotes):
            selected = i == self.cursor
            label = truncate(quote.text, PREVIEW_LENGTH)
            if quote.source:
                label += f" — {quote.source}"
            line = Text("▸ " if selected else "  ")
            line.append(label, style=theme.selected if selected else theme.normal)
            lines.append(line)
        lines.append(Text(""))
        lines.append(Text("↑/↓ navigate • a add • d delete • esc/q back", style=theme.help))
        return Group(*lines)
