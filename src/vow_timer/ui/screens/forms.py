"""Minimal text-entry state used by the add forms."""

from __future__ import annotations

from rich.text import Text

from vow_timer.ui.events import KeyPressed
from vow_timer.ui.theme import Theme


class TextField:
    """Single-line text buffer with a character limit."""

    def __init__(self, placeholder: str = "", char_limit: int = 100):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.value = ""

    def handle_key(self, event: KeyPressed) -> bool:
        """Apply an editing key. Returns False when the key isn't an edit."""
        if event.key == "backspace":
            self.value = self.value[:-1]
            return True
        char = event.character
        if char and len(char) == 1 and char.isprintable():
            if len(self.value) < self.char_limit:
                self.value += char
            return True
        return False

    def insert(self, text: str) -> None:
        """Append pasted text. Line breaks become spaces; the limit still holds."""
        flat = " ".join(text.splitlines())
        kept = "".join(ch for ch in flat if ch.isprintable())
        self.value = (self.value + kept)[: self.char_limit]

    def reset(self) -> None:
        self.value = ""

    def render(self, theme: Theme, focused: bool) -> Text:
        prompt = Text("> " if focused else "  ", style=theme.selected)
        if self.value:
            prompt.append(self.value, style=theme.selected if focused else theme.normal)
        else:
            prompt.append(self.placeholder, style=theme.help)
        if focused:
            prompt.append("█", style=theme.help)
        return prompt


class TwoFieldForm:
    """Two text fields with tab/enter focus movement."""

    def __init__(self, first: TextField, second: TextField):
        self.fields = (first, second)
        self.focus = 0

    @property
    def first(self) -> TextField:
        return self.fields[0]

    @property
    def second(self) -> TextField:
        return self.fields[1]

    def switch_focus(self) -> None:
        self.focus = 1 - self.focus

    def reset(self) -> None:
        for f in self.fields:
            f.reset()
        self.focus = 0

    def handle_edit(self, event: KeyPressed) -> bool:
        return self.fields[self.focus].handle_key(event)

    def paste(self, text: str) -> None:
        self.fields[self.focus].insert(text)
