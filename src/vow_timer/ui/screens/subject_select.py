"""Subject picker with an inline add form."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.text import Text

from vow_timer.models import Subject
from vow_timer.ui.events import (
    BackToMenu,
    Effect,
    Emit,
    Event,
    KeyPressed,
    RunTask,
    SubjectAdded,
    SubjectSelected,
    SubjectsLoaded,
    TextPasted,
)
from vow_timer.ui.screens.base import ScreenContext, ScreenState
from vow_timer.ui.screens.forms import TextField, TwoFieldForm

DEFAULT_SUBJECT_ICON = "📚"


class SubjectSelectScreen(ScreenState):
    def __init__(self, ctx: ScreenContext):
        super().__init__(ctx)
        self.subjects: list[Subject] = []
        self.cursor = 0
        self.loading = True
        self.adding = False
        self.error: str | None = None
        self.form = TwoFieldForm(
            TextField("Subject name (e.g., GoLang)", char_limit=50),
            TextField("Icon (e.g., 🔷)", char_limit=4),
        )

    def start(self) -> list[Effect]:
        return [self._load_task()]

    def _load_task(self) -> RunTask:
        return RunTask(
            name="load-subjects",
            work=self.ctx.subjects.list_all,
            to_event=lambda subjects, error: SubjectsLoaded(
                subjects=subjects or [], error=error
            ),
        )

    def _add_task(self, name: str, icon: str) -> RunTask:
        return RunTask(
            name="add-subject",
            work=lambda: self.ctx.subjects.create(name, icon),
            to_event=lambda subject, error: SubjectAdded(subject=subject, error=error),
        )

    def handle_event(self, event: Event) -> list[Effect]:
        if isinstance(event, SubjectsLoaded):
            self.loading = False
            if event.error:
                self.error = event.error
            else:
                self.subjects = list(event.subjects)
                self.cursor = min(self.cursor, max(0, len(self.subjects) - 1))
            return []

        if isinstance(event, SubjectAdded):
            if event.error:
                self.error = event.error
            elif event.subject is not None:
                self.subjects.append(event.subject)
                self.adding = False
                self.form.reset()
            return []

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
            self.cursor = min(max(0, len(self.subjects) - 1), self.cursor + 1)
        elif event.key in ("enter", "space"):
            if self.subjects:
                return [Emit(SubjectSelected(self.subjects[self.cursor]))]
        elif event.key == "a":
            self.adding = True
            self.form.reset()
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
            name = self.form.first.value.strip()
            if not name:
                return []
            icon = self.form.second.value.strip() or DEFAULT_SUBJECT_ICON
            return [self._add_task(name, icon)]
        self.form.handle_edit(event)
        return []

    def current_view(self) -> RenderableType:
        theme = self.theme
        title = Text("Choose Your Focus", style=theme.title)

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
                Text("Name:", style=theme.normal),
                self.form.first.render(theme, focused=self.form.focus == 0),
                Text(""),
                Text("Icon:", style=theme.normal),
                self.form.second.render(theme, focused=self.form.focus == 1),
                Text(""),
                Text("tab switch field • enter next/submit • esc cancel", style=theme.help),
            )

        if self.loading:
            return Group(title, Text(""), Text("Loading...", style=theme.normal))

        if not self.subjects:
            return Group(
                title,
                Text(""),
                Text("No subjects yet. Press 'a' to add one.", style=theme.normal),
                Text(""),
                Text("a add subject • esc/q back to menu", style=theme.help),
            )

        lines: list[RenderableType] = [title, Text("")]
        for i, subject in enumerate(self.subjects):
            selected = i == self.cursor
            line = Text("▸ " if selected else "  ")
            line.append(f"{subject.icon}  ")
            line.append(subject.name, style=theme.selected if selected else theme.normal)
            lines.append(line)
        lines.append(Text(""))
        lines.append(Text("↑/↓ navigate • enter select • a add • esc/q back", style=theme.help))
        return Group(*lines)
