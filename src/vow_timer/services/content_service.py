"""Motivational content shown during a session."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from vow_timer.models import Poem, Quote
from vow_timer.repositories import PoemRepository, QuoteRepository
from vow_timer.utils.logger import get_logger

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_QUOTE = Quote(id="default", text="Focus on your task.", created_at=_EPOCH)

DEFAULT_POEM = Poem(
    id="default",
    old_english="Wyrd oft nereð\nunfǽgne eorl, þonne his ellen déah",
    modern_english="Fate often saves\nan undoomed man, when his courage holds",
    source="Beowulf",
    line_ref="lines 572-573",
    created_at=_EPOCH,
)


class DisplayMode(str, Enum):
    QUOTES = "quotes"
    POEMS = "poems"

    def toggled(self) -> DisplayMode:
        return DisplayMode.POEMS if self is DisplayMode.QUOTES else DisplayMode.QUOTES


class ContentService:
    """Picks random content, falling back to built-in defaults when none is stored.

    An empty store is not an error. Store failures still propagate so the
    caller can report them.
    """

    def __init__(self, quote_repository: QuoteRepository, poem_repository: PoemRepository):
        self.quotes = quote_repository
        self.poems = poem_repository

    def quote_for(self, subject_name: str) -> Quote:
        quote = self.quotes.random_for_subject(subject_name)
        if quote is None:
            get_logger().debug("No quotes for %r, using default", subject_name)
            return DEFAULT_QUOTE
        return quote

    def poem(self) -> Poem:
        poem = self.poems.random()
        if poem is None:
            get_logger().debug("No poems stored, using default")
            return DEFAULT_POEM
        return poem

    def content_for(self, mode: DisplayMode, subject_name: str) -> Quote | Poem:
        if mode is DisplayMode.POEMS:
            return self.poem()
        return self.quote_for(subject_name)
