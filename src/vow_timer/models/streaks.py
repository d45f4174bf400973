"""Streak calculation over the set of days with completed sessions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import NamedTuple


class StreakSummary(NamedTuple):
    current: int
    longest: int


def _as_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def days_from_timestamps(timestamps: Iterable[datetime]) -> set[date]:
    """Truncate completion timestamps to the set of local calendar days."""
    return {_as_day(ts) for ts in timestamps}


def calculate_streaks(
    days: Iterable[date | datetime], today: date | None = None
) -> StreakSummary:
    """
    Calculate current and longest streaks.

    A streak is a run of consecutive calendar days with at least one
    completed session. The current streak only counts when the most recent
    day is today or yesterday, so a streak survives until the end of the
    day after the last completion.

    Args:
        days: Days (or timestamps) with a completed session, in any order.
            Duplicates are ignored.
        today: Reference day; defaults to the local date.

    Returns:
        StreakSummary(current, longest)
    """
    ordered = sorted({_as_day(d) for d in days}, reverse=True)
    if not ordered:
        return StreakSummary(0, 0)

    if today is None:
        today = date.today()
    one_day = timedelta(days=1)

    current = 0
    if ordered[0] in (today, today - one_day):
        current = 1
        for prev, curr in zip(ordered, ordered[1:]):
            if prev - curr != one_day:
                break
            current += 1

    longest = 0
    run = 1
    for prev, curr in zip(ordered, ordered[1:]):
        if prev - curr == one_day:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    return StreakSummary(current, longest)
