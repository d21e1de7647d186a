"""Habit streak calculations."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Protocol

from ..logging_config import get_logger
from ..models.streak import Streak
from .cadence import as_day

logger = get_logger("services.streaks")


class DatedCompletion(Protocol):
    """Anything carrying a check-in day and its completion flag."""

    occurred_on: date | str
    completed: bool


def completed_days(check_ins: Iterable[DatedCompletion]) -> list[date]:
    """Return the distinct days with a completed check-in, newest first."""

    return sorted({as_day(ci.occurred_on) for ci in check_ins if ci.completed}, reverse=True)


def _current_streak(days_desc: list[date], today: date) -> int:
    # A gap of two or more days since the latest completion breaks the streak.
    if (today - days_desc[0]).days > 1:
        return 0

    current = 0
    for day in days_desc:
        expected = today - timedelta(days=current)
        # One-day grace: checking in "yesterday" still counts for this step.
        if day == expected or day == expected - timedelta(days=1):
            current += 1
        else:
            break
    return current


def _longest_streak(days_desc: list[date]) -> int:
    longest = 1
    run = 1
    ordered = list(reversed(days_desc))
    for previous, day in zip(ordered, ordered[1:]):
        if (day - previous).days <= 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def compute_streak(
    check_ins: Iterable[DatedCompletion],
    *,
    today: date | datetime,
    habit_id: Optional[int] = None,
) -> Streak:
    """Derive current and longest streak from a habit's full check-in history.

    The result is a fresh ``Streak`` record; nothing is read from or written to
    storage.
    """

    today = as_day(today)
    days = completed_days(check_ins)
    if not days:
        return Streak(habit_id=habit_id, current_streak=0, longest_streak=0, last_check_in_date=None)

    # Days after today play no part in the backward walk.
    past = [day for day in days if day <= today]
    current = _current_streak(past, today) if past else 0
    # The grace window can stretch the current run past the longest literal run.
    longest = max(_longest_streak(days), current)

    logger.debug(
        "Computed streak",
        extra={"habit_id": habit_id, "current": current, "longest": longest, "days": len(days)},
    )
    return Streak(
        habit_id=habit_id,
        current_streak=current,
        longest_streak=longest,
        last_check_in_date=days[0],
    )


__all__ = ["compute_streak", "completed_days"]
