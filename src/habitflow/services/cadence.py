"""Cadence calendar: stepping and counting habit occurrences.

Two notions of "one month" live here on purpose:

* ``increment`` steps by true calendar units (used for reminder scheduling),
  clamping month-end overflow to the last valid day (Jan 31 -> Feb 28).
* ``expected_occurrences`` estimates counts with fixed day lengths
  (7/30/90/365), so a 31-day month holds two "monthly" occurrences.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Iterator, TypeVar

from dateutil.relativedelta import relativedelta

from ..constants.cadence import Frequency, Period, TargetType
from ..errors import ConfigError, ParseError

_When = TypeVar("_When", date, datetime)

_STEP: dict[Frequency, relativedelta] = {
    Frequency.DAILY: relativedelta(days=1),
    Frequency.WEEKLY: relativedelta(weeks=1),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.QUARTERLY: relativedelta(months=3),
    Frequency.YEARLY: relativedelta(years=1),
}

_DAYS_PER_OCCURRENCE: dict[Frequency, int] = {
    Frequency.DAILY: 1,
    Frequency.WEEKLY: 7,
    Frequency.MONTHLY: 30,
    Frequency.QUARTERLY: 90,
    Frequency.YEARLY: 365,
}


def _parse_enum(enum_cls, value, label: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_cls)
    raise ConfigError(f"Unknown {label} {value!r}; expected one of: {allowed}")


def parse_frequency(value: Frequency | str) -> Frequency:
    """Return the ``Frequency`` for ``value`` or raise ``ConfigError``."""

    return _parse_enum(Frequency, value, "frequency")


def parse_target_type(value: TargetType | str) -> TargetType:
    return _parse_enum(TargetType, value, "target type")


def parse_period(value: Period | str) -> Period:
    return _parse_enum(Period, value, "period")


def as_day(value: date | datetime | str) -> date:
    """Coerce a check-in or habit date into a calendar day.

    Accepts ``date``, ``datetime`` (time part dropped) and ISO strings, either
    ``YYYY-MM-DD`` or a full ISO timestamp.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise ParseError(f"Cannot parse {value!r} as a calendar day")


def increment(frequency: Frequency | str, when: _When) -> _When:
    """Advance ``when`` by one cadence unit, keeping any time of day."""

    return when + _STEP[parse_frequency(frequency)]


def expected_occurrences(frequency: Frequency | str, start: date | datetime, end: date | datetime) -> int:
    """Approximate how many occurrences fall in the inclusive range ``[start, end]``."""

    freq = parse_frequency(frequency)
    days = (as_day(end) - as_day(start)).days + 1
    if days <= 0:
        return 0
    return math.ceil(days / _DAYS_PER_OCCURRENCE[freq])


def period_bounds(period: Period | str, now: date | datetime) -> tuple[date, date]:
    """Return the first and last calendar day of the period containing ``now``.

    Weeks are ISO weeks (Monday through Sunday).
    """

    selected = parse_period(period)
    today = as_day(now)
    if selected is Period.WEEK:
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)
    if selected is Period.MONTH:
        start = today.replace(day=1)
        return start, start + relativedelta(months=1) - timedelta(days=1)
    return today.replace(month=1, day=1), today.replace(month=12, day=31)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each calendar day from ``start`` to ``end`` inclusive."""

    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


__all__ = [
    "as_day",
    "expected_occurrences",
    "increment",
    "iter_days",
    "parse_frequency",
    "parse_period",
    "parse_target_type",
    "period_bounds",
]
