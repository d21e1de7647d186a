"""Period progress and completion-rate aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Protocol

from ..constants.cadence import MAX_TARGET_MINUTES, TARGET_LIMITS, Frequency, Period, TargetType
from ..errors import ValidationError
from ..logging_config import get_logger
from .cadence import (
    as_day,
    expected_occurrences,
    iter_days,
    parse_frequency,
    parse_period,
    parse_target_type,
    period_bounds,
)

logger = get_logger("services.progress")


class HabitCadence(Protocol):
    frequency: str
    target_type: str
    target_value: int


class CheckInLike(Protocol):
    occurred_on: date | str
    completed: bool
    value: float


@dataclass(slots=True)
class DailyPoint:
    """One day in a dense progress series."""

    date: date
    completed: bool
    value: float


@dataclass(slots=True)
class ProgressData:
    """Completion summary for one week, month or year."""

    period: Period
    start_date: date
    end_date: date
    expected: int
    completed: int
    completion_rate: int
    daily_data: list[DailyPoint] = field(default_factory=list)


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage rounded half up; 0 when ``whole`` is 0."""

    if whole <= 0:
        return 0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def count_completed(check_ins: Iterable[CheckInLike]) -> int:
    return sum(1 for ci in check_ins if ci.completed)


def lifetime_completion_rate(check_ins: Iterable[CheckInLike]) -> int:
    """Share of all recorded check-ins that were completed, as a percentage."""

    rows = list(check_ins)
    return percentage(count_completed(rows), len(rows))


def calculate_progress(
    habit: HabitCadence,
    check_ins: Iterable[CheckInLike],
    period: Period | str = Period.WEEK,
    *,
    now: date | datetime,
) -> ProgressData:
    """Summarize a habit's completions for the period containing ``now``."""

    selected = parse_period(period)
    parse_target_type(habit.target_type)
    start, end = period_bounds(selected, now)
    expected = expected_occurrences(habit.frequency, start, end)

    by_day = {}
    for ci in check_ins:
        by_day[as_day(ci.occurred_on)] = ci

    completed = sum(1 for day, ci in by_day.items() if start <= day <= end and ci.completed)
    # Day-count estimates can undershoot the real number of calendar occurrences.
    rate = min(percentage(completed, expected), 100)

    daily_data = []
    for day in iter_days(start, end):
        ci = by_day.get(day)
        daily_data.append(
            DailyPoint(
                date=day,
                completed=bool(ci.completed) if ci else False,
                value=ci.value if ci else 0,
            )
        )

    logger.debug(
        "Calculated progress",
        extra={"period": selected.value, "expected": expected, "completed": completed, "rate": rate},
    )
    return ProgressData(
        period=selected,
        start_date=start,
        end_date=end,
        expected=expected,
        completed=completed,
        completion_rate=rate,
        daily_data=daily_data,
    )


def is_check_in_completed(habit: HabitCadence, value: float) -> bool:
    """Decide whether a check-in value meets the habit's target."""

    if value < 0:
        raise ValidationError(f"Check-in value cannot be negative, got {value}")
    if parse_target_type(habit.target_type) is TargetType.BOOLEAN:
        return value > 0
    return value >= habit.target_value


def validate_frequency_target(
    frequency: Frequency | str, target_type: TargetType | str, target_value: int
) -> None:
    """Raise ``ValidationError`` if the target does not suit the cadence."""

    freq = parse_frequency(frequency)
    kind = parse_target_type(target_type)
    if kind is TargetType.BOOLEAN:
        return

    if target_value <= 0:
        raise ValidationError("Target value must be greater than 0")

    if kind is TargetType.MINUTES and target_value > MAX_TARGET_MINUTES:
        raise ValidationError(f"Target minutes cannot exceed {MAX_TARGET_MINUTES} (24 hours)")

    low, high = TARGET_LIMITS[freq]
    if not low <= target_value <= high:
        raise ValidationError(
            f"Target value for {freq.value} frequency should be between {low} and {high}"
        )


__all__ = [
    "DailyPoint",
    "ProgressData",
    "calculate_progress",
    "count_completed",
    "is_check_in_completed",
    "lifetime_completion_rate",
    "percentage",
    "validate_frequency_target",
]
