"""Reminder state machine.

A reminder is ``disabled``, ``pending`` (fires in the future) or ``due``
(``next_reminder_date <= now``). ``due`` is never stored: it is read off the
clock each time. Transitions return a new ``Reminder`` and leave the input
untouched; persisting the result is the caller's job.

Snoozing or acknowledging requires an enabled reminder: a disabled one raises
``ValidationError`` rather than being silently rescheduled.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Iterable, Optional

from ..constants.cadence import Frequency, ReminderState
from ..errors import ParseError, ReminderNotFoundError, ValidationError
from ..logging_config import get_logger
from ..models.reminder import Reminder
from .cadence import increment

logger = get_logger("services.reminders")


def parse_reminder_time(value: time | str) -> time:
    """Parse a wall-clock ``HH:MM`` (or ``HH:MM:SS``) string."""

    if isinstance(value, time):
        return value
    try:
        return time.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise ParseError(f"Cannot parse {value!r} as a time of day") from exc


def _replace(reminder: Reminder, **changes) -> Reminder:
    fields = {
        "id": reminder.id,
        "habit_id": reminder.habit_id,
        "enabled": reminder.enabled,
        "reminder_time": reminder.reminder_time,
        "next_reminder_date": reminder.next_reminder_date,
    }
    fields.update(changes)
    return Reminder(**fields)


def _require_active(reminder: Optional[Reminder]) -> Reminder:
    if reminder is None:
        raise ReminderNotFoundError()
    if not reminder.enabled:
        raise ValidationError(f"Reminder for habit {reminder.habit_id} is disabled")
    return reminder


def reminder_state(reminder: Reminder, *, now: datetime) -> ReminderState:
    if not reminder.enabled or reminder.next_reminder_date is None:
        return ReminderState.DISABLED
    if reminder.next_reminder_date <= now:
        return ReminderState.DUE
    return ReminderState.PENDING


def is_due(reminder: Reminder, *, now: datetime) -> bool:
    return reminder_state(reminder, now=now) is ReminderState.DUE


def next_occurrence(reminder_time: time | str, frequency: Frequency | str, *, now: datetime) -> datetime:
    """First moment at ``reminder_time`` that lies strictly after ``now``.

    Today's slot is used if it has not passed yet; otherwise the slot is
    advanced by one cadence unit.
    """

    candidate = datetime.combine(now.date(), parse_reminder_time(reminder_time))
    if candidate > now:
        return candidate
    return increment(frequency, candidate)


def enable_reminder(
    reminder: Reminder,
    *,
    frequency: Frequency | str,
    now: datetime,
    reminder_time: time | str | None = None,
) -> Reminder:
    """Turn a reminder on and schedule its next firing."""

    slot = parse_reminder_time(reminder_time) if reminder_time is not None else reminder.reminder_time
    updated = _replace(
        reminder,
        enabled=True,
        reminder_time=slot,
        next_reminder_date=next_occurrence(slot, frequency, now=now),
    )
    logger.info(
        "Reminder enabled",
        extra={"habit_id": reminder.habit_id, "next_reminder_date": updated.next_reminder_date},
    )
    return updated


def snooze_reminder(reminder: Optional[Reminder], minutes: int, *, now: datetime) -> Reminder:
    """Push the next firing ``minutes`` into the future."""

    current = _require_active(reminder)
    if minutes <= 0:
        raise ValidationError(f"Snooze minutes must be positive, got {minutes}")
    updated = _replace(current, next_reminder_date=now + timedelta(minutes=minutes))
    logger.info("Reminder snoozed", extra={"habit_id": current.habit_id, "minutes": minutes})
    return updated


def mark_reminder_done(reminder: Optional[Reminder], *, frequency: Frequency | str, now: datetime) -> Reminder:
    """Acknowledge a reminder; the next one is one cadence unit after ``now``."""

    current = _require_active(reminder)
    updated = _replace(current, next_reminder_date=increment(frequency, now))
    logger.info(
        "Reminder marked done",
        extra={"habit_id": current.habit_id, "next_reminder_date": updated.next_reminder_date},
    )
    return updated


def disable_reminder(reminder: Reminder) -> Reminder:
    updated = _replace(reminder, enabled=False, next_reminder_date=None)
    logger.info("Reminder disabled", extra={"habit_id": reminder.habit_id})
    return updated


def due_reminders(reminders: Iterable[Reminder], *, now: datetime) -> list[Reminder]:
    """Enabled reminders whose next firing is not in the future, oldest first."""

    due = [r for r in reminders if is_due(r, now=now)]
    return sorted(due, key=lambda r: r.next_reminder_date)


__all__ = [
    "disable_reminder",
    "due_reminders",
    "enable_reminder",
    "is_due",
    "mark_reminder_done",
    "next_occurrence",
    "parse_reminder_time",
    "reminder_state",
    "snooze_reminder",
]
