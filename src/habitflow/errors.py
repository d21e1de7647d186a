"""Error types raised by the habit engine.

Everything derives from ``ValueError`` so callers that already guard input
handling with ``except ValueError`` keep working.
"""

from __future__ import annotations


class HabitflowError(ValueError):
    """Base class for all engine errors."""


class ConfigError(HabitflowError):
    """An unrecognized frequency, target type, period or setting value."""


class ParseError(HabitflowError):
    """A date, timestamp or time-of-day string could not be parsed."""


class ValidationError(HabitflowError):
    """A value is well-formed but outside the range the engine accepts."""


class HabitNotFoundError(HabitflowError, LookupError):
    """The referenced habit does not exist in the store."""

    def __init__(self, habit_id: int):
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id


class ReminderNotFoundError(HabitflowError, LookupError):
    """A reminder transition was requested for a habit without a reminder."""

    def __init__(self, habit_id: int | None = None):
        message = "Reminder not found" if habit_id is None else f"No reminder for habit {habit_id}"
        super().__init__(message)
        self.habit_id = habit_id


__all__ = [
    "ConfigError",
    "HabitNotFoundError",
    "HabitflowError",
    "ParseError",
    "ReminderNotFoundError",
    "ValidationError",
]
