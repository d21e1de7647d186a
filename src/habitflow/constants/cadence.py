"""
Cadence, target and period enumerations.
Values are the strings stored in the database and accepted from callers.
"""

from __future__ import annotations

from enum import Enum


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class TargetType(str, Enum):
    BOOLEAN = "boolean"
    TIMES = "times"
    MINUTES = "minutes"
    PAGES = "pages"
    COUNT = "count"


class Period(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ReminderState(str, Enum):
    DISABLED = "disabled"
    PENDING = "pending"
    DUE = "due"


# Allowed target_value range per frequency for non-boolean targets.
TARGET_LIMITS: dict[Frequency, tuple[int, int]] = {
    Frequency.DAILY: (1, 100),
    Frequency.WEEKLY: (1, 50),
    Frequency.MONTHLY: (1, 100),
    Frequency.QUARTERLY: (1, 200),
    Frequency.YEARLY: (1, 1000),
}

MAX_TARGET_MINUTES = 1440
