"""Shared enumerations and fixed catalogs."""

from .badges import BADGE_CATALOG, BadgeDefinition, BadgeKind
from .cadence import Frequency, Period, ReminderState, TargetType
from .templates import HABIT_TEMPLATES, HabitTemplate

__all__ = [
    "BADGE_CATALOG",
    "BadgeDefinition",
    "BadgeKind",
    "Frequency",
    "HABIT_TEMPLATES",
    "HabitTemplate",
    "Period",
    "ReminderState",
    "TargetType",
]
