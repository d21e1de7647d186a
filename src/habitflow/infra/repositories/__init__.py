"""Concrete repository implementations using SQLModel."""

from .habit import SQLModelHabitRepository
from .reminder import SQLModelReminderRepository
from .reward import SQLModelRewardRepository

__all__ = [
    "SQLModelHabitRepository",
    "SQLModelReminderRepository",
    "SQLModelRewardRepository",
]
