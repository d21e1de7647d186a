"""Repository protocol definitions for domain layer."""

from .habit import HabitRepository
from .reminder import ReminderRepository
from .reward import RewardRepository

__all__ = [
    "HabitRepository",
    "ReminderRepository",
    "RewardRepository",
]
