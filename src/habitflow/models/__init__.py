"""SQLModel table exports."""

from .badge import BadgeUnlock
from .goal import Goal, SubTask
from .habit import CheckIn, Habit
from .reminder import Reminder
from .streak import Streak

__all__ = [
    "BadgeUnlock",
    "CheckIn",
    "Goal",
    "Habit",
    "Reminder",
    "Streak",
    "SubTask",
]
