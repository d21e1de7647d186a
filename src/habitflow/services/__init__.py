"""Service module exports."""

from . import badges, cadence, goals, progress, reminders, streaks, templates, tracker

__all__ = [
    "badges",
    "cadence",
    "goals",
    "progress",
    "reminders",
    "streaks",
    "templates",
    "tracker",
]
