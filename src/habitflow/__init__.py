"""habitflow: habit streaks, progress, badges and reminders."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .errors import ConfigError, HabitflowError, ParseError, ValidationError
from .infra.database import bootstrap_database
from .infra.repositories import (
    SQLModelHabitRepository,
    SQLModelReminderRepository,
    SQLModelRewardRepository,
)
from .services.tracker import HabitTracker


def create_tracker(config: BaseConfig | None = None) -> HabitTracker:
    """Wire a ``HabitTracker`` to a SQLModel database built from ``config``."""

    cfg = config or BaseConfig()
    _, session_factory = bootstrap_database(cfg)
    return HabitTracker(
        SQLModelHabitRepository(session_factory),
        SQLModelRewardRepository(session_factory),
        SQLModelReminderRepository(session_factory),
        default_snooze_minutes=cfg.DEFAULT_SNOOZE_MINUTES,
    )


__all__ = [
    "BaseConfig",
    "ConfigError",
    "DevConfig",
    "HabitTracker",
    "HabitflowError",
    "ParseError",
    "ValidationError",
    "bootstrap_database",
    "create_tracker",
]
