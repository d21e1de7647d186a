"""
Pre-built habit templates.
Each template carries a complete cadence and target so a habit can be created from it as-is.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cadence import Frequency, TargetType


@dataclass(frozen=True, slots=True)
class HabitTemplate:
    """Ready-made habit configuration."""

    id: str
    name: str
    description: str
    category: str
    frequency: Frequency
    target_type: TargetType
    target_value: int


HABIT_TEMPLATES: tuple[HabitTemplate, ...] = (
    HabitTemplate(
        "template-read", "Read Daily", "Read for at least 30 minutes every day",
        "Learning", Frequency.DAILY, TargetType.MINUTES, 30,
    ),
    HabitTemplate(
        "template-exercise", "Exercise", "Exercise for at least 30 minutes",
        "Health", Frequency.DAILY, TargetType.MINUTES, 30,
    ),
    HabitTemplate(
        "template-meditate", "Meditate", "Meditate for 10 minutes daily",
        "Wellness", Frequency.DAILY, TargetType.MINUTES, 10,
    ),
    HabitTemplate(
        "template-water", "Drink Water", "Drink 8 glasses of water per day",
        "Health", Frequency.DAILY, TargetType.COUNT, 8,
    ),
    HabitTemplate(
        "template-study", "Study", "Study for 2 hours daily",
        "Learning", Frequency.DAILY, TargetType.MINUTES, 120,
    ),
    HabitTemplate(
        "template-journal", "Journal", "Write in journal daily",
        "Wellness", Frequency.DAILY, TargetType.BOOLEAN, 1,
    ),
    HabitTemplate(
        "template-walk", "Walk", "Take a 30-minute walk",
        "Health", Frequency.DAILY, TargetType.MINUTES, 30,
    ),
    HabitTemplate(
        "template-gratitude", "Gratitude Practice", "Write down 3 things you are grateful for",
        "Wellness", Frequency.DAILY, TargetType.COUNT, 3,
    ),
)
