"""
Fixed milestone badge catalog.
The threshold is encoded in the id (``streak-30`` unlocks at a 30 day streak).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BadgeKind(str, Enum):
    STREAK = "streak"
    CHECKIN = "checkin"


@dataclass(frozen=True, slots=True)
class BadgeDefinition:
    """Catalog entry describing one unlockable milestone."""

    id: str
    name: str
    description: str
    icon: str

    @property
    def kind(self) -> BadgeKind:
        return BadgeKind(self.id.split("-", 1)[0])

    @property
    def threshold(self) -> int:
        return int(self.id.split("-", 1)[1])


BADGE_CATALOG: tuple[BadgeDefinition, ...] = (
    BadgeDefinition("streak-7", "Week Warrior", "Maintain a 7-day streak", "🔥"),
    BadgeDefinition("streak-30", "Month Master", "Maintain a 30-day streak", "⭐"),
    BadgeDefinition("streak-100", "Century Club", "Maintain a 100-day streak", "💯"),
    BadgeDefinition("checkin-10", "Getting Started", "Complete 10 check-ins", "🌱"),
    BadgeDefinition("checkin-50", "Consistent", "Complete 50 check-ins", "📈"),
    BadgeDefinition("checkin-100", "Dedicated", "Complete 100 check-ins", "🏆"),
)
