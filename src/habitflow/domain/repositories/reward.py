"""Streak cache and badge unlock log protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.badge import BadgeUnlock
from ...models.streak import Streak


class RewardRepository(Protocol):
    """Persists derived streaks and the append-only badge unlock log."""

    def get_streak(self, habit_id: int) -> Optional[Streak]:
        ...

    def save_streak(self, streak: Streak) -> Streak:
        """Replace the cached streak for ``streak.habit_id``."""
        ...

    def list_unlocks(self) -> list[BadgeUnlock]:
        """Every badge unlocked so far, oldest first."""
        ...

    def append_unlocks(self, unlocks: list[BadgeUnlock]) -> list[BadgeUnlock]:
        """Record new unlocks; ids already in the log are ignored."""
        ...
