"""Reminder repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.reminder import Reminder


class ReminderRepository(Protocol):
    """Repository for per-habit reminders."""

    def get_for_habit(self, habit_id: int) -> Optional[Reminder]:
        ...

    def list_enabled(self) -> list[Reminder]:
        ...

    def save(self, reminder: Reminder) -> Reminder:
        """Insert or update the reminder."""
        ...

    def delete_for_habit(self, habit_id: int) -> None:
        ...
