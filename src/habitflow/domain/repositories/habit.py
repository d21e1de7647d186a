"""Habit repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.habit import CheckIn, Habit


class HabitRepository(Protocol):
    """Repository for habits and their check-ins."""

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def list_all(self, include_inactive: bool = False) -> list[Habit]:
        """List all habits, optionally including inactive ones."""
        ...

    def create(self, habit: Habit) -> Habit:
        """Create a new habit."""
        ...

    def update(self, habit: Habit) -> Habit:
        """Update an existing habit."""
        ...

    def delete(self, habit_id: int) -> None:
        """Delete a habit and its check-ins."""
        ...

    # Check-in operations
    def get_check_in(self, habit_id: int, occurred_on: date) -> Optional[CheckIn]:
        """Get the check-in for one habit on one day."""
        ...

    def list_check_ins(self, habit_id: int) -> list[CheckIn]:
        """Full check-in history for a habit, oldest first."""
        ...

    def upsert_check_in(self, check_in: CheckIn) -> CheckIn:
        """Insert or replace the check-in for its (habit, day)."""
        ...

    def delete_check_in(self, habit_id: int, occurred_on: date) -> None:
        """Delete a check-in if present."""
        ...

    def count_completed_check_ins(self) -> int:
        """Completed check-ins across every habit."""
        ...
