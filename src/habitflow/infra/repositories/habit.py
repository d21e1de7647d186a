"""SQLModel implementation of the habit repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.habit import CheckIn, Habit
from ...models.reminder import Reminder
from ...models.streak import Streak


class SQLModelHabitRepository:
    """SQLModel-based habit repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        with self.session_factory() as session:
            obj = session.get(Habit, habit_id)
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, include_inactive: bool = False) -> list[Habit]:
        """List all habits, optionally including inactive ones."""
        with self.session_factory() as session:
            statement = select(Habit).order_by(Habit.name)  # type: ignore
            if not include_inactive:
                statement = statement.where(Habit.is_active == True)  # noqa: E712

            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, habit: Habit) -> Habit:
        """Create a new habit."""
        with self.session_factory() as session:
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def update(self, habit: Habit) -> Habit:
        """Update an existing habit."""
        with self.session_factory() as session:
            merged = session.merge(habit)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def delete(self, habit_id: int) -> None:
        """Delete a habit with its check-ins, cached streak and reminder."""
        with self.session_factory() as session:
            habit = session.get(Habit, habit_id)
            if habit is None:
                return
            for model in (Streak, Reminder):
                for row in session.exec(select(model).where(model.habit_id == habit_id)).all():
                    session.delete(row)
            session.delete(habit)
            session.commit()

    # Check-in operations
    def get_check_in(self, habit_id: int, occurred_on: date) -> Optional[CheckIn]:
        """Get the check-in for one habit on one day."""
        with self.session_factory() as session:
            obj = session.get(CheckIn, (habit_id, occurred_on))
            if obj:
                session.expunge(obj)
            return obj

    def list_check_ins(self, habit_id: int) -> list[CheckIn]:
        """Full check-in history for a habit, oldest first."""
        with self.session_factory() as session:
            statement = (
                select(CheckIn)
                .where(CheckIn.habit_id == habit_id)
                .order_by(CheckIn.occurred_on)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def upsert_check_in(self, check_in: CheckIn) -> CheckIn:
        """Insert or update the check-in for its (habit, day)."""
        with self.session_factory() as session:
            existing = session.get(CheckIn, (check_in.habit_id, check_in.occurred_on))
            if existing:
                existing.value = check_in.value
                existing.completed = check_in.completed
                existing.notes = check_in.notes
                target = existing
            else:
                target = check_in
            session.add(target)
            session.commit()
            session.refresh(target)
            session.expunge(target)
            return target

    def delete_check_in(self, habit_id: int, occurred_on: date) -> None:
        """Delete a check-in if present."""
        with self.session_factory() as session:
            entry = session.get(CheckIn, (habit_id, occurred_on))
            if entry:
                session.delete(entry)
                session.commit()

    def count_completed_check_ins(self) -> int:
        """Completed check-ins across every habit."""
        with self.session_factory() as session:
            statement = select(func.count()).select_from(CheckIn).where(CheckIn.completed == True)  # noqa: E712
            return int(session.exec(statement).one())
