"""SQLModel implementation of the reminder repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.reminder import Reminder


class SQLModelReminderRepository:
    """SQLModel-based reminder repository."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_for_habit(self, habit_id: int) -> Optional[Reminder]:
        with self.session_factory() as session:
            obj = session.exec(select(Reminder).where(Reminder.habit_id == habit_id)).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_enabled(self) -> list[Reminder]:
        with self.session_factory() as session:
            statement = (
                select(Reminder)
                .where(Reminder.enabled == True)  # noqa: E712
                .order_by(Reminder.next_reminder_date)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def save(self, reminder: Reminder) -> Reminder:
        """Insert or update the reminder (keyed by id when set)."""
        with self.session_factory() as session:
            merged = session.merge(reminder)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def delete_for_habit(self, habit_id: int) -> None:
        with self.session_factory() as session:
            obj = session.exec(select(Reminder).where(Reminder.habit_id == habit_id)).first()
            if obj:
                session.delete(obj)
                session.commit()
