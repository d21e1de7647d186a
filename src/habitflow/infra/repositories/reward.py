"""SQLModel implementation of the streak cache and badge unlock log."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.badge import BadgeUnlock
from ...models.streak import Streak


class SQLModelRewardRepository:
    """SQLModel-based streak/badge repository."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_streak(self, habit_id: int) -> Optional[Streak]:
        with self.session_factory() as session:
            obj = session.get(Streak, habit_id)
            if obj:
                session.expunge(obj)
            return obj

    def save_streak(self, streak: Streak) -> Streak:
        """Replace the cached streak for ``streak.habit_id``."""
        with self.session_factory() as session:
            merged = session.merge(streak)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def list_unlocks(self) -> list[BadgeUnlock]:
        with self.session_factory() as session:
            statement = select(BadgeUnlock).order_by(BadgeUnlock.unlocked_at)  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def append_unlocks(self, unlocks: list[BadgeUnlock]) -> list[BadgeUnlock]:
        """Insert unlocks whose badge id is not logged yet; existing rows are never touched."""
        with self.session_factory() as session:
            known = set(session.exec(select(BadgeUnlock.badge_id)).all())
            added = [unlock for unlock in unlocks if unlock.badge_id not in known]
            for unlock in added:
                session.add(unlock)
            session.commit()
            for unlock in added:
                session.refresh(unlock)
                session.expunge(unlock)
            return added
