"""Append-only badge unlock log."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from ..constants.badges import BadgeDefinition


class BadgeUnlock(SQLModel, table=True):
    """A badge the user has earned. Rows are inserted once and never updated."""

    __tablename__: ClassVar[str] = "badge_unlock"

    badge_id: str = Field(primary_key=True, max_length=32)
    unlocked_at: datetime = Field(nullable=False)
    # Habit whose check-in triggered the unlock; informational only.
    habit_id: Optional[int] = Field(default=None, index=True)

    @property
    def definition(self) -> BadgeDefinition:
        from ..services.badges import badge_definition

        return badge_definition(self.badge_id)
