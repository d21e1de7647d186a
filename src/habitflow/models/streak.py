"""Cached streak facts per habit."""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Streak(SQLModel, table=True):
    """Latest computed streak for a habit.

    This row is a cache: it is rebuilt from the habit's check-ins after every
    check-in mutation and never patched in place.
    """

    __tablename__: ClassVar[str] = "streak"

    habit_id: int = Field(foreign_key="habit.id", primary_key=True)
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    last_check_in_date: Optional[date] = Field(default=None)
    computed_at: Optional[datetime] = Field(default=None)
