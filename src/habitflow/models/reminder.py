"""Per-habit reminder schedule."""

from __future__ import annotations

from datetime import datetime, time
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Reminder(SQLModel, table=True):
    """Reminder settings and the next moment it should fire."""

    __tablename__: ClassVar[str] = "reminder"

    id: Optional[int] = Field(default=None, primary_key=True)
    habit_id: int = Field(foreign_key="habit.id", unique=True, index=True)
    enabled: bool = Field(default=False, nullable=False)
    reminder_time: time = Field(default=time(9, 0), nullable=False)
    next_reminder_date: Optional[datetime] = Field(default=None, index=True)
