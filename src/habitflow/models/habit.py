"""Habit and check-in data structures."""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


class Habit(SQLModel, table=True):
    """A recurring habit with its cadence and per-occurrence target."""

    __tablename__: ClassVar[str] = "habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=80, index=True)
    description: str = Field(default="", max_length=255)
    category: Optional[str] = Field(default=None, max_length=64)
    frequency: str = Field(default="daily", max_length=16)
    target_type: str = Field(default="boolean", max_length=16)
    target_value: int = Field(default=1, nullable=False)
    is_active: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=datetime.now, nullable=False)

    check_ins: list["CheckIn"] = Relationship(
        back_populates="habit",
        sa_relationship=relationship(
            "CheckIn", back_populates="habit", cascade="all, delete-orphan"
        ),
    )


class CheckIn(SQLModel, table=True):
    """One dated record asserting whether a habit was performed that day.

    ``(habit_id, occurred_on)`` is the primary key, so a habit has at most one
    check-in per calendar day. ``completed`` is decided when the row is written
    and trusted by every calculation downstream.
    """

    __tablename__: ClassVar[str] = "check_in"

    habit_id: int = Field(foreign_key="habit.id", primary_key=True)
    occurred_on: date = Field(primary_key=True, index=True)
    value: float = Field(default=1.0, nullable=False)
    completed: bool = Field(default=False, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=500)

    habit: "Habit" = Relationship(
        back_populates="check_ins",
        sa_relationship=relationship("Habit", back_populates="check_ins"),
    )
