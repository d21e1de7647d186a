"""Goals broken into checklist sub-tasks."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


class Goal(SQLModel, table=True):
    """A longer-term objective, optionally tied to a habit."""

    __tablename__: ClassVar[str] = "goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=120)
    description: str = Field(default="", max_length=255)
    habit_id: Optional[int] = Field(default=None, foreign_key="habit.id")
    target_date: Optional[date] = Field(default=None)

    sub_tasks: list["SubTask"] = Relationship(
        back_populates="goal",
        sa_relationship=relationship(
            "SubTask", back_populates="goal", cascade="all, delete-orphan"
        ),
    )


class SubTask(SQLModel, table=True):
    __tablename__: ClassVar[str] = "sub_task"

    id: Optional[int] = Field(default=None, primary_key=True)
    goal_id: int = Field(foreign_key="goal.id", index=True)
    title: str = Field(nullable=False, max_length=120)
    completed: bool = Field(default=False, nullable=False)

    goal: "Goal" = Relationship(
        back_populates="sub_tasks",
        sa_relationship=relationship("Goal", back_populates="sub_tasks"),
    )
