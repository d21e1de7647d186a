"""Pytest configuration and shared fixtures for habitflow tests.

Provides an isolated SQLite database per test, repository/tracker wiring and
small factories for habits and check-ins.
"""

from __future__ import annotations

import tempfile
from datetime import date, datetime
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from habitflow.models import BadgeUnlock, CheckIn, Goal, Habit, Reminder, Streak, SubTask  # noqa: F401
from habitflow.infra.repositories import (
    SQLModelHabitRepository,
    SQLModelReminderRepository,
    SQLModelRewardRepository,
)
from habitflow.services.tracker import HabitTracker

# A fixed "today" keeps date-relative tests deterministic (a Monday).
TODAY = date(2024, 3, 18)
NOW = datetime(2024, 3, 18, 10, 0)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False}
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for a single test."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Factory matching the Callable[[], Session] repositories expect."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def habit_repo(session_factory):
    return SQLModelHabitRepository(session_factory)


@pytest.fixture
def reward_repo(session_factory):
    return SQLModelRewardRepository(session_factory)


@pytest.fixture
def reminder_repo(session_factory):
    return SQLModelReminderRepository(session_factory)


@pytest.fixture
def tracker(habit_repo, reward_repo, reminder_repo):
    return HabitTracker(habit_repo, reward_repo, reminder_repo)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory(db_session):
    """Factory for creating test habits.

    Returns:
        Callable: Function that creates and persists Habit instances
    """

    def _create_habit(
        name: str = "Test Habit",
        frequency: str = "daily",
        target_type: str = "boolean",
        target_value: int = 1,
        is_active: bool = True,
    ) -> Habit:
        habit = Habit(
            name=name,
            frequency=frequency,
            target_type=target_type,
            target_value=target_value,
            is_active=is_active,
        )
        db_session.add(habit)
        db_session.commit()
        db_session.refresh(habit)
        return habit

    return _create_habit


@pytest.fixture
def check_in_factory(db_session):
    """Factory for persisting check-ins directly, bypassing the tracker."""

    def _create_check_in(
        habit: Habit,
        occurred_on: date,
        value: float = 1,
        completed: bool | None = None,
    ) -> CheckIn:
        check_in = CheckIn(
            habit_id=habit.id,
            occurred_on=occurred_on,
            value=value,
            completed=value > 0 if completed is None else completed,
        )
        db_session.add(check_in)
        db_session.commit()
        return check_in

    return _create_check_in


def make_check_in(occurred_on, completed: bool = True, value: float = 1) -> CheckIn:
    """Build an unsaved check-in for the pure calculators."""

    return CheckIn(habit_id=1, occurred_on=occurred_on, value=value, completed=completed)
