"""Habit tracker service: the read -> compute -> write cycle.

The calculators in this package are pure. Persisting their output is not
atomic, so every mutation for a habit runs under that habit's lock; two
check-ins racing on the same habit therefore never compute from a stale read.
Different habits do not share a lock and proceed in parallel.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Iterator, Optional

from ..constants.cadence import Period
from ..domain.repositories import HabitRepository, ReminderRepository, RewardRepository
from ..errors import HabitflowError, HabitNotFoundError, ReminderNotFoundError
from ..logging_config import get_logger
from ..models.badge import BadgeUnlock
from ..models.habit import CheckIn, Habit
from ..models.reminder import Reminder
from ..models.streak import Streak
from . import reminders as reminder_rules
from .badges import evaluate_badges, unlocked_badge_ids
from .cadence import as_day, parse_frequency, parse_target_type
from .progress import ProgressData, calculate_progress, is_check_in_completed, validate_frequency_target
from .streaks import compute_streak
from .templates import habit_from_template, template_definition

logger = get_logger("services.tracker")


class HabitLockRegistry:
    """Hands out one re-entrant lock per habit id."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[int, threading.RLock] = {}

    def lock_for(self, habit_id: int) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(habit_id)
            if lock is None:
                lock = self._locks[habit_id] = threading.RLock()
            return lock

    def discard(self, habit_id: int) -> None:
        """Forget the lock for a habit that no longer exists."""
        with self._guard:
            self._locks.pop(habit_id, None)

    @contextmanager
    def hold(self, habit_id: int) -> Iterator[None]:
        with self.lock_for(habit_id):
            yield


@dataclass(slots=True)
class RefreshResult:
    """Derived state written back after a check-in mutation."""

    streak: Streak
    new_badges: list[BadgeUnlock] = field(default_factory=list)


class HabitTracker:
    """Coordinates repositories and calculators for check-ins and reminders."""

    def __init__(
        self,
        habits: HabitRepository,
        rewards: RewardRepository,
        reminders: ReminderRepository,
        *,
        locks: Optional[HabitLockRegistry] = None,
        default_snooze_minutes: int = 10,
    ):
        self.habits = habits
        self.rewards = rewards
        self.reminders = reminders
        self.locks = locks or HabitLockRegistry()
        self.default_snooze_minutes = default_snooze_minutes
        # The unlock log is shared by every habit.
        self._badge_lock = threading.Lock()

    def _require_habit(self, habit_id: int) -> Habit:
        habit = self.habits.get_by_id(habit_id)
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    # Habits
    def _validated(self, habit: Habit) -> Habit:
        try:
            habit.frequency = parse_frequency(habit.frequency).value
            habit.target_type = parse_target_type(habit.target_type).value
            validate_frequency_target(habit.frequency, habit.target_type, habit.target_value)
        except HabitflowError as exc:
            logger.warning("Rejected habit", extra={"habit_name": habit.name, "error": str(exc)})
            raise
        return habit

    def create_habit(self, habit: Habit) -> Habit:
        """Validate the cadence and target, then store a new habit."""

        created = self.habits.create(self._validated(habit))
        logger.info("Habit created", extra={"habit_id": created.id, "frequency": created.frequency})
        return created

    def create_habit_from_template(self, template_id: str, **overrides) -> Habit:
        """Store a habit built from a catalog template; unknown ids raise ``KeyError``."""

        return self.create_habit(habit_from_template(template_definition(template_id), **overrides))

    def update_habit(self, habit: Habit) -> Habit:
        with self.locks.hold(habit.id):
            self._require_habit(habit.id)
            return self.habits.update(self._validated(habit))

    def delete_habit(self, habit_id: int) -> None:
        with self.locks.hold(habit_id):
            self.habits.delete(habit_id)
            logger.info("Habit deleted", extra={"habit_id": habit_id})
        self.locks.discard(habit_id)

    # Check-ins
    def record_check_in(
        self,
        habit_id: int,
        occurred_on: date | str,
        value: float,
        *,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> RefreshResult:
        """Create or replace the check-in for a day and refresh derived state."""

        now = now or datetime.now()
        with self.locks.hold(habit_id):
            habit = self._require_habit(habit_id)
            try:
                check_in = CheckIn(
                    habit_id=habit_id,
                    occurred_on=as_day(occurred_on),
                    value=value,
                    completed=is_check_in_completed(habit, value),
                    notes=notes,
                )
            except HabitflowError as exc:
                logger.warning("Rejected check-in", extra={"habit_id": habit_id, "error": str(exc)})
                raise
            self.habits.upsert_check_in(check_in)
            logger.info(
                "Check-in recorded",
                extra={"habit_id": habit_id, "occurred_on": check_in.occurred_on, "completed": check_in.completed},
            )
            return self.refresh(habit_id, now=now)

    def delete_check_in(self, habit_id: int, occurred_on: date | str, *, now: Optional[datetime] = None) -> RefreshResult:
        now = now or datetime.now()
        with self.locks.hold(habit_id):
            self._require_habit(habit_id)
            day = as_day(occurred_on)
            self.habits.delete_check_in(habit_id, day)
            logger.info("Check-in deleted", extra={"habit_id": habit_id, "occurred_on": day})
            return self.refresh(habit_id, now=now)

    def refresh(self, habit_id: int, *, now: Optional[datetime] = None) -> RefreshResult:
        """Recompute the streak cache and award any newly earned badges."""

        now = now or datetime.now()
        with self.locks.hold(habit_id):
            self._require_habit(habit_id)
            history = self.habits.list_check_ins(habit_id)
            streak = compute_streak(history, today=now, habit_id=habit_id)
            streak.computed_at = now
            streak = self.rewards.save_streak(streak)

            with self._badge_lock:
                total = self.habits.count_completed_check_ins()
                already = unlocked_badge_ids(self.rewards.list_unlocks())
                candidates = evaluate_badges(streak, total, already, now=now, habit_id=habit_id)
                new_badges = self.rewards.append_unlocks(candidates) if candidates else []
            return RefreshResult(streak=streak, new_badges=new_badges)

    def streak(self, habit_id: int, *, now: Optional[datetime] = None) -> Streak:
        """Fresh streak from the check-in history; the cached row is not consulted."""

        now = now or datetime.now()
        self._require_habit(habit_id)
        return compute_streak(self.habits.list_check_ins(habit_id), today=now, habit_id=habit_id)

    def progress(self, habit_id: int, period: Period | str = Period.WEEK, *, now: Optional[datetime] = None) -> ProgressData:
        now = now or datetime.now()
        habit = self._require_habit(habit_id)
        return calculate_progress(habit, self.habits.list_check_ins(habit_id), period, now=now)

    # Reminders
    def enable_reminder(
        self, habit_id: int, reminder_time: time | str, *, now: Optional[datetime] = None
    ) -> Reminder:
        now = now or datetime.now()
        with self.locks.hold(habit_id):
            habit = self._require_habit(habit_id)
            current = self.reminders.get_for_habit(habit_id) or Reminder(habit_id=habit_id)
            updated = reminder_rules.enable_reminder(
                current, frequency=habit.frequency, now=now, reminder_time=reminder_time
            )
            return self.reminders.save(updated)

    def snooze_reminder(
        self, habit_id: int, minutes: Optional[int] = None, *, now: Optional[datetime] = None
    ) -> Reminder:
        now = now or datetime.now()
        minutes = self.default_snooze_minutes if minutes is None else minutes
        with self.locks.hold(habit_id):
            current = self.reminders.get_for_habit(habit_id)
            if current is None:
                raise ReminderNotFoundError(habit_id)
            return self.reminders.save(reminder_rules.snooze_reminder(current, minutes, now=now))

    def mark_reminder_done(self, habit_id: int, *, now: Optional[datetime] = None) -> Reminder:
        now = now or datetime.now()
        with self.locks.hold(habit_id):
            habit = self._require_habit(habit_id)
            current = self.reminders.get_for_habit(habit_id)
            if current is None:
                raise ReminderNotFoundError(habit_id)
            updated = reminder_rules.mark_reminder_done(current, frequency=habit.frequency, now=now)
            return self.reminders.save(updated)

    def disable_reminder(self, habit_id: int) -> Reminder:
        with self.locks.hold(habit_id):
            current = self.reminders.get_for_habit(habit_id)
            if current is None:
                raise ReminderNotFoundError(habit_id)
            return self.reminders.save(reminder_rules.disable_reminder(current))

    def due_reminders(self, *, now: Optional[datetime] = None) -> list[Reminder]:
        now = now or datetime.now()
        return reminder_rules.due_reminders(self.reminders.list_enabled(), now=now)


__all__ = ["HabitLockRegistry", "HabitTracker", "RefreshResult"]
