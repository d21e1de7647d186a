"""Tests for the SQLModel repository implementations."""

from __future__ import annotations

from datetime import date, datetime, time

from habitflow.models import BadgeUnlock, CheckIn, Habit, Reminder, Streak
from tests.conftest import NOW, TODAY


class TestHabitRepository:
    def test_create_and_get(self, habit_repo):
        created = habit_repo.create(Habit(name="Stretch", frequency="weekly", target_type="minutes", target_value=20))
        fetched = habit_repo.get_by_id(created.id)
        assert fetched.name == "Stretch"
        assert fetched.frequency == "weekly"
        assert fetched.target_value == 20

    def test_list_all_skips_inactive(self, habit_repo, habit_factory):
        habit_factory(name="B")
        habit_factory(name="A")
        habit_factory(name="Paused", is_active=False)
        assert [h.name for h in habit_repo.list_all()] == ["A", "B"]
        assert len(habit_repo.list_all(include_inactive=True)) == 3

    def test_update(self, habit_repo, habit_factory):
        habit = habit_factory(name="Old")
        habit.name = "New"
        habit_repo.update(habit)
        assert habit_repo.get_by_id(habit.id).name == "New"

    def test_delete_removes_dependents(self, habit_repo, reward_repo, reminder_repo, habit_factory, check_in_factory):
        habit = habit_factory()
        check_in_factory(habit, TODAY)
        reward_repo.save_streak(Streak(habit_id=habit.id, current_streak=1, longest_streak=1))
        reminder_repo.save(Reminder(habit_id=habit.id, enabled=True, next_reminder_date=NOW))

        habit_repo.delete(habit.id)

        assert habit_repo.get_by_id(habit.id) is None
        assert habit_repo.list_check_ins(habit.id) == []
        assert reward_repo.get_streak(habit.id) is None
        assert reminder_repo.get_for_habit(habit.id) is None

    def test_upsert_keeps_one_row_per_day(self, habit_repo, habit_factory):
        habit = habit_factory()
        habit_repo.upsert_check_in(CheckIn(habit_id=habit.id, occurred_on=TODAY, value=1, completed=True))
        habit_repo.upsert_check_in(CheckIn(habit_id=habit.id, occurred_on=TODAY, value=0, completed=False))

        rows = habit_repo.list_check_ins(habit.id)
        assert len(rows) == 1
        assert rows[0].completed is False

    def test_check_ins_ordered_oldest_first(self, habit_repo, habit_factory, check_in_factory):
        habit = habit_factory()
        for day in (date(2024, 1, 5), date(2024, 1, 1), date(2024, 1, 3)):
            check_in_factory(habit, day)
        assert [c.occurred_on for c in habit_repo.list_check_ins(habit.id)] == [
            date(2024, 1, 1),
            date(2024, 1, 3),
            date(2024, 1, 5),
        ]

    def test_count_completed_across_habits(self, habit_repo, habit_factory, check_in_factory):
        first, second = habit_factory(name="A"), habit_factory(name="B")
        check_in_factory(first, TODAY)
        check_in_factory(second, TODAY)
        check_in_factory(second, date(2024, 1, 1), value=0)
        assert habit_repo.count_completed_check_ins() == 2

    def test_delete_missing_check_in_is_noop(self, habit_repo, habit_factory):
        habit = habit_factory()
        habit_repo.delete_check_in(habit.id, TODAY)
        assert habit_repo.get_check_in(habit.id, TODAY) is None


class TestRewardRepository:
    def test_save_streak_replaces(self, reward_repo, habit_factory):
        habit = habit_factory()
        reward_repo.save_streak(Streak(habit_id=habit.id, current_streak=1, longest_streak=4))
        reward_repo.save_streak(Streak(habit_id=habit.id, current_streak=2, longest_streak=4, last_check_in_date=TODAY))

        cached = reward_repo.get_streak(habit.id)
        assert (cached.current_streak, cached.longest_streak, cached.last_check_in_date) == (2, 4, TODAY)

    def test_unlock_log_is_append_only(self, reward_repo):
        first_time = datetime(2024, 1, 1, 8, 0)
        reward_repo.append_unlocks([BadgeUnlock(badge_id="streak-7", unlocked_at=first_time)])
        added = reward_repo.append_unlocks(
            [
                BadgeUnlock(badge_id="streak-7", unlocked_at=NOW),
                BadgeUnlock(badge_id="checkin-10", unlocked_at=NOW),
            ]
        )

        assert [u.badge_id for u in added] == ["checkin-10"]
        log = reward_repo.list_unlocks()
        assert [(u.badge_id, u.unlocked_at) for u in log] == [("streak-7", first_time), ("checkin-10", NOW)]


class TestReminderRepository:
    def test_save_and_list_enabled(self, reminder_repo, habit_factory):
        on, off = habit_factory(name="On"), habit_factory(name="Off")
        reminder_repo.save(Reminder(habit_id=on.id, enabled=True, reminder_time=time(7, 30), next_reminder_date=NOW))
        reminder_repo.save(Reminder(habit_id=off.id, enabled=False))

        enabled = reminder_repo.list_enabled()
        assert [r.habit_id for r in enabled] == [on.id]
        assert enabled[0].reminder_time == time(7, 30)

    def test_delete_for_habit(self, reminder_repo, habit_factory):
        habit = habit_factory()
        reminder_repo.save(Reminder(habit_id=habit.id))
        reminder_repo.delete_for_habit(habit.id)
        assert reminder_repo.get_for_habit(habit.id) is None
