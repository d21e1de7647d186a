"""Tests for milestone badge evaluation."""

from __future__ import annotations

from datetime import datetime

import pytest

from habitflow.constants.badges import BADGE_CATALOG, BadgeKind
from habitflow.models import BadgeUnlock, Streak
from habitflow.services.badges import badge_definition, evaluate_badges, unlocked_badge_ids
from tests.conftest import NOW


def streak(current=0, longest=0):
    return Streak(habit_id=1, current_streak=current, longest_streak=longest)


def ids(unlocks):
    return [u.badge_id for u in unlocks]


class TestEvaluateBadges:
    def test_nothing_earned(self):
        assert evaluate_badges(streak(), 0, set(), now=NOW) == []

    def test_streak_badge_from_current(self):
        assert ids(evaluate_badges(streak(7, 7), 0, set(), now=NOW)) == ["streak-7"]

    def test_streak_badge_from_longest(self):
        assert ids(evaluate_badges(streak(0, 31), 0, set(), now=NOW)) == ["streak-7", "streak-30"]

    def test_check_in_badges(self):
        assert ids(evaluate_badges(streak(), 50, set(), now=NOW)) == ["checkin-10", "checkin-50"]

    def test_everything_at_once(self):
        result = evaluate_badges(streak(100, 100), 100, set(), now=NOW, habit_id=4)
        assert ids(result) == [badge.id for badge in BADGE_CATALOG]
        assert all(u.unlocked_at == NOW for u in result)
        assert all(u.habit_id == 4 for u in result)

    def test_second_call_with_first_result_is_empty(self):
        first = evaluate_badges(streak(8, 8), 12, set(), now=NOW)
        second = evaluate_badges(streak(8, 8), 12, unlocked_badge_ids(first), now=NOW)
        assert ids(first) == ["streak-7", "checkin-10"]
        assert second == []

    def test_unlocked_badges_never_returned_again(self):
        result = evaluate_badges(streak(200, 200), 500, {"streak-7", "checkin-100"}, now=NOW)
        assert "streak-7" not in ids(result)
        assert "checkin-100" not in ids(result)

    def test_checkin_10_unlocks_exactly_once(self):
        unlocked: set[str] = set()
        hits = []
        for total in range(1, 16):
            new = evaluate_badges(streak(), total, unlocked, now=datetime(2024, 3, total))
            if "checkin-10" in ids(new):
                hits.append(total)
            unlocked |= unlocked_badge_ids(new)
        assert hits == [10]

    def test_lower_facts_do_not_revoke(self):
        unlocked = unlocked_badge_ids(evaluate_badges(streak(30, 30), 0, set(), now=NOW))
        assert evaluate_badges(streak(0, 0), 0, unlocked, now=NOW) == []
        assert unlocked == {"streak-7", "streak-30"}


class TestCatalog:
    def test_threshold_and_kind_from_id(self):
        badge = badge_definition("streak-30")
        assert badge.kind is BadgeKind.STREAK
        assert badge.threshold == 30
        assert badge.name == "Month Master"

    def test_unknown_badge(self):
        with pytest.raises(KeyError):
            badge_definition("streak-365")

    def test_unlock_exposes_definition(self):
        unlock = BadgeUnlock(badge_id="checkin-50", unlocked_at=NOW)
        assert unlock.definition.name == "Consistent"
