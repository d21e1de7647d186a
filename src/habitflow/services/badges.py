"""Milestone badge evaluation."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol

from ..constants.badges import BADGE_CATALOG, BadgeDefinition, BadgeKind
from ..logging_config import get_logger
from ..models.badge import BadgeUnlock

logger = get_logger("services.badges")

_CATALOG_BY_ID = {badge.id: badge for badge in BADGE_CATALOG}


class StreakFacts(Protocol):
    current_streak: int
    longest_streak: int


def badge_definition(badge_id: str) -> BadgeDefinition:
    """Look up a catalog entry; unknown ids raise ``KeyError``."""

    return _CATALOG_BY_ID[badge_id]


def unlocked_badge_ids(unlocks: Iterable[BadgeUnlock]) -> set[str]:
    return {unlock.badge_id for unlock in unlocks}


def _qualifies(badge: BadgeDefinition, streak: StreakFacts, total_check_ins: int) -> bool:
    if badge.kind is BadgeKind.STREAK:
        return streak.current_streak >= badge.threshold or streak.longest_streak >= badge.threshold
    return total_check_ins >= badge.threshold


def evaluate_badges(
    streak: StreakFacts,
    total_check_ins: int,
    already_unlocked: Iterable[str],
    *,
    now: datetime,
    habit_id: Optional[int] = None,
) -> list[BadgeUnlock]:
    """Return unlock records for badges newly earned by the given facts.

    Badges listed in ``already_unlocked`` are skipped entirely, so feeding the
    result back in makes a repeated call return an empty list.
    """

    skip = set(already_unlocked)
    newly_unlocked = []
    for badge in BADGE_CATALOG:
        if badge.id in skip:
            continue
        if _qualifies(badge, streak, total_check_ins):
            newly_unlocked.append(BadgeUnlock(badge_id=badge.id, unlocked_at=now, habit_id=habit_id))

    if newly_unlocked:
        logger.info(
            "Badges unlocked",
            extra={"badges": [u.badge_id for u in newly_unlocked], "habit_id": habit_id},
        )
    return newly_unlocked


__all__ = ["badge_definition", "evaluate_badges", "unlocked_badge_ids"]
