"""Goal checklist progress."""

from __future__ import annotations

from typing import Iterable

from ..models.goal import SubTask
from .progress import percentage


def completed_subtask_count(sub_tasks: Iterable[SubTask]) -> int:
    return sum(1 for task in sub_tasks if task.completed)


def subtask_count(sub_tasks: Iterable[SubTask]) -> int:
    return sum(1 for _ in sub_tasks)


def goal_progress(sub_tasks: Iterable[SubTask]) -> int:
    """Percentage of a goal's sub-tasks that are done; 0 for an empty checklist."""

    tasks = list(sub_tasks)
    return percentage(completed_subtask_count(tasks), len(tasks))


__all__ = ["completed_subtask_count", "goal_progress", "subtask_count"]
