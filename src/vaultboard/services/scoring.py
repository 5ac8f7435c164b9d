"""Composite ranking of tasks.

The score is a sum of tiers. Each tier's full range is smaller than a single
step of the tier above it, so a lower tier can only break ties:

    urgency rank     x 100_000   (ranks 1..5)
    priority level   x   1_000   (levels 1..5, span 4_000)
    due + recency    0 .. 300
    line tie-break   0 .. 0.5
"""

from collections.abc import Iterable
from datetime import datetime

from ..models import Task
from ..utils import days_between

URGENCY_WEIGHT = 100_000
PRIORITY_WEIGHT = 1_000
PROXIMITY_RANGE = 100  # days of due-date lookahead / overdue bonus cap
RECENCY_RANGE = 100
DEFAULT_RECENCY_WINDOW_DAYS = 7.0


def due_proximity_score(task: Task, now: datetime) -> float:
    """0..200: closer due dates score higher, overdue gets a capped bonus."""
    if task.due_date is None:
        return 0.0
    days_until_due = days_between(now, task.due_date)
    if days_until_due < 0:
        return PROXIMITY_RANGE + min(-days_until_due, PROXIMITY_RANGE)
    return max(0.0, PROXIMITY_RANGE - days_until_due)


def recency_score(
    task: Task, now: datetime, window_days: float = DEFAULT_RECENCY_WINDOW_DAYS
) -> float:
    """0..100: files touched within the window score higher."""
    days_since_modified = max(0.0, days_between(task.mtime, now))
    remaining = max(0.0, window_days - days_since_modified)
    return RECENCY_RANGE * remaining / window_days


def line_score(task: Task) -> float:
    """Earlier lines score marginally higher."""
    return 1.0 / (task.line + 1)


def score(
    task: Task, now: datetime, window_days: float = DEFAULT_RECENCY_WINDOW_DAYS
) -> float:
    """Rank a task; higher scores are shown first."""
    return (
        task.urgency.rank * URGENCY_WEIGHT
        + (6 - task.priority) * PRIORITY_WEIGHT
        + due_proximity_score(task, now)
        + recency_score(task, now, window_days)
        + line_score(task)
    )


def sort_tasks(
    tasks: Iterable[Task],
    now: datetime,
    window_days: float = DEFAULT_RECENCY_WINDOW_DAYS,
) -> list[Task]:
    """Order tasks by descending score; equal scores keep their input order."""
    return sorted(tasks, key=lambda task: score(task, now, window_days), reverse=True)
