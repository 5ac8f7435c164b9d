"""Partition ranked tasks into capped display groups."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models import (
    Dashboard,
    GroupKind,
    GroupLimits,
    Task,
    TaskGroup,
    TaskStatus,
    UrgencyBucket,
)

logger = logging.getLogger(__name__)

# Open tasks are grouped by urgency; tomorrow shares the "This Week" group
_URGENCY_GROUPS = {
    UrgencyBucket.OVERDUE: GroupKind.OVERDUE,
    UrgencyBucket.TODAY: GroupKind.TODAY,
    UrgencyBucket.TOMORROW: GroupKind.THIS_WEEK,
    UrgencyBucket.THIS_WEEK: GroupKind.THIS_WEEK,
    UrgencyBucket.LATER: GroupKind.OTHER,
    UrgencyBucket.NONE: GroupKind.OTHER,
}


def group_kind(task: Task) -> GroupKind | None:
    """The display group a task belongs to; cancelled tasks have none."""
    if task.status == TaskStatus.DONE:
        return GroupKind.DONE
    if task.status == TaskStatus.CANCELLED:
        return None
    return _URGENCY_GROUPS[task.urgency]


def bucketize(tasks: Sequence[Task], limits: GroupLimits | None = None) -> list[TaskGroup]:
    """
    Split ranked tasks into groups in presentation order.

    Open tasks keep their incoming (ranked) order. Done tasks are ordered by
    completion time, most recent first. Each group is capped at its limit and
    empty groups are omitted.
    """
    limits = limits or GroupLimits()
    members: dict[GroupKind, list[Task]] = {kind: [] for kind in GroupKind}

    for task in tasks:
        kind = group_kind(task)
        if kind is not None:
            members[kind].append(task)

    # Stable sort: equal completion times keep ranked order
    members[GroupKind.DONE].sort(
        key=lambda task: task.completed_at or task.mtime, reverse=True
    )

    groups: list[TaskGroup] = []
    for kind in GroupKind:
        grouped = members[kind]
        if not grouped:
            continue
        limit = limits.for_kind(kind)
        groups.append(TaskGroup(kind=kind, tasks=grouped[:limit], total=len(grouped)))
    return groups


def summarize(tasks: Sequence[Task]) -> tuple[int, int]:
    """Count open tasks that are overdue and due today (uncapped)."""
    overdue = 0
    today = 0
    for task in tasks:
        if not task.is_open:
            continue
        if task.urgency == UrgencyBucket.OVERDUE:
            overdue += 1
        elif task.urgency == UrgencyBucket.TODAY:
            today += 1
    return overdue, today


def build_dashboard(tasks: Sequence[Task], limits: GroupLimits | None = None) -> Dashboard:
    """Bucketize tasks and attach the summary counts."""
    overdue, today = summarize(tasks)
    dashboard = Dashboard(
        groups=bucketize(tasks, limits),
        overdue_count=overdue,
        today_count=today,
        total=len(tasks),
    )
    logger.debug(
        "Dashboard: %d tasks in %d groups (%d overdue, %d today)",
        dashboard.total,
        len(dashboard.groups),
        overdue,
        today,
    )
    return dashboard
