"""Enums for task status and urgency."""

from enum import Enum


class TaskStatus(str, Enum):
    """Checkbox status of a task line."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    CANCELLED = "cancelled"
    DONE = "done"

    @property
    def is_open(self) -> bool:
        """True for statuses that still need work."""
        return self in (TaskStatus.TODO, TaskStatus.IN_PROGRESS)


class UrgencyBucket(str, Enum):
    """Due-date classification relative to the scan time."""

    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "this_week"
    LATER = "later"
    NONE = "none"

    @property
    def rank(self) -> int:
        """Dominant scoring tier (higher = more urgent)."""
        return _URGENCY_RANKS[self]


_URGENCY_RANKS = {
    UrgencyBucket.OVERDUE: 5,
    UrgencyBucket.TODAY: 4,
    UrgencyBucket.TOMORROW: 3,
    UrgencyBucket.THIS_WEEK: 3,
    UrgencyBucket.LATER: 2,
    UrgencyBucket.NONE: 1,
}


class GroupKind(str, Enum):
    """Display groups, in presentation order."""

    OVERDUE = "overdue"
    TODAY = "today"
    THIS_WEEK = "this_week"
    OTHER = "other"
    DONE = "done"

    @property
    def label(self) -> str:
        """Human readable group title."""
        return _GROUP_TITLES[self]


_GROUP_TITLES = {
    GroupKind.OVERDUE: "Overdue",
    GroupKind.TODAY: "Today",
    GroupKind.THIS_WEEK: "This Week",
    GroupKind.OTHER: "Other Tasks",
    GroupKind.DONE: "Done",
}
