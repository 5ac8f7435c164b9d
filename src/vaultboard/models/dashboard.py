"""Grouped task views handed to presentation."""

from pydantic import BaseModel, Field

from .enums import GroupKind
from .task import Task


class TaskGroup(BaseModel):
    """A capped display group of tasks."""

    kind: GroupKind
    tasks: list[Task] = Field(default_factory=list)  # at most the group limit
    total: int = 0  # tasks in the group before capping

    @property
    def title(self) -> str:
        """Group title for display."""
        return self.kind.label

    @property
    def overflow(self) -> int:
        """Number of tasks left out by the cap."""
        return max(0, self.total - len(self.tasks))


class Dashboard(BaseModel):
    """Bucketized tasks plus the status summary counts."""

    groups: list[TaskGroup] = Field(default_factory=list)
    overdue_count: int = 0
    today_count: int = 0
    total: int = 0

    @property
    def urgent_count(self) -> int:
        """Tasks that can't wait: overdue plus due today."""
        return self.overdue_count + self.today_count

    def get_group(self, kind: GroupKind) -> TaskGroup | None:
        """Get a group by kind, or None if it was omitted."""
        for group in self.groups:
            if group.kind == kind:
                return group
        return None
