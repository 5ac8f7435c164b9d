"""Service for editing task lines in place."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta

from ..markup import (
    CANCELLED_NOTATIONS,
    CANCELLED_STAMP_RE,
    CHECKBOX_RE,
    DONE_NOTATIONS,
    DONE_STAMP_RE,
    DUE_NOTATIONS,
    SNOOZE_NOTATIONS,
    STATUS_TOKENS,
    DateNotation,
)
from ..models import Task, TaskStatus
from ..repositories import NoteRepository
from ..utils import skip_weekend

logger = logging.getLogger(__name__)

# Status -> (notations that count as a stamp, emoji stamp pattern); the first
# notation is the one appended when a task is closed
_CLOSING_STAMPS = {
    TaskStatus.DONE: (DONE_NOTATIONS, DONE_STAMP_RE),
    TaskStatus.CANCELLED: (CANCELLED_NOTATIONS, CANCELLED_STAMP_RE),
}


class StaleTaskError(Exception):
    """The task's line no longer holds the text seen at scan time."""


def _replace_or_append(line: str, notations: tuple[DateNotation, ...], day: date) -> str:
    """Rewrite the first notation present, keeping its style, or append the default one."""
    for notation in notations:
        replaced = notation.replace(line, day)
        if replaced is not None:
            return replaced
    return f"{line.rstrip()} {notations[0].render(day)}"


@dataclass(frozen=True)
class SetStatus:
    """Swap the checkbox token and maintain completion stamps."""

    status: TaskStatus
    today: date

    def apply(self, line: str) -> str:
        match = CHECKBOX_RE.match(line)
        if match is None:
            return line

        start = match.end("lead")
        updated = f"{line[:start]}{STATUS_TOKENS[self.status]}{line[match.end():]}"

        for status, (notations, stamp_re) in _CLOSING_STAMPS.items():
            if status == self.status:
                if not any(notation.pattern.search(updated) for notation in notations):
                    updated = f"{updated.rstrip()} {notations[0].render(self.today)}"
            else:
                updated = stamp_re.sub("", updated)
        return updated


@dataclass(frozen=True)
class SetDueDate:
    """Set the due date, preserving whichever notation the line already uses."""

    due: date

    def apply(self, line: str) -> str:
        return _replace_or_append(line, DUE_NOTATIONS, self.due)


@dataclass(frozen=True)
class SetSnoozeDate:
    """Set the snooze date using the snooze notation."""

    until: date

    @classmethod
    def after(cls, days: int, today: date) -> SetSnoozeDate:
        """Snooze for a number of days, landing on a weekday."""
        return cls(skip_weekend(today + timedelta(days=days)))

    def apply(self, line: str) -> str:
        return _replace_or_append(line, SNOOZE_NOTATIONS, self.until)


TaskTransform = SetStatus | SetDueDate | SetSnoozeDate


class MutationService:
    """Apply named transforms to the source line of a task."""

    def __init__(
        self,
        repository: NoteRepository,
        today: Callable[[], date] | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            repository: Note file access
            today: Clock for completion stamps and relative dates
            on_change: Called after every successful mutation so the host can
                schedule a rescan
        """
        self.repository = repository
        self._today = today or date.today
        self.on_change = on_change

    def today(self) -> date:
        """Current local date according to the service clock."""
        return self._today()

    def apply(self, task: Task, transform: TaskTransform) -> bool:
        """Apply a transform to the task's line. Returns True on success."""

        def guarded(line: str) -> str:
            # Line numbers go stale when the note is edited after the scan
            if task.text and task.text not in line:
                raise StaleTaskError(
                    f"{task.relative_path}:{task.line} no longer contains {task.text!r}"
                )
            return transform.apply(line)

        ok = self.repository.apply_line_transform(task.path, task.line, guarded)
        if not ok:
            logger.warning(
                "Could not apply %s to %s:%d",
                type(transform).__name__,
                task.relative_path,
                task.line,
            )
            return False

        logger.info("Task updated: %s:%d (%s)", task.relative_path, task.line, transform)
        if self.on_change is not None:
            self.on_change()
        return True

    def set_status(self, task: Task, status: TaskStatus) -> bool:
        """Change the checkbox status of a task."""
        return self.apply(task, SetStatus(status, self.today()))

    def mark_done(self, task: Task) -> bool:
        """Mark a task done with today's completion stamp."""
        return self.set_status(task, TaskStatus.DONE)

    def set_due_date(self, task: Task, due: date) -> bool:
        """Set an absolute due date."""
        return self.apply(task, SetDueDate(due))

    def due_in(self, task: Task, days: int) -> bool:
        """Set the due date relative to today."""
        return self.set_due_date(task, self.today() + timedelta(days=days))

    def snooze(self, task: Task, days: int) -> bool:
        """Hide a task for a number of days, skipping weekends."""
        return self.apply(task, SetSnoozeDate.after(days, self.today()))

    def snooze_until(self, task: Task, until: date) -> bool:
        """Hide a task until an absolute date."""
        return self.apply(task, SetSnoozeDate(until))
