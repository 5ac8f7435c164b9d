"""Parse matched note lines into tasks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

from ..markup import (
    DONE_NOTATIONS,
    DUE_NOTATIONS,
    SNOOZE_NOTATIONS,
    find_date,
    find_priority,
    parse_status,
    strip_checkbox,
)
from ..models import Task, TaskStatus, UrgencyBucket
from ..utils import end_of_day

logger = logging.getLogger(__name__)

EPOCH = datetime.fromtimestamp(0)

MtimeLookup = Callable[[Path], datetime]


def file_mtime(path: Path) -> datetime:
    """Last-modified time of a file, or the epoch if it cannot be read."""
    try:
        return datetime.fromtimestamp(path.stat().st_mtime)
    except OSError as e:
        logger.debug("Could not stat %s: %s", path, e)
        return EPOCH


def classify_urgency(due_date: datetime | None, now: datetime) -> UrgencyBucket:
    """Bucket a due instant relative to now.

    Due dates sit at the end of their day, so a task due today is never
    overdue before midnight.
    """
    if due_date is None:
        return UrgencyBucket.NONE
    if due_date < now:
        return UrgencyBucket.OVERDUE

    today = now.date()
    due_day = due_date.date()
    if due_day == today:
        return UrgencyBucket.TODAY
    if due_day == today + timedelta(days=1):
        return UrgencyBucket.TOMORROW
    if due_date <= end_of_day(today) + timedelta(days=7):
        return UrgencyBucket.THIS_WEEK
    return UrgencyBucket.LATER


class TaskParser:
    """Turns (relative path, line number, raw line) triples into Tasks.

    Parsing never fails: unrecognized markup simply leaves the matching
    field at its default.
    """

    def __init__(
        self,
        vault_root: Path,
        now: datetime,
        mtime_lookup: MtimeLookup | None = None,
    ) -> None:
        self.vault_root = vault_root
        self.now = now
        self._mtime_lookup = mtime_lookup or file_mtime

    def resolve_path(self, relative_path: str) -> Path:
        """Absolute path for a vault-relative path."""
        return self.vault_root / relative_path

    def parse(self, relative_path: str, line_number: int, raw_line: str) -> Task:
        """Parse one matched line."""
        relative_path = relative_path.removeprefix("./")
        path = self.resolve_path(relative_path)
        text = strip_checkbox(raw_line)
        status = parse_status(raw_line)
        mtime = self._mtime_lookup(path)

        due_day = find_date(text, DUE_NOTATIONS)
        due_date = end_of_day(due_day) if due_day else None

        snooze_day = find_date(text, SNOOZE_NOTATIONS)
        snooze_until = end_of_day(snooze_day) if snooze_day else None

        completed_at = None
        if status == TaskStatus.DONE:
            done_day = find_date(text, DONE_NOTATIONS)
            completed_at = end_of_day(done_day) if done_day else mtime

        return Task(
            path=path,
            relative_path=relative_path,
            line=line_number,
            text=text,
            status=status,
            priority=find_priority(text),
            due_date=due_date,
            snooze_until=snooze_until,
            completed_at=completed_at,
            urgency=classify_urgency(due_date, self.now),
            mtime=mtime,
        )
