"""Task domain model."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .enums import TaskStatus, UrgencyBucket


class Task(BaseModel):
    """A checkbox line found in a note, as seen by a single scan.

    Tasks are snapshots: mutations rewrite the note file and the next scan
    derives fresh tasks from disk.
    """

    model_config = ConfigDict(frozen=True)

    # Location (path + line identify the physical row at scan time)
    path: Path
    relative_path: str
    line: int

    # Content
    text: str  # checkbox stripped, inline metadata kept
    status: TaskStatus = TaskStatus.TODO
    priority: int = Field(default=5, ge=1, le=5)  # 1 = highest

    # Dates, normalized to end of day
    due_date: datetime | None = None
    snooze_until: datetime | None = None
    completed_at: datetime | None = None

    # Derived at scan time
    urgency: UrgencyBucket = UrgencyBucket.NONE
    mtime: datetime

    @property
    def display_name(self) -> str:
        """Note name without the .md extension."""
        name = Path(self.relative_path).name
        return name.removesuffix(".md")

    @property
    def display_text(self) -> str:
        """Task text without inline metadata, for display."""
        # Import here to avoid circular import
        from ..markup import strip_metadata

        return strip_metadata(self.text) or self.text

    @property
    def is_open(self) -> bool:
        """True if the task still needs work."""
        return self.status.is_open

    def is_snoozed(self, now: datetime) -> bool:
        """True while the snooze date lies strictly in the future."""
        return self.snooze_until is not None and self.snooze_until > now
