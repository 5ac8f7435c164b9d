"""Task row widget."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from ...markup import priority_glyph
from ...models import Task, TaskStatus, UrgencyBucket

MAX_TEXT_WIDTH = 60

URGENCY_STYLES: dict[UrgencyBucket, str] = {
    UrgencyBucket.OVERDUE: "bold red",
    UrgencyBucket.TODAY: "yellow",
    UrgencyBucket.TOMORROW: "cyan",
    UrgencyBucket.THIS_WEEK: "cyan",
    UrgencyBucket.LATER: "",
    UrgencyBucket.NONE: "",
}


class TaskRow(Static, can_focus=True):
    """A single focusable task line."""

    def __init__(self, task_data: Task, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this row."""
        return self._task_data

    @property
    def location(self) -> tuple[str, int]:
        """Location used to restore focus after a refresh."""
        return (self._task_data.relative_path, self._task_data.line)

    def on_mount(self) -> None:
        """Render the row once mounted."""
        self.update(self.render_text())

    def render_text(self) -> Text:
        """Build the styled row text."""
        task = self._task_data
        text = Text()
        glyph = priority_glyph(task.priority) if task.priority < 5 else " "
        text.append(f"{glyph} ")

        style = URGENCY_STYLES[task.urgency] if task.is_open else "dim"
        if task.status == TaskStatus.IN_PROGRESS:
            text.append("▶ ", style="green")
        text.append(self._truncate(task.display_text, MAX_TEXT_WIDTH), style=style)

        if task.due_date is not None and task.is_open:
            text.append(f"  {task.due_date:%Y-%m-%d}", style="dim")
        text.append(f"  ({task.display_name})", style="dim italic")
        return text

    @staticmethod
    def _truncate(text: str, max_len: int) -> str:
        """Truncate text with ellipsis if too long."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 3] + "..."
