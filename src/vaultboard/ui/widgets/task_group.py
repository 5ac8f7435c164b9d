"""Task group panel widget."""

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import TaskGroup
from .task_row import TaskRow


class TaskGroupPanel(Widget):
    """A titled, capped group of task rows."""

    def __init__(self, group: TaskGroup, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.task_group = group
        self.add_class(f"group-{group.kind.value.replace('_', '-')}")

    def compose(self) -> ComposeResult:
        """Create the header, rows and overflow note."""
        yield Static(f"{self.task_group.title} ({self.task_group.total})", classes="group-header")
        for task in self.task_group.tasks:
            yield TaskRow(task)
        if self.task_group.overflow:
            yield Static(f"... {self.task_group.overflow} more items", classes="group-overflow")
