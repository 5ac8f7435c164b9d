"""UI widgets."""

from .task_group import TaskGroupPanel
from .task_row import TaskRow

__all__ = [
    "TaskGroupPanel",
    "TaskRow",
]
