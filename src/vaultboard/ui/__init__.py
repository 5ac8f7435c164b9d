"""Textual UI components."""

from .screens import DashboardScreen
from .widgets import TaskGroupPanel, TaskRow

__all__ = [
    "DashboardScreen",
    "TaskGroupPanel",
    "TaskRow",
]
