"""Data models."""

from .config import DEFAULT_EXCLUDE_GLOBS, DEFAULT_RIPGREP_PATHS, GroupLimits, VaultboardConfig
from .dashboard import Dashboard, TaskGroup
from .enums import GroupKind, TaskStatus, UrgencyBucket
from .task import Task

__all__ = [
    "DEFAULT_EXCLUDE_GLOBS",
    "DEFAULT_RIPGREP_PATHS",
    "Dashboard",
    "GroupKind",
    "GroupLimits",
    "Task",
    "TaskGroup",
    "TaskStatus",
    "UrgencyBucket",
    "VaultboardConfig",
]
