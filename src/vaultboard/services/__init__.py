"""Service layer for business logic."""

from .bucket_service import bucketize, build_dashboard, summarize
from .config_service import ConfigService
from .mutation_service import (
    MutationService,
    SetDueDate,
    SetSnoozeDate,
    SetStatus,
    StaleTaskError,
    TaskTransform,
)
from .scan_service import SCAN_PATTERNS, ScanService
from .scoring import score, sort_tasks
from .task_parser import TaskParser, classify_urgency

__all__ = [
    "SCAN_PATTERNS",
    "ConfigService",
    "MutationService",
    "ScanService",
    "SetDueDate",
    "SetSnoozeDate",
    "SetStatus",
    "StaleTaskError",
    "TaskParser",
    "TaskTransform",
    "bucketize",
    "build_dashboard",
    "classify_urgency",
    "score",
    "sort_tasks",
    "summarize",
]
