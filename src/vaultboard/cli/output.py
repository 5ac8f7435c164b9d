"""Colorful CLI output helpers."""

import sys

from ..markup import priority_glyph
from ..models import GroupKind, Task, TaskGroup

# ANSI color codes
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
DIM = "\033[2m"
RESET = "\033[0m"
CROSS = "\u2717"  # ✗

GROUP_COLORS = {
    GroupKind.OVERDUE: RED,
    GroupKind.TODAY: YELLOW,
    GroupKind.THIS_WEEK: BLUE,
    GroupKind.OTHER: RESET,
    GroupKind.DONE: GREEN,
}

MAX_TEXT_WIDTH = 60


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def truncate(text: str, width: int = MAX_TEXT_WIDTH) -> str:
    """Shorten text to width, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def format_task(task: Task) -> str:
    """One-line task summary: glyph, text and note location."""
    glyph = priority_glyph(task.priority) if task.priority < 5 else " "
    location = _colorize(f"({task.display_name}:{task.line})", DIM)
    return f"  {glyph} {truncate(task.display_text)} {location}"


def group(task_group: TaskGroup) -> None:
    """Print a group header, its tasks and the overflow line."""
    color = GROUP_COLORS[task_group.kind]
    print(_colorize(f"{task_group.title} ({task_group.total})", color))
    for task in task_group.tasks:
        print(format_task(task))
    if task_group.overflow:
        print(_colorize(f"  ... {task_group.overflow} more items", DIM))


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def error(message: str) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}", file=sys.stderr)
