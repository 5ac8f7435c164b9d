"""Inline task markup recognized in note lines.

Every table here is an ordered tuple consulted front to back, so the first
entry that matches wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

from .models.enums import TaskStatus
from .utils import parse_iso_date, to_iso_date

DATE_PATTERN = r"(?P<date>\d{4}-\d{2}-\d{2})"

DUE_EMOJI = "📅"
DONE_EMOJI = "✅"
CANCELLED_EMOJI = "❌"
SNOOZE_EMOJI = "💤"

# Leading list marker (-, * or +) plus the bracket token, e.g. "  - [x] "
CHECKBOX_RE = re.compile(r"^(?P<lead>\s*[-*+]\s*)\[\s*(?P<mark>[^\]\s]?)\s*\]")

# (checkbox glyph, status), checked in order; "x" is compared case-insensitively
STATUS_MARKERS: tuple[tuple[str, TaskStatus], ...] = (
    ("/", TaskStatus.IN_PROGRESS),
    ("-", TaskStatus.CANCELLED),
    ("x", TaskStatus.DONE),
)

STATUS_TOKENS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "[ ]",
    TaskStatus.IN_PROGRESS: "[/]",
    TaskStatus.CANCELLED: "[-]",
    TaskStatus.DONE: "[x]",
}

# (glyph, priority); highest priority first so ties resolve to the lowest value
PRIORITY_MARKERS: tuple[tuple[str, int], ...] = (
    ("🔺", 1),
    ("⏫", 2),
    ("🔼", 3),
    ("🔽", 4),
    ("⏬", 5),
)

DEFAULT_PRIORITY = 5


@dataclass(frozen=True)
class DateNotation:
    """One textual way of writing a date-valued field."""

    name: str
    pattern: re.Pattern[str]
    template: str

    def matches(self, text: str) -> Iterator[re.Match[str]]:
        """Iterate over every occurrence of this notation in text."""
        return self.pattern.finditer(text)

    def find(self, text: str) -> date | None:
        """Return the first occurrence that is a real calendar date."""
        for match in self.matches(text):
            parsed = parse_iso_date(match.group("date"))
            if parsed is not None:
                return parsed
        return None

    def replace(self, text: str, day: date) -> str | None:
        """Rewrite the date of the first occurrence, or None if absent."""
        match = self.pattern.search(text)
        if match is None:
            return None
        start, end = match.span("date")
        return f"{text[:start]}{to_iso_date(day)}{text[end:]}"

    def render(self, day: date) -> str:
        """Format a fresh token in this notation."""
        return self.template.format(date=to_iso_date(day))


def _date_notations(emoji: str, keywords: tuple[str, ...]) -> tuple[DateNotation, ...]:
    """Build the four notations for a field: emoji, inline field, colon and call."""
    keys = "|".join(keywords)
    primary = keywords[0]
    return (
        DateNotation(
            "emoji",
            re.compile(rf"{emoji}\s*{DATE_PATTERN}"),
            f"{emoji} {{date}}",
        ),
        DateNotation(
            "inline_field",
            re.compile(rf"\b(?:{keys})::\s*\[\[{DATE_PATTERN}\]\]"),
            f"{primary}:: [[{{date}}]]",
        ),
        DateNotation(
            "colon",
            re.compile(rf"\b(?:{keys}):\s*{DATE_PATTERN}"),
            f"{primary}: {{date}}",
        ),
        DateNotation(
            "call",
            re.compile(rf"@(?:{keys})\({DATE_PATTERN}\)"),
            f"@{primary}({{date}})",
        ),
    )


DUE_NOTATIONS = _date_notations(DUE_EMOJI, ("due",))
DONE_NOTATIONS = _date_notations(DONE_EMOJI, ("done", "completion"))
SNOOZE_NOTATIONS = (
    DateNotation("emoji", re.compile(rf"{SNOOZE_EMOJI}\s*{DATE_PATTERN}"), f"{SNOOZE_EMOJI} {{date}}"),
)
CANCELLED_NOTATIONS = (
    DateNotation(
        "emoji", re.compile(rf"{CANCELLED_EMOJI}\s*{DATE_PATTERN}"), f"{CANCELLED_EMOJI} {{date}}"
    ),
)

DONE_STAMP_RE = re.compile(rf"\s*{DONE_EMOJI}\s*{DATE_PATTERN}")
CANCELLED_STAMP_RE = re.compile(rf"\s*{CANCELLED_EMOJI}\s*{DATE_PATTERN}")


def find_date(text: str, notations: tuple[DateNotation, ...]) -> date | None:
    """Return the date of the first notation that yields a valid date."""
    for notation in notations:
        found = notation.find(text)
        if found is not None:
            return found
    return None


def parse_status(line: str) -> TaskStatus:
    """Detect the checkbox status of a raw line."""
    match = CHECKBOX_RE.match(line)
    mark = match.group("mark").lower() if match else ""
    for glyph, status in STATUS_MARKERS:
        if mark == glyph:
            return status
    return TaskStatus.TODO


def strip_checkbox(line: str) -> str:
    """Remove the list dash and checkbox token, then trim."""
    match = CHECKBOX_RE.match(line)
    if match:
        line = line[match.end() :]
    return line.strip()


def find_priority(text: str) -> int:
    """Map the first priority glyph in table order to its level."""
    for glyph, priority in PRIORITY_MARKERS:
        if glyph in text:
            return priority
    return DEFAULT_PRIORITY


def priority_glyph(priority: int) -> str:
    """Glyph for a priority level, empty for unknown levels."""
    for glyph, level in PRIORITY_MARKERS:
        if level == priority:
            return glyph
    return ""


_DISPLAY_NOISE = [
    notation.pattern for notation in (*DUE_NOTATIONS, *DONE_NOTATIONS, *SNOOZE_NOTATIONS)
] + [DONE_STAMP_RE, CANCELLED_STAMP_RE]


def strip_metadata(text: str) -> str:
    """Remove date notations and priority glyphs for display."""
    for pattern in _DISPLAY_NOISE:
        text = pattern.sub("", text)
    for glyph, _priority in PRIORITY_MARKERS:
        text = text.replace(glyph, "")
    return " ".join(text.split())
