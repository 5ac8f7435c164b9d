"""Tests for TaskParser and urgency classification."""

from datetime import datetime
from pathlib import Path

import pytest

from vaultboard.models import TaskStatus, UrgencyBucket
from vaultboard.services import TaskParser, classify_urgency

NOW = datetime(2024, 3, 15, 12, 0, 0)  # a Friday
MTIME = datetime(2024, 3, 14, 9, 30, 0)


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Create an empty vault directory."""
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def parser(vault: Path) -> TaskParser:
    """Parser pinned to NOW with a fixed file mtime."""
    return TaskParser(vault, NOW, lambda _path: MTIME)


class TestEndToEndScenarios:
    """Scenarios from the task dashboard behaviour."""

    def test_overdue_rent(self, parser: TaskParser):
        """A past due date is overdue with default priority."""
        task = parser.parse("notes/home.md", 3, "- [ ] Pay rent 📅 2024-03-01")

        assert task.status == TaskStatus.TODO
        assert task.due_date == datetime(2024, 3, 1, 23, 59, 59)
        assert task.urgency == UrgencyBucket.OVERDUE
        assert task.priority == 5

    def test_release_due_tomorrow(self, parser: TaskParser):
        """Scanned the day before, the release is due tomorrow."""
        task = parser.parse("work.md", 1, "- [ ] Ship release 🔺 📅 2024-03-16")

        assert task.priority == 1
        assert task.urgency == UrgencyBucket.TOMORROW

    def test_release_due_today(self, vault: Path):
        """Scanned on the due day, the release is due today."""
        parser = TaskParser(vault, datetime(2024, 3, 16, 8, 0), lambda _path: MTIME)
        task = parser.parse("work.md", 1, "- [ ] Ship release 🔺 📅 2024-03-16")

        assert task.priority == 1
        assert task.urgency == UrgencyBucket.TODAY


class TestTaskParserFields:
    """Tests for field extraction."""

    def test_location_fields(self, parser: TaskParser, vault: Path):
        """Leading ./ is dropped and the path is made absolute."""
        task = parser.parse("./projects/Launch Plan.md", 42, "- [ ] Book venue")

        assert task.relative_path == "projects/Launch Plan.md"
        assert task.path == vault / "projects" / "Launch Plan.md"
        assert task.display_name == "Launch Plan"
        assert task.line == 42
        assert task.mtime == MTIME

    def test_text_strips_checkbox_and_whitespace(self, parser: TaskParser):
        """Checkbox is removed but inline metadata is kept."""
        task = parser.parse("a.md", 1, "    -  [ ]   Pay rent ⏫ 📅 2024-03-01   ")

        assert task.text == "Pay rent ⏫ 📅 2024-03-01"
        assert task.display_text == "Pay rent"

    def test_defaults_without_markup(self, parser: TaskParser):
        """A bare task has no dates and the lowest priority."""
        task = parser.parse("a.md", 1, "- [ ] Just a thing")

        assert task.status == TaskStatus.TODO
        assert task.due_date is None
        assert task.snooze_until is None
        assert task.completed_at is None
        assert task.priority == 5
        assert task.urgency == UrgencyBucket.NONE

    @pytest.mark.parametrize(
        "line",
        [
            "- [ ] File taxes 📅 2024-03-20",
            "- [ ] File taxes due:: [[2024-03-20]]",
            "- [ ] File taxes due: 2024-03-20",
            "- [ ] File taxes @due(2024-03-20)",
        ],
    )
    def test_due_notations_agree(self, parser: TaskParser, line: str):
        """All four due notations give end of day on the stated date."""
        task = parser.parse("a.md", 1, line)
        assert task.due_date == datetime(2024, 3, 20, 23, 59, 59)

    def test_due_notation_order(self, parser: TaskParser):
        """The emoji notation wins over later notations."""
        task = parser.parse("a.md", 1, "- [ ] x due: 2024-04-01 📅 2024-03-20")
        assert task.due_date == datetime(2024, 3, 20, 23, 59, 59)

    def test_malformed_date_falls_through(self, parser: TaskParser):
        """An impossible date is skipped and the next notation is used."""
        task = parser.parse("a.md", 1, "- [ ] x 📅 2024-02-30 due: 2024-03-20")
        assert task.due_date == datetime(2024, 3, 20, 23, 59, 59)

    def test_malformed_date_only(self, parser: TaskParser):
        """An impossible date alone means no due date."""
        task = parser.parse("a.md", 1, "- [ ] x 📅 2024-13-01")

        assert task.due_date is None
        assert task.urgency == UrgencyBucket.NONE

    def test_keyword_inside_word_is_ignored(self, parser: TaskParser):
        """'overdue:' is not a due notation."""
        task = parser.parse("a.md", 1, "- [ ] overdue: 2024-03-01 report")
        assert task.due_date is None

    def test_snooze_date(self, parser: TaskParser):
        """Snooze uses its own notation, independent of due."""
        task = parser.parse("a.md", 1, "- [ ] x 📅 2024-03-20 💤 2024-03-18")

        assert task.snooze_until == datetime(2024, 3, 18, 23, 59, 59)
        assert task.due_date == datetime(2024, 3, 20, 23, 59, 59)

    @pytest.mark.parametrize(
        ("glyph", "priority"),
        [("🔺", 1), ("⏫", 2), ("🔼", 3), ("🔽", 4), ("⏬", 5)],
    )
    def test_priority_glyphs(self, parser: TaskParser, glyph: str, priority: int):
        """Each glyph maps to its level."""
        task = parser.parse("a.md", 1, f"- [ ] x {glyph}")
        assert task.priority == priority

    def test_multiple_priority_glyphs_pick_highest(self, parser: TaskParser):
        """With several glyphs, the highest priority wins."""
        task = parser.parse("a.md", 1, "- [ ] x ⏬ 🔼 ⏫")
        assert task.priority == 2


class TestTaskParserStatus:
    """Tests for checkbox status detection."""

    @pytest.mark.parametrize(
        ("line", "status"),
        [
            ("- [ ] a", TaskStatus.TODO),
            ("- [] a", TaskStatus.TODO),
            ("- [/] a", TaskStatus.IN_PROGRESS),
            ("- [-] a", TaskStatus.CANCELLED),
            ("- [x] a", TaskStatus.DONE),
            ("- [X] a", TaskStatus.DONE),
            ("  - [ x ] a", TaskStatus.DONE),
            ("- [?] a", TaskStatus.TODO),
            ("* [x] a", TaskStatus.DONE),
            ("+ [/] a", TaskStatus.IN_PROGRESS),
            ("  * [ ] a", TaskStatus.TODO),
            ("no checkbox at all", TaskStatus.TODO),
        ],
    )
    def test_status_detection(self, parser: TaskParser, line: str, status: TaskStatus):
        """Each checkbox form maps to exactly one status."""
        assert parser.parse("a.md", 1, line).status == status

    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_list_markers_are_stripped(self, parser: TaskParser, marker: str):
        """Dash, star and plus bullets all introduce a checkbox."""
        task = parser.parse("a.md", 1, f"{marker} [x] star task")

        assert task.text == "star task"
        assert task.status == TaskStatus.DONE

    def test_done_with_completion_stamp(self, parser: TaskParser):
        """The completion emoji date sets completed_at."""
        task = parser.parse("a.md", 1, "- [x] Buy milk ✅ 2024-03-10")
        assert task.completed_at == datetime(2024, 3, 10, 23, 59, 59)

    @pytest.mark.parametrize(
        "line",
        [
            "- [x] a done:: [[2024-03-10]]",
            "- [x] a completion:: [[2024-03-10]]",
            "- [x] a done: 2024-03-10",
            "- [x] a @done(2024-03-10)",
        ],
    )
    def test_done_notations(self, parser: TaskParser, line: str):
        """Completion dates accept the same notations as due dates."""
        task = parser.parse("a.md", 1, line)
        assert task.completed_at == datetime(2024, 3, 10, 23, 59, 59)

    def test_done_without_stamp_uses_mtime(self, parser: TaskParser):
        """Done always has a completion time, falling back to the file mtime."""
        task = parser.parse("a.md", 1, "- [x] Buy milk")
        assert task.completed_at == MTIME

    def test_completion_only_for_done(self, parser: TaskParser):
        """Open tasks never carry a completion time."""
        task = parser.parse("a.md", 1, "- [ ] Buy milk ✅ 2024-03-10")
        assert task.completed_at is None

    def test_missing_file_mtime_is_epoch(self, vault: Path):
        """The default mtime lookup tolerates missing files."""
        parser = TaskParser(vault, NOW)
        task = parser.parse("gone.md", 1, "- [x] a")

        assert task.mtime == datetime.fromtimestamp(0)
        assert task.completed_at == task.mtime


class TestClassifyUrgency:
    """Tests for urgency bucketing."""

    def test_no_due_date(self):
        assert classify_urgency(None, NOW) == UrgencyBucket.NONE

    def test_end_of_today_is_today(self):
        """Due at 23:59:59 today is today, not overdue."""
        assert classify_urgency(datetime(2024, 3, 15, 23, 59, 59), NOW) == UrgencyBucket.TODAY

    def test_earlier_today_is_overdue(self):
        """Any instant strictly before now is overdue, even on the same day."""
        assert classify_urgency(datetime(2024, 3, 15, 11, 0, 0), NOW) == UrgencyBucket.OVERDUE

    def test_tomorrow(self):
        assert classify_urgency(datetime(2024, 3, 16, 23, 59, 59), NOW) == UrgencyBucket.TOMORROW

    def test_within_week(self):
        """Up to seven days after the end of today is this week."""
        assert classify_urgency(datetime(2024, 3, 17, 23, 59, 59), NOW) == UrgencyBucket.THIS_WEEK
        assert classify_urgency(datetime(2024, 3, 22, 23, 59, 59), NOW) == UrgencyBucket.THIS_WEEK

    def test_later(self):
        assert classify_urgency(datetime(2024, 3, 23, 23, 59, 59), NOW) == UrgencyBucket.LATER
