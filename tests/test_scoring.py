"""Tests for task scoring and ordering."""

from datetime import datetime, timedelta
from itertools import combinations
from pathlib import Path

import pytest

from vaultboard.models import Task, UrgencyBucket
from vaultboard.services import score, sort_tasks
from vaultboard.services.scoring import (
    due_proximity_score,
    line_score,
    recency_score,
)

NOW = datetime(2024, 3, 15, 12, 0, 0)
EPOCH = datetime.fromtimestamp(0)


def make_task(**overrides) -> Task:
    """Build a task with neutral defaults."""
    data = {
        "path": Path("/vault/a.md"),
        "relative_path": "a.md",
        "line": 1,
        "text": "task",
        "mtime": EPOCH,
    }
    data.update(overrides)
    return Task(**data)


def best_case(urgency: UrgencyBucket) -> Task:
    """Highest possible score within an urgency bucket."""
    return make_task(
        urgency=urgency,
        priority=1,
        mtime=NOW,
        line=0,
        due_date=NOW - timedelta(days=1000),
    )


def worst_case(urgency: UrgencyBucket) -> Task:
    """Lowest possible score within an urgency bucket."""
    return make_task(urgency=urgency, priority=5, mtime=EPOCH, line=10**9)


class TestTierDominance:
    """Higher tiers always beat any combination of lower tiers."""

    @pytest.mark.parametrize(
        ("higher", "lower"),
        [
            (a, b)
            for a, b in combinations(list(UrgencyBucket), 2)
            if a.rank != b.rank
        ],
    )
    def test_urgency_dominates(self, higher: UrgencyBucket, lower: UrgencyBucket):
        """The better bucket outranks regardless of priority, recency and line."""
        if higher.rank < lower.rank:
            higher, lower = lower, higher
        assert score(worst_case(higher), NOW) > score(best_case(lower), NOW)

    def test_bucket_order(self):
        """Overdue > Today > Tomorrow/This week > Later > None."""
        ranks = [
            UrgencyBucket.OVERDUE.rank,
            UrgencyBucket.TODAY.rank,
            UrgencyBucket.TOMORROW.rank,
            UrgencyBucket.LATER.rank,
            UrgencyBucket.NONE.rank,
        ]
        assert ranks == sorted(ranks, reverse=True)
        assert UrgencyBucket.TOMORROW.rank == UrgencyBucket.THIS_WEEK.rank

    @pytest.mark.parametrize("priority", [1, 2, 3, 4])
    def test_priority_dominates_tie_breaks(self, priority: int):
        """A better priority beats any due/recency/line advantage."""
        better = make_task(urgency=UrgencyBucket.LATER, priority=priority, line=10**9)
        worse = make_task(
            urgency=UrgencyBucket.LATER,
            priority=priority + 1,
            mtime=NOW,
            line=0,
            due_date=NOW - timedelta(days=1000),
        )
        assert score(better, NOW) > score(worse, NOW)


class TestTieBreakScores:
    """Tests for the bounded tie-break components."""

    def test_no_due_date(self):
        assert due_proximity_score(make_task(), NOW) == 0

    def test_closer_due_scores_higher(self):
        near = make_task(due_date=NOW + timedelta(days=2))
        far = make_task(due_date=NOW + timedelta(days=10))

        assert due_proximity_score(near, NOW) == pytest.approx(98)
        assert due_proximity_score(far, NOW) == pytest.approx(90)

    def test_far_future_due_is_zero(self):
        task = make_task(due_date=NOW + timedelta(days=365))
        assert due_proximity_score(task, NOW) == 0

    def test_overdue_bonus_is_capped(self):
        """Overdue tasks get 100 plus days overdue, capped at 200."""
        recent = make_task(due_date=NOW - timedelta(days=5))
        ancient = make_task(due_date=NOW - timedelta(days=500))

        assert due_proximity_score(recent, NOW) == pytest.approx(105)
        assert due_proximity_score(ancient, NOW) == 200

    def test_recency_window(self):
        """Files touched inside the window score higher, clipped at zero."""
        assert recency_score(make_task(mtime=NOW), NOW) == pytest.approx(100)
        assert recency_score(make_task(mtime=NOW - timedelta(days=3.5)), NOW) == pytest.approx(50)
        assert recency_score(make_task(mtime=NOW - timedelta(days=8)), NOW) == 0
        assert recency_score(make_task(mtime=NOW + timedelta(days=1)), NOW) == pytest.approx(100)

    def test_recency_custom_window(self):
        task = make_task(mtime=NOW - timedelta(days=7))
        assert recency_score(task, NOW, window_days=14) == pytest.approx(50)

    def test_earlier_lines_score_higher(self):
        assert line_score(make_task(line=1)) > line_score(make_task(line=2))
        assert line_score(make_task(line=1)) < 1


class TestSortTasks:
    """Tests for total ordering."""

    def test_descending_by_score(self):
        later = make_task(text="later", urgency=UrgencyBucket.LATER)
        overdue = make_task(text="overdue", urgency=UrgencyBucket.OVERDUE)
        today = make_task(text="today", urgency=UrgencyBucket.TODAY)

        ordered = sort_tasks([later, overdue, today], NOW)

        assert [t.text for t in ordered] == ["overdue", "today", "later"]

    def test_ties_keep_encounter_order(self):
        """Equal scores keep the matcher's order (stable sort)."""
        first = make_task(relative_path="b.md")
        second = make_task(relative_path="a.md")

        assert sort_tasks([first, second], NOW) == [first, second]
        assert sort_tasks([second, first], NOW) == [second, first]

    def test_deterministic(self):
        tasks = [
            make_task(text=str(i), line=i % 3, priority=(i % 5) + 1) for i in range(20)
        ]
        assert sort_tasks(tasks, NOW) == sort_tasks(list(tasks), NOW)
