"""Scan a vault for tasks and rank them."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from ..models import Dashboard, Task, VaultboardConfig
from ..repositories import LineMatcherProtocol, LineMatcherUnavailable
from ..utils import now_local
from .bucket_service import build_dashboard
from .scoring import sort_tasks
from .task_parser import TaskParser, file_mtime

logger = logging.getLogger(__name__)

# One search per checkbox class, in this order: todo, in progress, done
SCAN_PATTERNS: tuple[str, ...] = (
    r"^\s*[-*+]\s*\[\s*\]\s*.+",
    r"^\s*[-*+]\s*\[/\]\s*.+",
    r"^\s*[-*+]\s*\[[xX]\]\s*.+",
)


class ScanService:
    """Orchestrates matcher, parser, snooze filter and scorer."""

    def __init__(
        self,
        vault_root: Path,
        matcher: LineMatcherProtocol,
        config: VaultboardConfig | None = None,
    ) -> None:
        self.vault_root = vault_root
        self.matcher = matcher
        self.config = config or VaultboardConfig.default()

    def scan(self, now: datetime | None = None) -> list[Task]:
        """
        Find, parse and rank every visible task in the vault.

        Tasks snoozed past ``now`` are dropped. If the matcher cannot run the
        result is empty rather than an error.
        """
        now = now or now_local()

        # Scan-local: modification times are never reused by a later scan
        mtimes: dict[Path, datetime] = {}

        def mtime_lookup(path: Path) -> datetime:
            if path not in mtimes:
                mtimes[path] = file_mtime(path)
            return mtimes[path]

        parser = TaskParser(self.vault_root, now, mtime_lookup)
        tasks: list[Task] = []
        snoozed = 0

        try:
            for pattern in SCAN_PATTERNS:
                matches = self.matcher.search(
                    self.vault_root, pattern, self.config.exclude_globs
                )
                for match in matches:
                    task = parser.parse(match.relative_path, match.line_number, match.text)
                    if task.is_snoozed(now):
                        snoozed += 1
                        continue
                    tasks.append(task)
        except LineMatcherUnavailable as e:
            logger.warning("Line matcher unavailable, no tasks loaded: %s", e)
            return []

        ranked = sort_tasks(tasks, now, self.config.recency_window_days)
        logger.info(
            "Scanned %s: %d tasks (%d snoozed) across %d files",
            self.vault_root,
            len(ranked),
            snoozed,
            len(mtimes),
        )
        return ranked

    def dashboard(self, now: datetime | None = None) -> Dashboard:
        """Scan and bucketize into capped display groups."""
        return build_dashboard(self.scan(now), self.config.limits)
