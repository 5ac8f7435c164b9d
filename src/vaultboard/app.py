"""vaultboard TUI Application."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import App
from textual.binding import Binding
from textual.timer import Timer

from .config import Settings
from .models import Task, TaskStatus
from .repositories import NoteRepository, RipgrepMatcher
from .services import ConfigService, MutationService, ScanService
from .ui.screens import DashboardScreen

SNOOZE_SHORT_DAYS = 1
SNOOZE_LONG_DAYS = 7


class VaultboardApp(App):
    """vaultboard - task dashboard for a notes vault."""

    TITLE = "vaultboard"

    CSS = """
    TaskGroupPanel {
        height: auto;
        margin-bottom: 1;
    }
    .group-header {
        text-style: bold;
    }
    .group-overdue .group-header {
        color: $error;
    }
    .group-today .group-header {
        color: $warning;
    }
    .group-overflow, .empty {
        color: $text-muted;
    }
    TaskRow {
        padding-left: 2;
    }
    TaskRow:focus {
        background: $accent 30%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "refresh", "Refresh", show=True),
        # Navigation
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        # Task actions
        Binding("x", "mark_done", "Done", show=True),
        Binding("p", "mark_in_progress", "In progress", show=True),
        Binding("c", "mark_cancelled", "Cancel", show=False),
        Binding("o", "reopen", "Reopen", show=False),
        Binding("t", "due_today", "Due today", show=False),
        Binding("m", "due_tomorrow", "Due tomorrow", show=False),
        Binding("s", "snooze_day", "Snooze 1d", show=True),
        Binding("w", "snooze_week", "Snooze 1w", show=True),
    ]

    SCREENS = {
        "dashboard": DashboardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._rescan_timer: Timer | None = None
        self._init_services()

    def _init_services(self) -> None:
        """Initialize configuration and services."""
        self.vault_root = self.settings.vault_root.expanduser().resolve()
        self.config_service = ConfigService(self.vault_root)

        config = self.config_service.get_config()
        matcher = RipgrepMatcher(config.ripgrep_paths)
        self.scan_service = ScanService(self.vault_root, matcher, config)
        self.mutation_service = MutationService(
            NoteRepository(), on_change=self.schedule_refresh
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("dashboard")
        if self.config_service.has_config_error:
            self.notify(
                f"{self.config_service.config_error} (using defaults)",
                severity="warning",
            )

    async def action_refresh(self) -> None:
        """Rescan the vault."""
        self._rescan_timer = None
        screen = self.screen
        if isinstance(screen, DashboardScreen):
            await screen.refresh_dashboard()

    def schedule_refresh(self) -> None:
        """Rescan shortly, letting the edit settle; repeated calls coalesce."""
        if self._rescan_timer is not None:
            self._rescan_timer.stop()
        self._rescan_timer = self.set_timer(
            self.settings.rescan_delay, self.action_refresh
        )

    # Navigation actions
    def action_nav_up(self) -> None:
        """Navigate to previous task."""
        screen = self.screen
        if isinstance(screen, DashboardScreen):
            screen.navigate(-1)

    def action_nav_down(self) -> None:
        """Navigate to next task."""
        screen = self.screen
        if isinstance(screen, DashboardScreen):
            screen.navigate(1)

    # Task actions
    def _current_task(self) -> Task | None:
        """Task under the cursor on the dashboard."""
        screen = self.screen
        if not isinstance(screen, DashboardScreen):
            return None
        return screen.get_current_task()

    def _mutate(self, mutation: Callable[[Task], bool], message: str) -> None:
        """Run a mutation on the current task and report the outcome."""
        task = self._current_task()
        if task is None:
            return
        if mutation(task):
            self.notify(message, timeout=2)
        else:
            self.notify("Could not update task, see log for details", severity="error")

    def _set_status(self, status: TaskStatus, message: str) -> None:
        self._mutate(lambda task: self.mutation_service.set_status(task, status), message)

    def action_mark_done(self) -> None:
        """Mark the current task done."""
        self._set_status(TaskStatus.DONE, "Task done")

    def action_mark_in_progress(self) -> None:
        """Mark the current task in progress."""
        self._set_status(TaskStatus.IN_PROGRESS, "Task in progress")

    def action_mark_cancelled(self) -> None:
        """Cancel the current task."""
        self._set_status(TaskStatus.CANCELLED, "Task cancelled")

    def action_reopen(self) -> None:
        """Return the current task to todo."""
        self._set_status(TaskStatus.TODO, "Task reopened")

    def action_due_today(self) -> None:
        """Make the current task due today."""
        self._mutate(lambda task: self.mutation_service.due_in(task, 0), "Due today")

    def action_due_tomorrow(self) -> None:
        """Make the current task due tomorrow."""
        self._mutate(lambda task: self.mutation_service.due_in(task, 1), "Due tomorrow")

    def action_snooze_day(self) -> None:
        """Hide the current task until the next weekday."""
        self._mutate(
            lambda task: self.mutation_service.snooze(task, SNOOZE_SHORT_DAYS),
            "Snoozed",
        )

    def action_snooze_week(self) -> None:
        """Hide the current task for a week."""
        self._mutate(
            lambda task: self.mutation_service.snooze(task, SNOOZE_LONG_DAYS),
            "Snoozed for a week",
        )


def run(settings: Settings | None = None) -> None:
    """Run the vaultboard application."""
    app = VaultboardApp(settings)
    app.run()
