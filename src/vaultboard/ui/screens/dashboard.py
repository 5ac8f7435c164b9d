"""Main dashboard screen."""

from __future__ import annotations

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Dashboard, Task
from ..widgets import TaskGroupPanel, TaskRow


class GroupScroll(VerticalScroll):
    """Scroll container for task groups.

    Raises SkipAction for navigation keys so they bubble up to the App
    for task navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        """Skip scroll_up action to allow key to bubble."""
        raise SkipAction()

    def action_scroll_down(self) -> None:
        """Skip scroll_down action to allow key to bubble."""
        raise SkipAction()


class DashboardScreen(Screen):
    """Grouped task list with keyboard navigation."""

    def compose(self) -> ComposeResult:
        """Create the dashboard layout."""
        yield Header()
        yield GroupScroll(id="groups")
        yield Footer()

    async def on_mount(self) -> None:
        """Load tasks when screen mounts."""
        await self.refresh_dashboard()

    async def refresh_dashboard(self) -> None:
        """Rescan the vault and rebuild the groups, keeping focus if possible."""
        current = self.get_current_row()
        focus_key = current.location if current else None

        dashboard: Dashboard = self.app.scan_service.dashboard()  # pyrefly: ignore[missing-attribute]
        self.app.sub_title = self._summary(dashboard)

        container = self.query_one("#groups", GroupScroll)
        await container.remove_children()
        if dashboard.groups:
            await container.mount_all([TaskGroupPanel(group) for group in dashboard.groups])
        else:
            await container.mount(Static("No pending tasks found!", classes="empty"))

        self._restore_focus(focus_key)

    @staticmethod
    def _summary(dashboard: Dashboard) -> str:
        """Status line for the header."""
        if dashboard.urgent_count:
            return f"{dashboard.overdue_count} overdue · {dashboard.today_count} today"
        return f"{dashboard.total} tasks"

    def _rows(self) -> list[TaskRow]:
        return list(self.query(TaskRow))

    def _restore_focus(self, key: tuple[str, int] | None) -> None:
        """Focus the row at key, falling back to the first row."""
        rows = self._rows()
        if not rows:
            return
        for row in rows:
            if row.location == key:
                row.focus()
                return
        rows[0].focus()

    def get_current_row(self) -> TaskRow | None:
        """The focused task row, if any."""
        focused = self.focused
        return focused if isinstance(focused, TaskRow) else None

    def get_current_task(self) -> Task | None:
        """The task under the cursor, if any."""
        row = self.get_current_row()
        return row.task if row else None

    def navigate(self, delta: int) -> None:
        """Move focus up (-1) or down (1) through task rows."""
        rows = self._rows()
        if not rows:
            return
        current = self.get_current_row()
        index = rows.index(current) + delta if current in rows else 0
        index = max(0, min(index, len(rows) - 1))
        rows[index].focus()
        rows[index].scroll_visible()
