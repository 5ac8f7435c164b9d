"""Print the task dashboard without starting the TUI."""

import logging

from ..config import Settings
from ..repositories import RipgrepMatcher
from ..services import ConfigService, ScanService
from . import output

logger = logging.getLogger(__name__)


def run_list(settings: Settings) -> int:
    """
    Scan the vault and print grouped tasks.

    Returns exit code (0 = success, 1 = vault missing).
    """
    vault_root = settings.vault_root.expanduser().resolve()
    if not vault_root.is_dir():
        output.error(f"Vault not found: {vault_root}")
        return 1

    config_service = ConfigService(vault_root)
    config = config_service.get_config()
    if config_service.has_config_error:
        output.error(f"{config_service.config_error} (using defaults)")

    scan_service = ScanService(vault_root, RipgrepMatcher(config.ripgrep_paths), config)
    dashboard = scan_service.dashboard()

    if not dashboard.groups:
        output.header("No pending tasks found!")
        return 0

    output.header(
        f"{dashboard.total} tasks | {dashboard.overdue_count} overdue | "
        f"{dashboard.today_count} due today"
    )
    for task_group in dashboard.groups:
        print()
        output.group(task_group)
    return 0
