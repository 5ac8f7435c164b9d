"""Logging configuration for vaultboard.

Everything logs under the ``vaultboard`` namespace. Nothing is emitted unless
``-v`` or ``--log-file`` is given; with the TUI running, ``--log-file`` is the
only practical way to see output, since stderr sits underneath the screen.
"""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "vaultboard"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_for(verbose: int) -> int:
    """-vv and beyond is DEBUG; -v, or a log file alone, is INFO."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    verbose: int = 0,
    log_file: Path | None = None,
    vault_root: Path | None = None,
) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
        vault_root: Vault being scanned, recorded in the startup banner
    """
    if verbose == 0 and log_file is None:
        # No logging requested
        return

    level = _level_for(verbose)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if verbose > 0:
        _attach(logger, logging.StreamHandler(sys.stderr), level)

    if log_file is not None:
        # Ensure parent directory exists
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), level)

    # Startup delimiter with timestamp
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info(
        "vaultboard starting | %s | level=%s", timestamp, logging.getLevelName(level)
    )
    if vault_root is not None:
        logger.info("vault: %s", vault_root.expanduser().resolve())
    logger.info("=" * 60)
