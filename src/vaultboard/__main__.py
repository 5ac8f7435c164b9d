"""CLI entry point for vaultboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="vaultboard",
        description="Task dashboard for a vault of markdown notes",
    )
    parser.add_argument(
        "--vault-root",
        type=Path,
        default=None,
        help="Path to the notes vault (default: current directory)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print grouped tasks and exit instead of starting the TUI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args; unset flags fall back to VAULTBOARD_* env vars
    settings_kwargs: dict = {}
    if args.vault_root:
        settings_kwargs["vault_root"] = args.vault_root
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file, settings.vault_root)

    if args.list:
        from .cli.list import run_list

        raise SystemExit(run_list(settings))

    # Import here so --list works without loading the TUI
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
