"""vaultboard - rank, group and edit checkbox tasks from a notes vault."""

__version__ = "0.1.0"
