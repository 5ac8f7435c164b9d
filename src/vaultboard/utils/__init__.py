"""Utility functions."""

from .datetime import (
    days_between,
    end_of_day,
    now_local,
    parse_iso_date,
    skip_weekend,
    to_iso_date,
)

__all__ = [
    "days_between",
    "end_of_day",
    "now_local",
    "parse_iso_date",
    "skip_weekend",
    "to_iso_date",
]
