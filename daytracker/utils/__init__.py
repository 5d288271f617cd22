"""Utility functions for daytracker."""

from .dates import (
    parse_date,
    to_date_string,
    window_dates,
)

__all__ = [
    'parse_date',
    'to_date_string',
    'window_dates',
]
