"""
Analytics package - Aggregation of daily summaries into period totals.
"""

from .aggregation import (
    reduce_totals,
    trailing_window_totals,
    month_totals,
    days_into_month,
)

__all__ = [
    'reduce_totals',
    'trailing_window_totals',
    'month_totals',
    'days_into_month',
]
