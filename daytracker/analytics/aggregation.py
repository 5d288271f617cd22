"""
Range aggregation of daily summaries.
Reduces an already-fetched history into category totals for weekly and
monthly charts. Nothing here queries the database.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from ..config import DEFAULT_HISTORY_DAYS
from ..models import CategoryTotals, DaySummary
from ..utils import parse_date


def reduce_totals(summaries: Iterable[DaySummary]) -> CategoryTotals:
    """
    Sum minutes per category across summaries.

    Args:
        summaries: Any iterable of DaySummary; may be empty

    Returns:
        CategoryTotals (all zero for empty input)
    """
    totals = CategoryTotals()
    for summary in summaries:
        totals.productive += summary.productive_minutes
        totals.waste += summary.waste_minutes
        totals.neutral += summary.neutral_minutes
    return totals


def trailing_window_totals(
    summaries: Sequence[DaySummary],
    days: int = DEFAULT_HISTORY_DAYS,
) -> CategoryTotals:
    """
    Totals over the last `days` entries of a history result.

    Args:
        summaries: History in ascending date order
        days: Size of the trailing window

    Returns:
        CategoryTotals for the trailing window
    """
    if days <= 0:
        return CategoryTotals()
    return reduce_totals(list(summaries)[-days:])


def month_totals(
    summaries: Iterable[DaySummary],
    today: Optional[date] = None,
) -> CategoryTotals:
    """
    Totals over the summaries that fall in the calendar month of `today`.

    Args:
        summaries: History entries, any order
        today: Reference date; the current local date when None

    Returns:
        CategoryTotals for the month
    """
    reference = parse_date(today) if today is not None else date.today()

    def in_month(summary: DaySummary) -> bool:
        day = parse_date(summary.date)
        return day.year == reference.year and day.month == reference.month

    return reduce_totals(s for s in summaries if in_month(s))


def days_into_month(today: Optional[date] = None) -> int:
    """Number of days from the 1st of the month up to and including `today`."""
    reference = parse_date(today) if today is not None else date.today()
    return reference.day
