"""
History service - Per-day category summaries over a window of dates.
Read-only: never writes to the database.
"""

from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from ..api.database import get_day_records
from ..config import DEFAULT_HISTORY_DAYS, MAX_HISTORY_DAYS, SLOT_MINUTES
from ..exceptions import InvalidInput
from ..logger import setup_logger, log_summary_stats
from ..models import Category, DaySummary, TimeSlot
from ..utils import window_dates

logger = setup_logger(__name__)


def summarize_slots(date: str, slots: Iterable[TimeSlot]) -> DaySummary:
    """
    Reduce a day's slots to minutes per category.

    Only slots with a non-blank activity count; a blank slot adds nothing
    even when a category is set.

    Args:
        date: YYYY-MM-DD date string
        slots: The day's TimeSlots

    Returns:
        DaySummary for the date
    """
    minutes = {category: 0 for category in Category}
    for slot in slots:
        if slot.is_filled:
            minutes[slot.category] += SLOT_MINUTES

    return DaySummary(
        date=date,
        productive_minutes=minutes[Category.PRODUCTIVE],
        waste_minutes=minutes[Category.WASTE],
        neutral_minutes=minutes[Category.NEUTRAL],
    )


class HistoryService:
    """Builds gap-free daily summaries from stored day records."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path

    def summarize_range(
        self,
        end_date: Optional[date] = None,
        window_days: int = DEFAULT_HISTORY_DAYS,
    ) -> list[DaySummary]:
        """
        Summaries for every date in [end_date - window_days + 1, end_date].

        Dates without a stored record get a zeroed summary, so the result
        always has exactly window_days entries in ascending date order.

        Args:
            end_date: Last day of the window (date or YYYY-MM-DD); today when None
            window_days: Number of days to summarize

        Raises:
            InvalidInput: If window_days is not between 1 and MAX_HISTORY_DAYS
        """
        if isinstance(window_days, bool) or not isinstance(window_days, int):
            raise InvalidInput("window_days must be an integer")
        if not 1 <= window_days <= MAX_HISTORY_DAYS:
            raise InvalidInput(f"window_days must be between 1 and {MAX_HISTORY_DAYS}")

        dates = window_dates(end_date, window_days)
        records = get_day_records(dates[0], dates[-1], self.db_path)

        summaries = []
        for day in dates:
            record = records.get(day)
            if record is None:
                summaries.append(DaySummary.empty(day))
            else:
                summaries.append(summarize_slots(day, record.time_slots))

        log_summary_stats(summaries, logger)
        return summaries
