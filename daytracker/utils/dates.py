"""
Date helpers shared by the services.
All dates are local calendar dates rendered as YYYY-MM-DD strings.
"""

from datetime import date, datetime
from typing import Optional

import pandas as pd

from ..config import DATE_FORMAT
from ..exceptions import InvalidInput


def parse_date(value) -> date:
    """
    Convert a date, datetime or YYYY-MM-DD string to a date.

    Raises:
        InvalidInput: If the value is missing or not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput("A date is required")
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidInput(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def to_date_string(value) -> str:
    """Normalize any accepted date value to its YYYY-MM-DD key."""
    return parse_date(value).strftime(DATE_FORMAT)


def window_dates(end_date: Optional[date], days: int) -> list[str]:
    """
    Consecutive calendar dates ending at end_date (inclusive), oldest first.

    Args:
        end_date: Last day of the window; today when None
        days: Number of days in the window

    Returns:
        List of `days` YYYY-MM-DD strings
    """
    end = parse_date(end_date) if end_date is not None else date.today()
    index = pd.date_range(end=pd.Timestamp(end), periods=days, freq='D')
    return [ts.strftime(DATE_FORMAT) for ts in index]
