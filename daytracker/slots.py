"""
Slot template generation.
Builds the canonical list of 30-minute slots for an empty day.
"""

from .config import SLOT_MINUTES, SLOTS_PER_DAY
from .models import Category, TimeSlot


def format_time(hours: int, minutes: int) -> str:
    """
    Format hours and minutes as a 12-hour AM/PM string.

    Minutes of 60 or more roll over into the next hour, so hour 24
    renders as midnight.

    Args:
        hours: Hour of the day (0-24)
        minutes: Minutes, may exceed 59

    Returns:
        Formatted time, e.g. "12:00 PM"
    """
    hours += minutes // 60
    minutes = minutes % 60
    hours = hours % 24

    ampm = "PM" if hours >= 12 else "AM"
    hr = hours % 12 or 12
    return f"{hr}:{minutes:02d} {ampm}"


def generate_slots() -> list[TimeSlot]:
    """
    Generate the empty slot template for a full day.

    Returns:
        48 TimeSlots from 12:00 AM to 12:00 AM, all Neutral with no activity
    """
    slots = []
    for index in range(SLOTS_PER_DAY):
        offset = index * SLOT_MINUTES
        h, m = divmod(offset, 60)
        slots.append(TimeSlot(
            start_time=format_time(h, m),
            end_time=format_time(h, m + SLOT_MINUTES),
            activity="",
            category=Category.NEUTRAL,
        ))
    return slots
