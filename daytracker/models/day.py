"""
Day record data models and type definitions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ..config import SLOT_MINUTES


class Category(Enum):
    """How the time in a slot was spent."""
    PRODUCTIVE = "Productive"
    WASTE = "Waste"
    NEUTRAL = "Neutral"

    @classmethod
    def parse(cls, value) -> 'Category':
        """
        Convert a wire value to a Category.

        Blank or missing values default to NEUTRAL.

        Raises:
            ValueError: If the value is not one of the three categories
        """
        if isinstance(value, cls):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.NEUTRAL
        return cls(value)


@dataclass
class TimeSlot:
    """
    A single 30-minute slot of a day.

    Attributes:
        start_time: 12-hour clock start, e.g. "9:00 AM"
        end_time: 12-hour clock end, e.g. "9:30 AM"
        activity: Free-text activity label (empty when nothing was entered)
        category: Productive, Waste or Neutral
    """
    start_time: str
    end_time: str
    activity: str = ""
    category: Category = Category.NEUTRAL

    def __post_init__(self):
        """Validate slot data."""
        if not isinstance(self.start_time, str) or not self.start_time.strip():
            raise ValueError("Start time cannot be empty")
        if not isinstance(self.end_time, str) or not self.end_time.strip():
            raise ValueError("End time cannot be empty")
        if self.activity is None:
            self.activity = ""
        elif not isinstance(self.activity, str):
            self.activity = str(self.activity)
        self.category = Category.parse(self.category)

    @property
    def is_filled(self) -> bool:
        """Whether an activity has been entered for this slot."""
        return self.activity.strip() != ""

    def to_dict(self) -> dict:
        """Convert slot to its wire/storage dictionary."""
        return {
            'startTime': self.start_time,
            'endTime': self.end_time,
            'activity': self.activity,
            'category': self.category.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TimeSlot':
        """Create TimeSlot from a wire/storage dictionary."""
        return cls(
            start_time=data.get('startTime'),
            end_time=data.get('endTime'),
            activity=data.get('activity') or "",
            category=data.get('category'),
        )


@dataclass
class DayRecord:
    """
    The persisted slots of one calendar date.

    `date` is a YYYY-MM-DD string and the unique key. Timestamps are None
    for a record that has never been saved.
    """
    date: str
    time_slots: list[TimeSlot] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def empty(cls, date: str) -> 'DayRecord':
        """Record returned for a date with no saved data."""
        return cls(date=date, time_slots=[])

    def to_dict(self) -> dict:
        """Convert record to its wire dictionary."""
        data = {
            'date': self.date,
            'timeSlots': [slot.to_dict() for slot in self.time_slots],
        }
        if self.created_at is not None:
            data['createdAt'] = self.created_at.isoformat()
        if self.updated_at is not None:
            data['updatedAt'] = self.updated_at.isoformat()
        return data


@dataclass
class DaySummary:
    """Minutes per category for one date, counting only filled slots."""
    date: str
    productive_minutes: int = 0
    waste_minutes: int = 0
    neutral_minutes: int = 0

    @classmethod
    def empty(cls, date: str) -> 'DaySummary':
        return cls(date=date)

    @property
    def total_minutes(self) -> int:
        return self.productive_minutes + self.waste_minutes + self.neutral_minutes

    @property
    def filled_slot_count(self) -> int:
        """Number of filled slots; every slot is exactly SLOT_MINUTES long."""
        return self.total_minutes // SLOT_MINUTES

    def to_dict(self) -> dict:
        return {
            'date': self.date,
            'productiveMinutes': self.productive_minutes,
            'wasteMinutes': self.waste_minutes,
            'neutralMinutes': self.neutral_minutes,
            'filledSlotCount': self.filled_slot_count,
        }


@dataclass
class CategoryTotals:
    """Summed minutes per category across several days."""
    productive: int = 0
    waste: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.productive + self.waste + self.neutral

    def to_dict(self) -> dict:
        return {
            'productive': self.productive,
            'waste': self.waste,
            'neutral': self.neutral,
        }
