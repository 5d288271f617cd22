"""
Day service - Fetch and save the slot list of a single date.
Validates save requests from the HTTP API before they reach the database.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from ..api.database import init_db, get_day_record, upsert_day_record
from ..exceptions import InvalidInput
from ..logger import setup_logger
from ..models import Category, DayRecord, TimeSlot
from ..utils import to_date_string

logger = setup_logger(__name__)


class DayService:
    """
    Service layer for day records.
    Owns validation of save requests; storage is delegated to the database module.
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path

    def init_storage(self):
        """
        Create the schema if needed.

        Raises:
            StorageUnavailable: If the database cannot be opened
        """
        init_db(self.db_path)
        logger.info("Storage initialized")

    def get_day(self, date) -> DayRecord:
        """
        Get the record for a date.

        A date with no saved data is not an error: an empty record is returned.

        Args:
            date: Date or YYYY-MM-DD string

        Returns:
            The stored DayRecord, or an empty one
        """
        key = to_date_string(date)
        record = get_day_record(key, self.db_path)
        if record is None:
            logger.debug(f"No record for {key}, returning empty day")
            return DayRecord.empty(key)
        return record

    def save_day(self, date, time_slots) -> DayRecord:
        """
        Create or fully replace the slots saved for a date.

        Args:
            date: Date or YYYY-MM-DD string
            time_slots: List of TimeSlot objects or wire dictionaries.
                An empty list is valid and clears the day.

        Returns:
            The stored DayRecord including timestamps

        Raises:
            InvalidInput: If date is missing or time_slots is not a list
            StorageUnavailable: If the database cannot be written
        """
        if date is None:
            raise InvalidInput("A date is required")
        if not isinstance(time_slots, (list, tuple)):
            raise InvalidInput("timeSlots must be a list")

        key = to_date_string(date)
        slots = self._normalize_slots(key, time_slots)
        return upsert_day_record(key, slots, self.db_path)

    def _normalize_slots(self, date: str, time_slots) -> list[TimeSlot]:
        """
        Convert incoming slots to TimeSlots.

        Slots without a start or end time are dropped. An unknown category
        is stored as Neutral.
        """
        slots = []
        for index, raw in enumerate(time_slots):
            if isinstance(raw, TimeSlot):
                slots.append(raw)
                continue
            if not isinstance(raw, Mapping):
                logger.warning(f"{date}: dropping slot {index}, not an object")
                continue

            data = dict(raw)
            try:
                Category.parse(data.get('category'))
            except ValueError:
                logger.warning(f"{date}: slot {index} has unknown category {data.get('category')!r}, using Neutral")
                data['category'] = Category.NEUTRAL

            try:
                slots.append(TimeSlot.from_dict(data))
            except ValueError as e:
                logger.warning(f"{date}: dropping slot {index}: {e}")

        dropped = len(time_slots) - len(slots)
        if dropped:
            logger.info(f"{date}: {dropped} malformed slot(s) not saved")
        return slots
