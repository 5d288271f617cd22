"""
Unit tests for slot template generation
"""
import pytest

from daytracker.config import SLOTS_PER_DAY
from daytracker.models import Category
from daytracker.slots import format_time, generate_slots


@pytest.mark.unit
class TestFormatTime:
    """Test 12-hour clock formatting."""

    @pytest.mark.parametrize("hours,minutes,expected", [
        (0, 0, "12:00 AM"),
        (0, 30, "12:30 AM"),
        (9, 0, "9:00 AM"),
        (11, 30, "11:30 AM"),
        (12, 0, "12:00 PM"),
        (13, 5, "1:05 PM"),
        (23, 30, "11:30 PM"),
    ])
    def test_format(self, hours, minutes, expected):
        assert format_time(hours, minutes) == expected

    def test_minutes_roll_over(self):
        """60 minutes moves to the next hour."""
        assert format_time(9, 60) == "10:00 AM"
        assert format_time(11, 60) == "12:00 PM"

    def test_end_of_day_is_midnight(self):
        assert format_time(23, 60) == "12:00 AM"


@pytest.mark.unit
class TestGenerateSlots:
    """Test the 48-slot template."""

    def test_slot_count(self):
        assert len(generate_slots()) == SLOTS_PER_DAY

    def test_first_and_last_slot(self):
        slots = generate_slots()

        assert (slots[0].start_time, slots[0].end_time) == ("12:00 AM", "12:30 AM")
        assert (slots[-1].start_time, slots[-1].end_time) == ("11:30 PM", "12:00 AM")

    def test_slots_are_contiguous(self):
        slots = generate_slots()

        for previous, current in zip(slots, slots[1:]):
            assert previous.end_time == current.start_time

    def test_defaults(self):
        """Every slot starts empty and Neutral."""
        for slot in generate_slots():
            assert slot.activity == ""
            assert slot.category == Category.NEUTRAL
            assert not slot.is_filled

    def test_noon_slot(self):
        slots = generate_slots()

        assert slots[24].start_time == "12:00 PM"
        assert slots[24].end_time == "12:30 PM"

    def test_deterministic(self):
        assert generate_slots() == generate_slots()
