"""
Unit tests for HistoryService
"""
from datetime import date
from unittest.mock import patch

import pytest

from daytracker.config import SLOT_MINUTES, SLOTS_PER_DAY
from daytracker.exceptions import InvalidInput
from daytracker.models import Category, DaySummary, TimeSlot
from daytracker.services import summarize_slots
from daytracker.slots import generate_slots


@pytest.mark.unit
class TestSummarizeSlots:
    """Test the per-day reduction."""

    def test_counts_filled_slots_only(self):
        slots = [
            TimeSlot("9:00 AM", "9:30 AM", "write report", Category.PRODUCTIVE),
            TimeSlot("9:30 AM", "10:00 AM", "", Category.WASTE),
            TimeSlot("10:00 AM", "10:30 AM", "   ", Category.PRODUCTIVE),
            TimeSlot("10:30 AM", "11:00 AM", "tv", Category.WASTE),
            TimeSlot("11:00 AM", "11:30 AM", "walk", Category.NEUTRAL),
        ]

        summary = summarize_slots("2024-03-10", slots)

        assert summary == DaySummary("2024-03-10", productive_minutes=30, waste_minutes=30, neutral_minutes=30)
        assert summary.filled_slot_count == 3

    def test_empty_template_is_zero(self):
        summary = summarize_slots("2024-03-10", generate_slots())

        assert summary.total_minutes == 0

    def test_full_day_ceiling(self):
        slots = [
            TimeSlot(s.start_time, s.end_time, "work", Category.PRODUCTIVE)
            for s in generate_slots()
        ]

        summary = summarize_slots("2024-03-10", slots)

        assert summary.productive_minutes == SLOT_MINUTES * SLOTS_PER_DAY
        assert summary.filled_slot_count == SLOTS_PER_DAY


@pytest.mark.unit
class TestHistoryService:
    """Test gap-free history windows."""

    def test_seven_day_scenario(self, day_service, history_service):
        day_service.save_day("2024-03-10", [
            {"startTime": "9:00 AM", "endTime": "9:30 AM", "activity": "write report", "category": "Productive"},
            {"startTime": "9:30 AM", "endTime": "10:00 AM", "activity": "", "category": "Waste"},
        ])

        history = history_service.summarize_range(end_date=date(2024, 3, 10), window_days=7)

        assert [s.date for s in history] == [
            "2024-03-04", "2024-03-05", "2024-03-06", "2024-03-07",
            "2024-03-08", "2024-03-09", "2024-03-10",
        ]
        assert history[-1].to_dict() == {
            "date": "2024-03-10",
            "productiveMinutes": 30,
            "wasteMinutes": 0,
            "neutralMinutes": 0,
            "filledSlotCount": 1,
        }
        for summary in history[:-1]:
            assert summary == DaySummary.empty(summary.date)

    def test_empty_store_gives_full_window(self, history_service):
        history = history_service.summarize_range(end_date="2024-03-10", window_days=7)

        assert len(history) == 7
        assert all(s.total_minutes == 0 for s in history)

    def test_window_crosses_month_and_year(self, history_service):
        history = history_service.summarize_range(end_date="2024-01-02", window_days=4)

        assert [s.date for s in history] == ["2023-12-30", "2023-12-31", "2024-01-01", "2024-01-02"]

    def test_window_crosses_leap_day(self, history_service):
        history = history_service.summarize_range(end_date="2024-03-01", window_days=3)

        assert [s.date for s in history] == ["2024-02-28", "2024-02-29", "2024-03-01"]

    def test_records_outside_window_ignored(self, day_service, history_service, sample_slots):
        day_service.save_day("2024-03-11", sample_slots)
        day_service.save_day("2024-03-03", sample_slots)

        history = history_service.summarize_range(end_date="2024-03-10", window_days=7)

        assert all(s.total_minutes == 0 for s in history)

    def test_minutes_are_multiples_of_thirty(self, day_service, history_service, sample_slots):
        for day in ["2024-03-05", "2024-03-07", "2024-03-10"]:
            day_service.save_day(day, sample_slots)

        history = history_service.summarize_range(end_date="2024-03-10", window_days=7)

        for s in history:
            for minutes in (s.productive_minutes, s.waste_minutes, s.neutral_minutes):
                assert minutes % SLOT_MINUTES == 0
            assert s.total_minutes <= SLOT_MINUTES * SLOTS_PER_DAY

    def test_defaults_to_today(self, history_service):
        history = history_service.summarize_range()

        assert len(history) == 7
        assert history[-1].date == date.today().isoformat()

    def test_single_day_window(self, day_service, history_service, sample_slots):
        day_service.save_day("2024-03-10", sample_slots)

        history = history_service.summarize_range(end_date="2024-03-10", window_days=1)

        assert len(history) == 1
        assert history[0].filled_slot_count == 3

    @pytest.mark.parametrize("window_days", [0, -3, 1000, "7", 2.5, True])
    def test_invalid_window(self, history_service, window_days):
        with pytest.raises(InvalidInput):
            history_service.summarize_range(end_date="2024-03-10", window_days=window_days)

    def test_does_not_write(self, history_service):
        with patch("daytracker.api.database.upsert_day_record") as mock_upsert:
            history_service.summarize_range(end_date="2024-03-10", window_days=7)

        mock_upsert.assert_not_called()
