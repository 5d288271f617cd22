"""
Services package - Business logic layer.
"""

from .day_service import DayService
from .history_service import HistoryService, summarize_slots

__all__ = [
    'DayService',
    'HistoryService',
    'summarize_slots',
]
