"""
Models package - Data models and type definitions.
"""

from .day import Category, TimeSlot, DayRecord, DaySummary, CategoryTotals

__all__ = ['Category', 'TimeSlot', 'DayRecord', 'DaySummary', 'CategoryTotals']
