"""
Error types raised by the daytracker core.
"""


class DayTrackerError(Exception):
    """Base class for daytracker errors."""


class InvalidInput(DayTrackerError, ValueError):
    """A save or history request is malformed. Nothing was written."""


class StorageUnavailable(DayTrackerError):
    """The backing database cannot be reached or used."""
