"""
daytracker - track each 30-minute slot of the day as Productive, Waste or Neutral.
"""

__version__ = "0.1.0"
