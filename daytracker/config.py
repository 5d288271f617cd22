"""
Configuration constants for daytracker.
Centralized configuration for storage paths, slot layout, and behavior.
"""

import os
from pathlib import Path
from typing import Dict

BASE_DIR = Path(__file__).parent.parent

# Database
DB_PATH = Path(os.environ.get("DAYTRACKER_DB_PATH", BASE_DIR / "data" / "daytracker.db"))
BACKUP_DIR = Path(os.environ.get("DAYTRACKER_BACKUP_DIR", BASE_DIR / "data" / "backups"))

# Slot layout
SLOT_MINUTES = 30
SLOTS_PER_DAY = 24 * 60 // SLOT_MINUTES  # 48

# Categories
CATEGORY_COLORS: Dict[str, str] = {
    'Productive': '#28a745',
    'Neutral': '#4169E1',
    'Waste': '#dc3545',
}

# History windows
DEFAULT_HISTORY_DAYS = 7
MAX_HISTORY_DAYS = 366

# Date Formats
DATE_FORMAT = "%Y-%m-%d"

# Chart Defaults
DEFAULT_CHART_HEIGHT = 350

# API
API_HOST = os.environ.get("DAYTRACKER_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("DAYTRACKER_PORT", "5000"))

# Logging
LOG_DIR = Path(os.environ.get("DAYTRACKER_LOG_DIR", BASE_DIR / "logs"))
LOG_LEVEL = os.environ.get("DAYTRACKER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
