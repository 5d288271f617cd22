"""
Pytest configuration and fixtures
"""
import os
import sys
import tempfile
from pathlib import Path

# Keep logs and the default database out of the project tree
_session_dir = Path(tempfile.mkdtemp(prefix="daytracker-tests-"))
os.environ.setdefault("DAYTRACKER_LOG_DIR", str(_session_dir / "logs"))
os.environ.setdefault("DAYTRACKER_DB_PATH", str(_session_dir / "default.db"))

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def temp_db(tmp_path):
    """Path to an initialized, empty database for one test."""
    from daytracker.api.database import init_db

    db_path = tmp_path / "daytracker.db"
    init_db(db_path)
    return db_path


@pytest.fixture
def day_service(temp_db):
    from daytracker.services import DayService

    return DayService(temp_db)


@pytest.fixture
def history_service(temp_db):
    from daytracker.services import HistoryService

    return HistoryService(temp_db)


@pytest.fixture
def sample_slots():
    """A short day in wire format."""
    return [
        {"startTime": "9:00 AM", "endTime": "9:30 AM", "activity": "write report", "category": "Productive"},
        {"startTime": "9:30 AM", "endTime": "10:00 AM", "activity": "", "category": "Waste"},
        {"startTime": "10:00 AM", "endTime": "10:30 AM", "activity": "social media", "category": "Waste"},
        {"startTime": "10:30 AM", "endTime": "11:00 AM", "activity": "coffee", "category": "Neutral"},
    ]
