"""
Database module for SQLite operations.
Handles connection management and persistence of day records.
"""

import json
import sqlite3
import shutil
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..config import DB_PATH, BACKUP_DIR
from ..exceptions import StorageUnavailable
from ..logger import setup_logger
from ..models import DayRecord, TimeSlot

logger = setup_logger(__name__)


@contextmanager
def get_connection(db_path: Optional[Path] = None):
    """
    Context manager for database connections.

    Any sqlite3 error raised while opening or using the connection is
    re-raised as StorageUnavailable.
    """
    path = Path(db_path or DB_PATH)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(path)
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Cannot open database {path}: {e}")
        raise StorageUnavailable(f"Cannot open database {path}: {e}") from e

    conn.row_factory = sqlite3.Row
    try:
        yield conn
    except sqlite3.Error as e:
        logger.error(f"Database error on {path.name}: {e}")
        raise StorageUnavailable(str(e)) from e
    finally:
        conn.close()


def init_db(db_path: Optional[Path] = None):
    """Initialize the database with the day_records table."""
    with get_connection(db_path) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS day_records (
                date TEXT PRIMARY KEY,
                time_slots TEXT NOT NULL DEFAULT '[]',
                created_at TEXT DEFAULT CURRENT_TIMESTAMP,
                updated_at TEXT DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """SQLite CURRENT_TIMESTAMP is UTC without an offset."""
    if not value:
        return None
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def _row_to_record(row: sqlite3.Row) -> DayRecord:
    """Convert a day_records row to a DayRecord."""
    return DayRecord(
        date=row['date'],
        time_slots=[TimeSlot.from_dict(slot) for slot in json.loads(row['time_slots'])],
        created_at=_parse_timestamp(row['created_at']),
        updated_at=_parse_timestamp(row['updated_at']),
    )


def get_day_record(date: str, db_path: Optional[Path] = None) -> Optional[DayRecord]:
    """
    Fetch the stored record for a date.

    Args:
        date: YYYY-MM-DD date string

    Returns:
        The DayRecord, or None if nothing was saved for that date
    """
    with get_connection(db_path) as conn:
        row = conn.execute(
            "SELECT * FROM day_records WHERE date = ?", (date,)
        ).fetchone()
    return _row_to_record(row) if row else None


def get_day_records(start_date: str, end_date: str, db_path: Optional[Path] = None) -> dict[str, DayRecord]:
    """
    Fetch all stored records with start_date <= date <= end_date.

    YYYY-MM-DD strings sort chronologically, so a text range is a date range.

    Returns:
        Mapping of date string to DayRecord
    """
    with get_connection(db_path) as conn:
        rows = conn.execute("""
            SELECT * FROM day_records
            WHERE date BETWEEN ? AND ?
            ORDER BY date ASC
        """, (start_date, end_date)).fetchall()
    return {row['date']: _row_to_record(row) for row in rows}


def upsert_day_record(date: str, time_slots: list[TimeSlot], db_path: Optional[Path] = None) -> DayRecord:
    """
    Insert the record for a date, or wholly replace its slots if it exists.

    The write is a single INSERT ... ON CONFLICT statement, so concurrent
    savers of the same date never interleave a read with a write. The last
    writer wins.

    Args:
        date: YYYY-MM-DD date string
        time_slots: Complete slot list for the day

    Returns:
        The stored DayRecord including timestamps
    """
    payload = json.dumps([slot.to_dict() for slot in time_slots])

    with get_connection(db_path) as conn:
        conn.execute("""
            INSERT INTO day_records (date, time_slots)
            VALUES (?, ?)
            ON CONFLICT(date) DO UPDATE SET
                time_slots = excluded.time_slots,
                updated_at = CURRENT_TIMESTAMP
        """, (date, payload))
        row = conn.execute(
            "SELECT * FROM day_records WHERE date = ?", (date,)
        ).fetchone()
        conn.commit()

    logger.info(f"Saved {len(time_slots)} slot(s) for {date}")
    return _row_to_record(row)


def list_dates(db_path: Optional[Path] = None) -> list[str]:
    """Get all dates with a stored record, oldest first."""
    with get_connection(db_path) as conn:
        rows = conn.execute("SELECT date FROM day_records ORDER BY date ASC").fetchall()
    return [row['date'] for row in rows]


def get_record_count(db_path: Optional[Path] = None) -> int:
    """Get the total number of stored day records."""
    with get_connection(db_path) as conn:
        cursor = conn.execute("SELECT COUNT(*) FROM day_records")
        return cursor.fetchone()[0]


def backup_database(db_path: Optional[Path] = None, backup_dir: Optional[Path] = None) -> str:
    """
    Create a timestamped copy of the database file.

    Returns:
        Path to the backup file
    """
    source = Path(db_path or DB_PATH)
    target_dir = Path(backup_dir or BACKUP_DIR)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = target_dir / f"{source.stem}_backup_{timestamp}.db"

        shutil.copy2(source, backup_path)

        logger.info(f"Database backup created: {backup_path.name}")
        return str(backup_path)
    except OSError as e:
        logger.error(f"Failed to create backup: {e}")
        raise StorageUnavailable(f"Failed to create backup: {e}") from e
