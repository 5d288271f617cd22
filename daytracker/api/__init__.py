"""
API package - Data access layer (database) and HTTP interface.
"""

from .database import (
    get_connection,
    init_db,
    get_day_record,
    get_day_records,
    upsert_day_record,
    list_dates,
    get_record_count,
    backup_database,
)

__all__ = [
    'get_connection',
    'init_db',
    'get_day_record',
    'get_day_records',
    'upsert_day_record',
    'list_dates',
    'get_record_count',
    'backup_database',
]
