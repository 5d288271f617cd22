"""
Logging for daytracker.
Every module logs to one shared rotating file in LOG_DIR and to stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from .config import LOG_DIR, LOG_LEVEL, LOG_FORMAT

LOG_FILE = LOG_DIR / "daytracker.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3

_handlers: list[logging.Handler] = []


def _shared_handlers() -> list[logging.Handler]:
    """File (DEBUG) and stdout (INFO) handlers, created once per process."""
    if not _handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)

        for handler in (file_handler, console_handler):
            handler.setFormatter(formatter)
            _handlers.append(handler)
    return _handlers


def setup_logger(name: str) -> logging.Logger:
    """
    Get a module logger writing to the shared day tracker handlers.

    Calling it again for the same name does not add duplicate handlers.

    Args:
        name: Module name (typically __name__)
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    logger.propagate = False

    for handler in _shared_handlers():
        if handler not in logger.handlers:
            logger.addHandler(handler)

    return logger


def log_summary_stats(summaries, logger: logging.Logger, name: str = "History"):
    """Log how many days of a history window have entries."""
    if not summaries:
        logger.warning(f"{name}: no days")
        return

    filled_days = sum(1 for s in summaries if s.filled_slot_count > 0)
    logger.info(
        f"{name}: {len(summaries)} days, "
        f"{filled_days} with entries, "
        f"date range: {summaries[0].date} to {summaries[-1].date}"
    )
