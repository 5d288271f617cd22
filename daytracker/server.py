"""
HTTP server entry point.

Run: python -m daytracker
Settings are read from DAYTRACKER_* environment variables or a .env file.
"""

import sys

from dotenv import load_dotenv
load_dotenv()

import uvicorn

from .api.rest_api import create_app
from .config import API_HOST, API_PORT, DB_PATH
from .exceptions import StorageUnavailable
from .logger import setup_logger
from .services import DayService

logger = setup_logger(__name__)


def main() -> int:
    """Check storage, then serve the API until interrupted."""
    service = DayService()
    try:
        service.init_storage()
    except StorageUnavailable as e:
        logger.critical(f"Database {DB_PATH} unavailable: {e}")
        return 1

    logger.info(f"Starting day tracker API on http://{API_HOST}:{API_PORT}")
    uvicorn.run(create_app(day_service=service), host=API_HOST, port=API_PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
