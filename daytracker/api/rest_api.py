"""
REST API for the day tracker.
Serves day records, history summaries and period totals over HTTP.
"""

from contextlib import asynccontextmanager
from datetime import date, datetime
from json import JSONDecodeError
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from .. import __version__
from ..analytics import days_into_month, month_totals, trailing_window_totals
from ..config import DEFAULT_HISTORY_DAYS, MAX_HISTORY_DAYS
from ..exceptions import InvalidInput, StorageUnavailable
from ..logger import setup_logger
from ..services import DayService, HistoryService
from ..slots import generate_slots

logger = setup_logger(__name__)


# ============================================================================
# Models
# ============================================================================

class TimeSlotResponse(BaseModel):
    """One 30-minute slot."""
    startTime: str
    endTime: str
    activity: str
    category: str

class DayRecordResponse(BaseModel):
    """Slots saved for one date."""
    date: str
    timeSlots: List[TimeSlotResponse]
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

class DaySummaryResponse(BaseModel):
    """Minutes per category for one date."""
    date: str
    productiveMinutes: int
    wasteMinutes: int
    neutralMinutes: int
    filledSlotCount: int

class CategoryTotalsResponse(BaseModel):
    productive: int
    waste: int
    neutral: int

class PeriodTotalsResponse(BaseModel):
    """Weekly and monthly totals reduced from one history fetch."""
    endDate: str
    week: CategoryTotalsResponse
    month: CategoryTotalsResponse

class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    timestamp: datetime


# ============================================================================
# Dependencies
# ============================================================================

def get_day_service(request: Request) -> DayService:
    return request.app.state.day_service


def get_history_service(request: Request) -> HistoryService:
    return request.app.state.history_service


# ============================================================================
# FastAPI App
# ============================================================================

def create_app(
    day_service: Optional[DayService] = None,
    history_service: Optional[HistoryService] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Storage is initialized at startup; if the database is unreachable the
    app refuses to start.

    Args:
        day_service: DayService to use (default: one on the configured database)
        history_service: HistoryService to use (default: same database as day_service)
    """
    day_service = day_service or DayService()
    history_service = history_service or HistoryService(day_service.db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            app.state.day_service.init_storage()
        except StorageUnavailable:
            logger.critical("Database unavailable, refusing to start")
            raise
        yield

    app = FastAPI(
        title="Day Tracker API",
        description="Track how each 30-minute slot of the day was spent",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.state.day_service = day_service
    app.state.history_service = history_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(StorageUnavailable)
    async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"message": "Server error"})

    # ------------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------------

    @app.get("/", response_class=PlainTextResponse, tags=["System"])
    def root():
        return "Welcome to the Day Tracker API!"

    @app.get("/api/health", response_model=HealthResponse, tags=["System"])
    def health_check():
        """Check if API is running."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(),
        )

    @app.get("/api/slots/template", response_model=List[TimeSlotResponse], tags=["Slots"])
    def slot_template():
        """The empty 48-slot template for a new day."""
        return [slot.to_dict() for slot in generate_slots()]

    # History and totals are registered before /{date} so they are not
    # captured as dates.
    @app.get("/api/activities/history", response_model=List[DaySummaryResponse], tags=["History"])
    def get_history(
        days: int = Query(DEFAULT_HISTORY_DAYS, ge=1, le=MAX_HISTORY_DAYS, description="Window size in days"),
        end_date: Optional[date] = Query(None, description="Last day of the window (default today)"),
        service: HistoryService = Depends(get_history_service),
    ):
        """Per-day summaries for the window, oldest first, with no gaps."""
        summaries = service.summarize_range(end_date=end_date, window_days=days)
        return [s.to_dict() for s in summaries]

    @app.get("/api/activities/totals", response_model=PeriodTotalsResponse, tags=["History"])
    def get_totals(
        days: int = Query(DEFAULT_HISTORY_DAYS, ge=1, le=MAX_HISTORY_DAYS, description="Trailing window in days"),
        end_date: Optional[date] = Query(None, description="Reference day (default today)"),
        service: HistoryService = Depends(get_history_service),
    ):
        """Trailing-window and calendar-month totals ending at end_date."""
        end = end_date or date.today()
        window = max(days, days_into_month(end))
        history = service.summarize_range(end_date=end, window_days=window)
        return {
            "endDate": end.isoformat(),
            "week": trailing_window_totals(history, days).to_dict(),
            "month": month_totals(history, today=end).to_dict(),
        }

    @app.get(
        "/api/activities/{day}",
        response_model=DayRecordResponse,
        response_model_exclude_none=True,
        tags=["Activities"],
    )
    def get_day(day: str, service: DayService = Depends(get_day_service)):
        """Slots saved for a date; an empty list when nothing was saved."""
        return service.get_day(day).to_dict()

    @app.post(
        "/api/activities",
        response_model=DayRecordResponse,
        response_model_exclude_none=True,
        tags=["Activities"],
    )
    async def save_day(request: Request, service: DayService = Depends(get_day_service)):
        """
        Create or replace the slots of a date.

        Body: {"date": "YYYY-MM-DD", "timeSlots": [...]}
        """
        try:
            payload = await request.json()
        except (JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInput("Invalid request body") from e
        if not isinstance(payload, dict):
            raise InvalidInput("Invalid request body")

        record = await run_in_threadpool(service.save_day, payload.get("date"), payload.get("timeSlots"))
        return record.to_dict()

    return app
