"""FastAPI application."""

from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, Field

from floodwatch import __version__
from floodwatch.core.errors import FloodwatchError
from floodwatch.core.snapshot import SnapshotBuilder
from floodwatch.utils.config import settings
from floodwatch.utils.constants import DISTRICT_COORDINATES

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

app = FastAPI(
    title="Floodwatch API",
    description="Normalized DMC flood risk snapshots per district",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class FloodDataRequest(BaseModel):
    startDate: Optional[str] = Field(None, pattern=DATE_PATTERN)
    endDate: Optional[str] = Field(None, pattern=DATE_PATTERN)
    includeHistory: Optional[bool] = None


def get_builder() -> SnapshotBuilder:
    builder = getattr(app.state, "builder", None)
    if builder is None:
        builder = SnapshotBuilder()
        app.state.builder = builder
    return builder


@app.exception_handler(FloodwatchError)
async def floodwatch_error_handler(request: Request, exc: FloodwatchError):
    logger.error(f"Error fetching DMC data: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query"))
        problems.append(f"{field}: {err.get('msg')}" if field else err.get("msg", ""))
    message = "Invalid request: " + "; ".join(problems)
    logger.warning(message)
    return JSONResponse(status_code=422, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc) or "Unknown error occurred"})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.utcnow().isoformat(),
    }


@app.post("/api/v1/flood-data")
def flood_data(request: Optional[FloodDataRequest] = None):
    """Build a flood snapshot for the requested date window."""
    request = request or FloodDataRequest()
    snapshot = get_builder().ingest(
        start_date=request.startDate,
        end_date=request.endDate,
        include_history=request.includeHistory,
    )
    return snapshot.to_dict()


@app.get("/api/v1/flood-data")
def flood_data_get(
    startDate: Optional[str] = Query(None, pattern=DATE_PATTERN),
    endDate: Optional[str] = Query(None, pattern=DATE_PATTERN),
    includeHistory: Optional[bool] = Query(None),
):
    """Snapshot via GET (e.g. ?startDate=2025-12-17&endDate=2025-12-18)."""
    return flood_data(FloodDataRequest(
        startDate=startDate,
        endDate=endDate,
        includeHistory=includeHistory,
    ))


@app.get("/api/v1/districts")
async def districts():
    """Reference district table."""
    return {
        "count": len(DISTRICT_COORDINATES),
        "districts": [
            {"name": name, "coordinates": list(coords)}
            for name, coords in DISTRICT_COORDINATES.items()
        ],
    }
