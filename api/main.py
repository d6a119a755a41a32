"""Wildfire Guardian FastAPI main application."""

from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from pipeline.assess import assess_location
from pipeline.ingest import FeedNetworkError
from pipeline.models import Coordinate, EvacuationStatus
from pipeline.utils import setup_logger

from .contracts import (
    HealthResponse, RiskReport, Evacuation, EvacuationStatusResponse
)
from .utils import (
    get_config, get_api_key, get_caveats, get_attribution, utc_now_iso
)

load_dotenv()

logger = setup_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Wildfire Guardian API",
    description="Location-specific wildfire risk from NASA FIRMS satellite hotspots",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _require_api_key() -> str:
    api_key = get_api_key()
    if not api_key:
        raise HTTPException(
            status_code=503,
            detail={"code": "feed_not_configured", "message": "FIRMS_API_KEY is not set"}
        )
    return api_key


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Wildfire Guardian API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns system status, timestamp and whether a feed key is present.
    """
    return HealthResponse(
        status="healthy",
        timestamp=utc_now_iso(),
        feed_configured=bool(get_api_key())
    )


@app.get("/risk", response_model=RiskReport, tags=["Risk"])
def get_risk(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
    label: Optional[str] = Query(None, description="Display name for the location")
):
    """
    Assess wildfire risk around a coordinate.

    Query Parameters:
    - lat, lon: Location to assess
    - label: Optional display name, echoed back

    A failed feed fetch returns 502 with the underlying cause.
    """
    api_key = _require_api_key()
    origin = Coordinate(latitude=lat, longitude=lon)

    try:
        report = assess_location(origin, label or f"{lat:.4f}, {lon:.4f}", api_key, get_config())
    except FeedNetworkError as e:
        raise HTTPException(
            status_code=502,
            detail={"code": "feed_unavailable", "message": str(e)}
        )

    return RiskReport.from_report(
        report,
        caveats=get_caveats(),
        attribution=get_attribution(),
        generated_at=utc_now_iso()
    )


@app.get("/evacuation-status", response_model=EvacuationStatusResponse, tags=["Risk"])
def get_evacuation_status(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude")
):
    """
    Get the simplified evacuation status for a coordinate.

    Feed failures are reported as status "unknown" with an error message.
    """
    api_key = _require_api_key()
    origin = Coordinate(latitude=lat, longitude=lon)

    try:
        report = assess_location(origin, "", api_key, get_config())
    except FeedNetworkError as e:
        logger.warning(f"Evacuation status unavailable: {e}")
        return EvacuationStatusResponse(
            evacuation=Evacuation.from_status(EvacuationStatus.UNKNOWN),
            error=str(e),
            generated_at=utc_now_iso()
        )

    return EvacuationStatusResponse(
        evacuation=Evacuation.from_status(report.evacuation_status),
        generated_at=utc_now_iso()
    )


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
