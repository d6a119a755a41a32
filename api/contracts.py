"""Pydantic models for API request/response schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field

from pipeline.assess import LocationReport
from pipeline.models import EvacuationStatus


class Location(BaseModel):
    """Assessed location."""
    label: str = Field(..., description="Display name supplied by the caller")
    lat: float = Field(..., description="Latitude (WGS84)")
    lon: float = Field(..., description="Longitude (WGS84)")


class Hotspot(BaseModel):
    """Single satellite hotspot detection."""
    lat: float
    lon: float
    brightness: Optional[float] = Field(None, description="Brightness temperature (K)")
    acq_date: Optional[str] = Field(None, description="Acquisition date as reported by the feed")
    confidence: Optional[str] = Field(None, description="Detection confidence as reported by the feed")


class Risk(BaseModel):
    """Risk tier and supporting numbers."""
    tier: str = Field(..., description="Very Low | Low | Moderate | High | Very High | Extreme")
    color: str
    nearest_distance_miles: Optional[float] = Field(None, description="Distance to nearest hotspot")
    nearby_count: int = Field(..., description="Hotspots within 100 miles")
    recommendations: List[str]


class Evacuation(BaseModel):
    """Evacuation status with display text."""
    status: str = Field(..., description="safe | monitor | warning | evacuate_now | unknown")
    title: str
    message: str
    color: str

    @classmethod
    def from_status(cls, status: EvacuationStatus) -> "Evacuation":
        return cls(status=status.value, title=status.title, message=status.message, color=status.color)


class RiskReport(BaseModel):
    """Risk assessment response."""
    location: Location
    risk: Risk
    evacuation: Evacuation
    feed_status: str = Field(..., description="ok | empty | unparseable")
    hotspots: List[Hotspot]
    caveats: List[str]
    attribution: List[str]
    generated_at: str

    @classmethod
    def from_report(cls, report: LocationReport, caveats: List[str],
                    attribution: List[str], generated_at: str) -> "RiskReport":
        assessment = report.assessment
        return cls(
            location=Location(label=report.label, lat=report.origin.latitude, lon=report.origin.longitude),
            risk=Risk(
                tier=assessment.tier.label,
                color=assessment.tier.color,
                nearest_distance_miles=assessment.nearest_distance_miles,
                nearby_count=assessment.nearby_count,
                recommendations=list(assessment.recommendations)
            ),
            evacuation=Evacuation.from_status(report.evacuation_status),
            feed_status=report.feed_status.value,
            hotspots=[
                Hotspot(
                    lat=h.location.latitude,
                    lon=h.location.longitude,
                    brightness=h.brightness,
                    acq_date=h.acquired_date,
                    confidence=h.confidence
                )
                for h in report.hotspots
            ],
            caveats=caveats,
            attribution=attribution,
            generated_at=generated_at
        )


class EvacuationStatusResponse(BaseModel):
    """Evacuation status response."""
    evacuation: Evacuation
    error: Optional[str] = Field(None, description="Feed error when the status is unknown")
    generated_at: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    feed_configured: bool
    version: str = "0.1.0"
