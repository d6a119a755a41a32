"""Value types shared by the risk assessment pipeline."""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """WGS84 point. Ranges are not validated here; callers guard input."""
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class HotspotRecord(BaseModel):
    """One satellite-detected thermal anomaly."""
    model_config = ConfigDict(frozen=True)

    location: Coordinate
    brightness: Optional[float] = None
    acquired_date: Optional[str] = None
    confidence: Optional[str] = None


class RiskTier(Enum):
    """Wildfire risk tiers, declared in ascending severity."""
    VERY_LOW = "Very Low"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"
    EXTREME = "Extreme"

    @property
    def severity(self) -> int:
        return _TIER_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]

    def __lt__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other):
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.severity >= other.severity


_TIER_ORDER = list(RiskTier)

_TIER_COLORS = {
    RiskTier.VERY_LOW: "green",
    RiskTier.LOW: "green",
    RiskTier.MODERATE: "yellow",
    RiskTier.HIGH: "orange",
    RiskTier.VERY_HIGH: "red",
    RiskTier.EXTREME: "purple",
}


class RiskAssessment(BaseModel):
    """Result of classifying one batch of hotspots against an origin."""
    model_config = ConfigDict(frozen=True)

    tier: RiskTier
    nearest_distance_miles: Optional[float] = None
    nearby_count: int = Field(0, ge=0)
    recommendations: Tuple[str, ...] = Field(..., min_length=1)


class EvacuationStatus(Enum):
    """Coarse user-facing signal derived from a risk tier."""
    SAFE = "safe"
    MONITOR = "monitor"
    WARNING = "warning"
    EVACUATE_NOW = "evacuate_now"
    UNKNOWN = "unknown"

    @property
    def title(self) -> str:
        return _STATUS_DISPLAY[self][0]

    @property
    def message(self) -> str:
        return _STATUS_DISPLAY[self][1]

    @property
    def color(self) -> str:
        return _STATUS_DISPLAY[self][2]


_STATUS_DISPLAY = {
    EvacuationStatus.SAFE: ("All Clear", "No active threats in your area", "green"),
    EvacuationStatus.MONITOR: ("Monitor Conditions", "Fire detected nearby - stay alert", "yellow"),
    EvacuationStatus.WARNING: ("Evacuation Warning", "Be ready to evacuate immediately", "orange"),
    EvacuationStatus.EVACUATE_NOW: ("EVACUATE NOW", "Leave the area immediately", "red"),
    EvacuationStatus.UNKNOWN: ("Status Unknown", "Enable location to check status", "gray"),
}


class LocationAuthorization(Enum):
    """Authorization state reported by the device location provider."""
    NOT_DETERMINED = "not_determined"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    AUTHORIZED_ALWAYS = "authorized_always"
    DENIED = "denied"
    RESTRICTED = "restricted"

    @property
    def permits_location(self) -> bool:
        return self in (
            LocationAuthorization.AUTHORIZED_WHEN_IN_USE,
            LocationAuthorization.AUTHORIZED_ALWAYS,
        )


class FeedStatus(Enum):
    """How usable the last hotspot feed body was."""
    OK = "ok"
    EMPTY = "empty"
    UNPARSEABLE = "unparseable"
