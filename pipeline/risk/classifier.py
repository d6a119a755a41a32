"""Distance-threshold wildfire risk classification."""

from typing import Dict, Sequence, Tuple

from ..models import Coordinate, HotspotRecord, RiskAssessment, RiskTier
from ..prep.geodesy import haversine_miles
from ..utils import setup_logger

logger = setup_logger(__name__)

NEARBY_RADIUS_MILES = 100.0
CLOSE_RADIUS_MILES = 50.0

# Inclusive upper bounds on the nearest hotspot, most severe first
TIER_THRESHOLDS: Tuple[Tuple[float, RiskTier], ...] = (
    (10.0, RiskTier.EXTREME),
    (25.0, RiskTier.VERY_HIGH),
    (50.0, RiskTier.HIGH),
    (100.0, RiskTier.MODERATE),
)

NO_ACTIVITY_RECOMMENDATIONS: Tuple[str, ...] = (
    "No active wildfires detected in your area",
    "Continue monitoring local fire conditions",
    "Maintain defensible space around your property",
    "Keep emergency supplies ready",
)

RECOMMENDATIONS: Dict[RiskTier, Tuple[str, ...]] = {
    RiskTier.EXTREME: (
        "⚠️ IMMEDIATE THREAT - Active fire within 10 miles",
        "Evacuate immediately if ordered by authorities",
        "Have go-bag packed and ready",
        "Monitor emergency alerts continuously",
        "Keep phone charged and gas tank full",
    ),
    RiskTier.VERY_HIGH: (
        "Active fire within 25 miles - Be prepared to evacuate",
        "Pack essential items and important documents",
        "Identify evacuation routes",
        "Stay tuned to local emergency broadcasts",
        "Prepare pets and vehicles for quick departure",
    ),
    RiskTier.HIGH: (
        "Active fire within 50 miles - Monitor closely",
        "Review your evacuation plan",
        "Gather important documents",
        "Check air quality regularly",
        "Stay informed through local news",
    ),
    RiskTier.MODERATE: (
        "Active fires detected within 100 miles",
        "Stay aware of changing conditions",
        "Review emergency preparedness plans",
        "Ensure smoke masks are available",
        "Monitor wind direction and speed",
    ),
    RiskTier.LOW: (
        "Distant fires detected - Low immediate risk",
        "Maintain awareness of fire season",
        "Keep defensible space maintained",
        "Update emergency contact list",
    ),
    RiskTier.VERY_LOW: (
        "No nearby active fires detected",
        "Continue routine fire preparedness",
        "Maintain defensible space",
        "Keep emergency supplies current",
    ),
}


def select_tier(nearest_miles: float, nearby_count: int) -> RiskTier:
    """
    Pick the tier for a nearest-hotspot distance.

    Thresholds are inclusive, so a hotspot at exactly 50 miles is High.
    Beyond 100 miles the tier falls to Low only while something is still
    counted as nearby.
    """
    for limit, tier in TIER_THRESHOLDS:
        if nearest_miles <= limit:
            return tier
    if nearby_count > 0:
        return RiskTier.LOW
    return RiskTier.VERY_LOW


def classify_risk(records: Sequence[HotspotRecord], origin: Coordinate) -> RiskAssessment:
    """
    Classify wildfire risk at a point from nearby hotspot detections.

    Args:
        records: Parsed hotspots from a single fetch
        origin: Point being assessed

    Returns:
        RiskAssessment with tier, nearest distance, count within
        100 miles and the tier's recommendations
    """
    if not records:
        return RiskAssessment(
            tier=RiskTier.VERY_LOW,
            nearest_distance_miles=None,
            nearby_count=0,
            recommendations=NO_ACTIVITY_RECOMMENDATIONS
        )

    nearest = float('inf')
    within_close = 0
    within_nearby = 0

    for record in records:
        distance = haversine_miles(origin, record.location)
        nearest = min(nearest, distance)
        if distance <= CLOSE_RADIUS_MILES:
            within_close += 1
        if distance <= NEARBY_RADIUS_MILES:
            within_nearby += 1

    tier = select_tier(nearest, within_nearby)
    logger.info(
        f"Classified {len(records)} hotspots: tier={tier.label}, nearest={nearest:.1f}mi, "
        f"within {CLOSE_RADIUS_MILES:.0f}mi={within_close}, within {NEARBY_RADIUS_MILES:.0f}mi={within_nearby}"
    )

    return RiskAssessment(
        tier=tier,
        nearest_distance_miles=nearest if nearest != float('inf') else None,
        nearby_count=within_nearby,
        recommendations=RECOMMENDATIONS[tier]
    )
