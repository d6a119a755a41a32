"""Great-circle distance on a spherical Earth."""

import math

from ..models import Coordinate

EARTH_RADIUS_MILES = 3959.0


def haversine_miles(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two points in statute miles."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push h just past 1 for near-antipodal points
    h = min(h, 1.0)
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
