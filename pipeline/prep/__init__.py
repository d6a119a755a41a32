"""Data preparation modules for feed parsing and geodesy."""

from .parse_hotspots import (
    FeedSchema, ParseSkip, ParsedFeed, parse_hotspot_csv, inspect_hotspot_csv,
    parse_line, hotspots_to_frame
)
from .geodesy import haversine_miles, EARTH_RADIUS_MILES

__all__ = ['FeedSchema', 'ParseSkip', 'ParsedFeed', 'parse_hotspot_csv',
           'inspect_hotspot_csv', 'parse_line', 'hotspots_to_frame',
           'haversine_miles', 'EARTH_RADIUS_MILES']
