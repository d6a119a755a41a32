"""Data ingestion modules for the FIRMS hotspot feed."""

from .firms import FeedNetworkError, build_feed_url, fetch_firms_hotspots

__all__ = ['FeedNetworkError', 'build_feed_url', 'fetch_firms_hotspots']
