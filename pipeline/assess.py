"""Run one hotspot fetch through parsing, classification and status derivation."""

import threading
from typing import Callable, Dict, List, Optional, Tuple

import requests
from pydantic import BaseModel, ConfigDict

from .ingest.firms import (
    DEFAULT_PRODUCT, DEFAULT_RADIUS_DEGREES, FIRMS_AREA_CSV_URL, fetch_firms_hotspots
)
from .models import (
    Coordinate, EvacuationStatus, FeedStatus, HotspotRecord, LocationAuthorization,
    RiskAssessment
)
from .prep.parse_hotspots import inspect_hotspot_csv
from .risk.classifier import classify_risk
from .risk.evacuation import derive_evacuation_status
from .utils import setup_logger

logger = setup_logger(__name__)


class LocationReport(BaseModel):
    """Everything one assessment produced for a location."""
    model_config = ConfigDict(frozen=True)

    label: str
    origin: Optional[Coordinate] = None
    hotspots: Tuple[HotspotRecord, ...] = ()
    feed_status: Optional[FeedStatus] = None
    assessment: Optional[RiskAssessment] = None
    evacuation_status: EvacuationStatus = EvacuationStatus.UNKNOWN


def feed_options(config: Optional[dict]) -> dict:
    """Pull fetch keyword arguments out of the `feed` config section."""
    feed = (config or {}).get('feed', {}) or {}
    return {
        'base_url': feed.get('base_url', FIRMS_AREA_CSV_URL),
        'product': feed.get('product', DEFAULT_PRODUCT),
        'radius_degrees': int(feed.get('radius_degrees', DEFAULT_RADIUS_DEGREES)),
        'timeout': feed.get('timeout_seconds'),
    }


def assess_feed_text(raw_text: str, origin: Coordinate, label: str = "") -> LocationReport:
    """Parse and classify feed text that has already been fetched."""
    parsed = inspect_hotspot_csv(raw_text)
    assessment = classify_risk(parsed.records, origin)
    status = derive_evacuation_status(assessment)

    if parsed.status is FeedStatus.UNPARSEABLE:
        logger.warning(f"Assessment for '{label}' is based on an unparseable feed")

    return LocationReport(
        label=label,
        origin=origin,
        hotspots=tuple(parsed.records),
        feed_status=parsed.status,
        assessment=assessment,
        evacuation_status=status
    )


def assess_location(
    origin: Coordinate,
    label: str,
    api_key: str,
    config: Optional[dict] = None,
    session: Optional[requests.Session] = None
) -> LocationReport:
    """
    Fetch hotspots around a point and assess wildfire risk there.

    Args:
        origin: Point being assessed
        label: Display name for the location, passed through untouched
        api_key: FIRMS map key
        config: Loaded configuration with an optional `feed` section
        session: Optional requests session for the fetch

    Returns:
        LocationReport for the location

    Raises:
        FeedNetworkError: If the feed could not be fetched; nothing is
            classified in that case
    """
    raw_text = fetch_firms_hotspots(origin, api_key, session=session, **feed_options(config))
    return assess_feed_text(raw_text, origin, label)


def assess_for_location_fix(
    origin: Optional[Coordinate],
    authorization: LocationAuthorization,
    label: str,
    api_key: str,
    config: Optional[dict] = None,
    session: Optional[requests.Session] = None
) -> LocationReport:
    """Assess only once the location provider has produced a usable fix."""
    if origin is None or not authorization.permits_location:
        logger.info(f"No usable location (authorization={authorization.value}); status unknown")
        return LocationReport(label=label, origin=origin)
    return assess_location(origin, label, api_key, config, session)


Subscriber = Callable[[LocationReport], None]


class AssessmentTracker:
    """
    Keeps the latest assessment and tells subscribers when it changes.

    Each request takes a sequence number from `begin()`. A result
    published with a number older than the newest one already accepted
    is discarded, so overlapping fetches settle on the latest request.
    """

    def __init__(self):
        self._lock = threading.Lock()
        # Held across accept and delivery so notifications arrive in sequence order
        self._notify_lock = threading.RLock()
        self._issued = 0
        self._accepted = 0
        self._current: Optional[LocationReport] = None
        self._subscribers: Dict[int, Subscriber] = {}
        self._next_token = 0

    @property
    def current(self) -> Optional[LocationReport]:
        with self._lock:
            return self._current

    @property
    def evacuation_status(self) -> EvacuationStatus:
        report = self.current
        return report.evacuation_status if report else EvacuationStatus.UNKNOWN

    def begin(self) -> int:
        """Reserve the next request sequence number."""
        with self._lock:
            self._issued += 1
            return self._issued

    def publish(self, sequence: int, report: LocationReport) -> bool:
        """
        Offer a finished report.

        Returns:
            True if the report became current, False if it was stale
        """
        with self._notify_lock:
            with self._lock:
                if sequence <= self._accepted:
                    logger.debug(f"Discarding stale assessment #{sequence} (latest #{self._accepted})")
                    return False
                self._accepted = sequence
                self._current = report
                subscribers: List[Subscriber] = list(self._subscribers.values())

            for callback in subscribers:
                callback(report)
        return True

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register for report changes; returns a function that unsubscribes."""
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._subscribers[token] = callback

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(token, None)

        return unsubscribe
