"""FIRMS (Fire Information for Resource Management System) hotspot feed client."""

from typing import Optional

import requests

from ..models import Coordinate
from ..utils import setup_logger

logger = setup_logger(__name__)

FIRMS_AREA_CSV_URL = "https://firms.modaps.eosdis.nasa.gov/api/area/csv"
DEFAULT_PRODUCT = "VIIRS_SNPP_NRT"
DEFAULT_RADIUS_DEGREES = 1
WORLD_SCOPE = "world"


class FeedNetworkError(Exception):
    """The hotspot feed could not be fetched or decoded."""


def build_feed_url(
    origin: Coordinate,
    radius_degrees: int,
    api_key: str,
    product: str = DEFAULT_PRODUCT,
    base_url: str = FIRMS_AREA_CSV_URL
) -> str:
    """
    Build the FIRMS area query for a radius around a point.

    Args:
        origin: Centre of the query
        radius_degrees: Search radius in whole degrees
        api_key: FIRMS map key
        product: Detection product (VIIRS_SNPP_NRT, MODIS_NRT, etc.)
        base_url: Area CSV endpoint

    Returns:
        Fully-qualified request URL
    """
    return (
        f"{base_url.rstrip('/')}/"
        f"{api_key}/{product}/{WORLD_SCOPE}/{radius_degrees}/"
        f"{origin.latitude},{origin.longitude}"
    )


def fetch_firms_hotspots(
    origin: Coordinate,
    api_key: str,
    radius_degrees: int = DEFAULT_RADIUS_DEGREES,
    product: str = DEFAULT_PRODUCT,
    base_url: str = FIRMS_AREA_CSV_URL,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None
) -> str:
    """
    Fetch raw hotspot CSV text around a point from the FIRMS API.

    A single request is made. Failures are not retried; the caller decides
    whether to ask again.

    Args:
        origin: Centre of the query
        api_key: FIRMS map key
        radius_degrees: Search radius in whole degrees
        product: Detection product
        base_url: Area CSV endpoint
        timeout: Request timeout in seconds, None for the transport default
        session: Optional requests session to issue the call on

    Returns:
        Response body as text

    Raises:
        FeedNetworkError: On connection failure, non-2xx status or an
            undecodable body
    """
    url = build_feed_url(origin, radius_degrees, api_key, product, base_url)
    logger.info(
        f"Fetching FIRMS hotspots: origin=({origin.latitude}, {origin.longitude}), "
        f"radius={radius_degrees}deg, product={product}"
    )

    http = session if session is not None else requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        body = response.content.decode('utf-8')
    except requests.exceptions.RequestException as e:
        message = str(e).replace(api_key, "***") if api_key else str(e)
        logger.error(f"FIRMS request failed: {message}")
        raise FeedNetworkError(f"Failed to fetch data: {message}") from e
    except UnicodeDecodeError as e:
        logger.error(f"FIRMS response was not valid UTF-8: {e}")
        raise FeedNetworkError(f"Failed to decode data: {e}") from e

    logger.info(f"Received {len(response.content)} bytes of hotspot data")
    return body
