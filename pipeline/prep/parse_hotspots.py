"""Parsing of FIRMS area CSV text into hotspot records."""

import math
import re
from typing import Iterable, List, NamedTuple, Optional, Union

import pandas as pd

from ..models import Coordinate, FeedStatus, HotspotRecord
from ..utils import setup_logger

logger = setup_logger(__name__)

# Whole-field decimal or scientific literal; whitespace, nan and inf are rejected
_NUMBER_RE = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


class FeedSchema(NamedTuple):
    """
    Column layout expected from the feed.

    Coordinates are looked up by header name. Brightness, acquisition date
    and confidence are read by fixed position, matching the FIRMS VIIRS
    column order. If the feed ever reorders its non-coordinate columns
    those three fields will be read from the wrong column; this is kept
    for compatibility with existing consumers.
    """
    latitude_column: str = "latitude"
    longitude_column: str = "longitude"
    delimiter: str = ","
    brightness_position: int = 2
    acquired_date_position: int = 5
    confidence_position: int = 8


DEFAULT_SCHEMA = FeedSchema()


class ColumnIndex(NamedTuple):
    latitude: int
    longitude: int


class ParseSkip(NamedTuple):
    """A data line that did not yield a record."""
    line_number: int
    reason: str


class ParsedFeed(NamedTuple):
    records: List[HotspotRecord]
    status: FeedStatus
    skipped: int


def parse_number(text: str) -> Optional[float]:
    """Parse a whole field as a float, or None if it is not numeric."""
    if _NUMBER_RE.fullmatch(text) is None:
        return None
    value = float(text)
    # Literals like 1e999 overflow to inf
    if not math.isfinite(value):
        return None
    return value


def locate_columns(header_line: str, schema: FeedSchema = DEFAULT_SCHEMA) -> Optional[ColumnIndex]:
    """Find coordinate column positions by exact header name."""
    header = header_line.split(schema.delimiter)
    try:
        return ColumnIndex(
            latitude=header.index(schema.latitude_column),
            longitude=header.index(schema.longitude_column)
        )
    except ValueError:
        return None


def parse_line(
    line: str,
    line_number: int,
    columns: ColumnIndex,
    schema: FeedSchema = DEFAULT_SCHEMA
) -> Union[HotspotRecord, ParseSkip]:
    """
    Parse one data line.

    Args:
        line: Raw CSV line without its terminator
        line_number: Zero-based line number in the feed, for diagnostics
        columns: Coordinate positions from the header
        schema: Column layout

    Returns:
        A HotspotRecord, or a ParseSkip describing why the line was dropped
    """
    values = line.split(schema.delimiter)

    if len(values) <= max(columns.latitude, columns.longitude):
        return ParseSkip(line_number, f"expected more than {max(columns)} fields, got {len(values)}")

    lat = parse_number(values[columns.latitude])
    lon = parse_number(values[columns.longitude])
    if lat is None or lon is None:
        return ParseSkip(line_number, "non-numeric coordinate")

    def positional(position: int) -> Optional[str]:
        return values[position] if len(values) > position else None

    brightness_text = positional(schema.brightness_position)

    return HotspotRecord(
        location=Coordinate(latitude=lat, longitude=lon),
        brightness=parse_number(brightness_text) if brightness_text is not None else None,
        acquired_date=positional(schema.acquired_date_position),
        confidence=positional(schema.confidence_position)
    )


def _keep_records(
    results: Iterable[Union[HotspotRecord, ParseSkip]]
) -> tuple:
    records = []
    skipped = 0
    for result in results:
        if isinstance(result, ParseSkip):
            skipped += 1
            logger.debug(f"Dropped line {result.line_number}: {result.reason}")
        else:
            records.append(result)
    return records, skipped


def inspect_hotspot_csv(raw_text: str, schema: FeedSchema = DEFAULT_SCHEMA) -> ParsedFeed:
    """
    Parse feed text and report whether the feed itself was usable.

    A header without both coordinate columns makes the whole feed
    unusable; nothing is salvaged from its rows.
    """
    lines = raw_text.splitlines()

    if not any(line.strip() for line in lines):
        logger.warning("Hotspot feed was empty")
        return ParsedFeed([], FeedStatus.EMPTY, 0)

    columns = locate_columns(lines[0], schema)
    if columns is None:
        logger.warning(
            f"Hotspot feed header lacks '{schema.latitude_column}'/'{schema.longitude_column}' "
            f"columns; treating feed as having no detections"
        )
        return ParsedFeed([], FeedStatus.UNPARSEABLE, 0)

    records, skipped = _keep_records(
        parse_line(line, number, columns, schema)
        for number, line in enumerate(lines[1:], start=1)
    )

    if not records:
        logger.info("No hotspots found in feed")
        return ParsedFeed(records, FeedStatus.EMPTY, skipped)

    logger.info(f"Parsed {len(records)} hotspots ({skipped} lines dropped)")
    return ParsedFeed(records, FeedStatus.OK, skipped)


def parse_hotspot_csv(raw_text: str, schema: FeedSchema = DEFAULT_SCHEMA) -> List[HotspotRecord]:
    """
    Parse FIRMS CSV text into hotspot records in file order.

    Never raises: malformed lines are dropped and an unusable header
    yields an empty list.
    """
    return inspect_hotspot_csv(raw_text, schema).records


def hotspots_to_frame(records: List[HotspotRecord]) -> pd.DataFrame:
    """Flatten hotspot records into a DataFrame for archiving."""
    return pd.DataFrame(
        [
            {
                'latitude': r.location.latitude,
                'longitude': r.location.longitude,
                'brightness': r.brightness,
                'acq_date': r.acquired_date,
                'confidence': r.confidence
            }
            for r in records
        ],
        columns=['latitude', 'longitude', 'brightness', 'acq_date', 'confidence']
    )
