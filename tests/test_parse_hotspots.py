"""Tests for FIRMS CSV parsing."""

from pipeline.models import FeedStatus
from pipeline.prep.parse_hotspots import (
    ParseSkip, inspect_hotspot_csv, locate_columns, parse_hotspot_csv,
    parse_line, parse_number, hotspots_to_frame
)

from conftest import VIIRS_HEADER, viirs_row


def coords(records):
    return [(r.location.latitude, r.location.longitude) for r in records]


def test_malformed_row_is_dropped():
    records = parse_hotspot_csv("latitude,longitude\n1,2\nabc,2\n3,4")
    assert coords(records) == [(1.0, 2.0), (3.0, 4.0)]


def test_missing_longitude_column_yields_nothing():
    text = "latitude,lon,bright_ti4\n1,2,300\n3,4,310\n"
    assert parse_hotspot_csv(text) == []
    assert inspect_hotspot_csv(text).status is FeedStatus.UNPARSEABLE


def test_header_names_must_match_exactly():
    assert parse_hotspot_csv("Latitude,Longitude\n1,2\n") == []
    assert parse_hotspot_csv(" latitude,longitude\n1,2\n") == []


def test_empty_and_header_only_feeds():
    assert parse_hotspot_csv("") == []
    assert inspect_hotspot_csv("").status is FeedStatus.EMPTY
    parsed = inspect_hotspot_csv(VIIRS_HEADER + "\n")
    assert parsed.records == []
    assert parsed.status is FeedStatus.EMPTY


def test_full_viirs_row_fields():
    text = "\n".join([VIIRS_HEADER, viirs_row(34.1, -118.3, "331.2", "2024-10-15", "h")])
    [record] = parse_hotspot_csv(text)
    assert record.location.latitude == 34.1
    assert record.location.longitude == -118.3
    assert record.brightness == 331.2
    assert record.acquired_date == "2024-10-15"
    assert record.confidence == "h"


def test_short_row_leaves_positional_fields_absent():
    [record] = parse_hotspot_csv("latitude,longitude\n1.5,2.5\n")
    assert record.brightness is None
    assert record.acquired_date is None
    assert record.confidence is None


def test_brightness_is_positional_not_named():
    text = "brightness,latitude,longitude\n999,10,20\n"
    [record] = parse_hotspot_csv(text)
    assert record.location.latitude == 10.0
    # column 2 is longitude here, and is still read as brightness
    assert record.brightness == 20.0


def test_non_numeric_brightness_is_absent():
    text = "latitude,longitude,bright_ti4\n1,2,hot\n"
    [record] = parse_hotspot_csv(text)
    assert record.brightness is None


def test_crlf_line_endings():
    records = parse_hotspot_csv("latitude,longitude\r\n1,2\r\n3,4\r\n")
    assert coords(records) == [(1.0, 2.0), (3.0, 4.0)]


def test_order_and_duplicates_preserved():
    records = parse_hotspot_csv("latitude,longitude\n5,5\n1,1\n5,5\n")
    assert coords(records) == [(5.0, 5.0), (1.0, 1.0), (5.0, 5.0)]


def test_row_too_short_for_coordinate_columns():
    columns = locate_columns("acq_date,latitude,longitude")
    result = parse_line("2024-10-15,34.1", 3, columns)
    assert isinstance(result, ParseSkip)
    assert result.line_number == 3


def test_skipped_lines_are_counted():
    parsed = inspect_hotspot_csv("latitude,longitude\n1,2\nx,y\n\n3,4\n")
    assert len(parsed.records) == 2
    assert parsed.skipped == 2
    assert parsed.status is FeedStatus.OK


def test_parse_number_is_strict():
    assert parse_number("34.05") == 34.05
    assert parse_number("-118") == -118.0
    assert parse_number("1e3") == 1000.0
    assert parse_number(".5") == 0.5
    for text in ["", " 1", "1 ", "nan", "inf", "1_000", "abc", "1,2", "1e999", "-1e999"]:
        assert parse_number(text) is None


def test_hotspots_to_frame():
    records = parse_hotspot_csv("\n".join([VIIRS_HEADER, viirs_row(1, 2), viirs_row(3, 4)]))
    df = hotspots_to_frame(records)
    assert list(df.columns) == ['latitude', 'longitude', 'brightness', 'acq_date', 'confidence']
    assert len(df) == 2
    assert df['latitude'].tolist() == [1.0, 3.0]


def test_hotspots_to_frame_empty():
    df = hotspots_to_frame([])
    assert df.empty
    assert 'latitude' in df.columns


def test_overflowing_coordinate_row_is_dropped():
    parsed = inspect_hotspot_csv("latitude,longitude\n34.0,-118.0\n1e999,2\n34.1,-118.3\n")
    assert coords(parsed.records) == [(34.0, -118.0), (34.1, -118.3)]
    assert parsed.skipped == 1


def test_overflowing_brightness_is_absent():
    [record] = parse_hotspot_csv("latitude,longitude,bright_ti4\n1,2,1e999\n")
    assert record.brightness is None
