"""Shared fixtures for the risk engine tests."""

import pytest
import requests

from pipeline.models import Coordinate

LOS_ANGELES = Coordinate(latitude=34.0522, longitude=-118.2437)

VIIRS_HEADER = (
    "latitude,longitude,bright_ti4,scan,track,acq_date,acq_time,"
    "satellite,confidence,version,bright_ti5,frp,daynight"
)


def viirs_row(lat, lon, brightness="330.5", date="2024-10-15", confidence="n"):
    return f"{lat},{lon},{brightness},0.39,0.36,{date},1200,N,{confidence},2.0NRT,290.1,5.2,D"


class FakeResponse:
    def __init__(self, body=b"", status_code=200):
        self.content = body if isinstance(body, bytes) else body.encode("utf-8")
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    """Stands in for requests.Session; records calls and replays one outcome."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def la_origin():
    return LOS_ANGELES


@pytest.fixture
def la_feed():
    """One hotspot about 4.6 miles from downtown Los Angeles."""
    return "\n".join([VIIRS_HEADER, viirs_row(34.10, -118.30)]) + "\n"
