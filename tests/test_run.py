"""Tests for the command line entry point."""

import pandas as pd
from click.testing import CliRunner

from pipeline import assess as assess_module
from pipeline.ingest import FeedNetworkError
from pipeline.models import Coordinate
from pipeline.prep import parse_hotspot_csv
from pipeline.run import create_mock_firms_csv, main


def test_mock_feed_matches_viirs_layout():
    origin = Coordinate(latitude=38.5, longitude=-121.5)
    text = create_mock_firms_csv(origin, n_hotspots=5, seed=1)
    header = text.splitlines()[0].split(",")
    assert header[:2] == ["latitude", "longitude"]
    assert header[2] == "bright_ti4"
    assert header[5] == "acq_date"
    assert header[8] == "confidence"

    records = parse_hotspot_csv(text)
    assert len(records) == 5
    assert all(r.brightness is not None for r in records)
    assert all(r.confidence in ("l", "n", "h") for r in records)


def test_mock_feed_is_reproducible():
    origin = Coordinate(latitude=0, longitude=0)
    assert create_mock_firms_csv(origin, seed=7) == create_mock_firms_csv(origin, seed=7)


def test_cli_mock_run(tmp_path):
    runner = CliRunner()
    result = runner.invoke(main, [
        "--lat", "38.5", "--lon", "-121.5", "--label", "Sacramento", "--mock",
        "--config", str(tmp_path / "missing.yml"), "--save-dir", str(tmp_path / "out")
    ])
    assert result.exit_code == 0, result.output
    assert "Location: Sacramento" in result.output
    assert "Recommendations:" in result.output

    saved = list((tmp_path / "out").glob("firms_hotspots_*.csv"))
    assert len(saved) == 1
    assert len(pd.read_csv(saved[0])) == 12
    assert (tmp_path / "out" / ".checksums").exists()


def test_cli_requires_api_key_without_mock(monkeypatch, tmp_path):
    monkeypatch.delenv("FIRMS_API_KEY", raising=False)
    result = CliRunner().invoke(main, ["--lat", "1", "--lon", "1",
                                       "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code != 0
    assert "FIRMS_API_KEY" in result.output


def test_cli_feed_error_exits_with_message(monkeypatch, tmp_path):
    def failing_fetch(origin, api_key, **kwargs):
        raise FeedNetworkError("Failed to fetch data: connection refused")

    monkeypatch.setenv("FIRMS_API_KEY", "KEY")
    monkeypatch.setattr(assess_module, "fetch_firms_hotspots", failing_fetch)
    result = CliRunner().invoke(main, ["--lat", "1", "--lon", "1",
                                       "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code == 1
    assert "connection refused" in result.output


def test_cli_rejects_out_of_range(tmp_path):
    result = CliRunner().invoke(main, ["--lat", "95", "--lon", "1", "--mock",
                                       "--config", str(tmp_path / "missing.yml")])
    assert result.exit_code != 0
