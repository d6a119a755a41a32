"""Command line entry point: assess wildfire risk for one location."""

import os
import sys
from pathlib import Path
from typing import Optional

import click
import numpy as np
import pandas as pd
from dotenv import load_dotenv

from pipeline.assess import LocationReport, assess_feed_text, assess_location
from pipeline.ingest import FeedNetworkError
from pipeline.models import Coordinate
from pipeline.prep import hotspots_to_frame
from pipeline.utils import setup_logger, load_config, ensure_dir, timestamp_filename, save_checksum

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)

# FIRMS VIIRS area CSV column order
VIIRS_COLUMNS = [
    'latitude', 'longitude', 'bright_ti4', 'scan', 'track', 'acq_date',
    'acq_time', 'satellite', 'confidence', 'version', 'bright_ti5', 'frp', 'daynight'
]


@click.command()
@click.option('--lat', type=float, required=True, help='Latitude of the location to assess')
@click.option('--lon', type=float, required=True, help='Longitude of the location to assess')
@click.option('--label', default='', help='Display name for the location')
@click.option('--config', default='configs/risk.yml', help='Path to configuration file')
@click.option('--mock', is_flag=True, help='Use a synthetic feed instead of calling FIRMS')
@click.option('--save-dir', type=click.Path(file_okay=False, path_type=Path), default=None,
              help='Archive parsed hotspots as CSV in this directory')
def main(lat: float, lon: float, label: str, config: str, mock: bool, save_dir: Optional[Path]):
    """Assess current wildfire risk around a coordinate."""
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise click.BadParameter("coordinates out of range", param_hint="--lat/--lon")

    cfg = load_config(config) if Path(config).exists() else {}
    origin = Coordinate(latitude=lat, longitude=lon)
    label = label or f"{lat:.4f}, {lon:.4f}"

    logger.info("=" * 60)
    logger.info(f"Assessing wildfire risk for {label}")
    logger.info("=" * 60)

    if mock:
        logger.info("Using mock FIRMS data")
        mock_cfg = cfg.get('mock', {})
        raw_text = create_mock_firms_csv(
            origin,
            n_hotspots=mock_cfg.get('hotspots', 12),
            spread_degrees=mock_cfg.get('spread_degrees', 0.5),
            seed=mock_cfg.get('seed', 42)
        )
        report = assess_feed_text(raw_text, origin, label)
    else:
        api_key = os.getenv('FIRMS_API_KEY')
        if not api_key:
            raise click.UsageError("FIRMS_API_KEY is not set; export it or pass --mock")
        try:
            report = assess_location(origin, label, api_key, cfg)
        except FeedNetworkError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    if save_dir is not None:
        archive_hotspots(report, save_dir)

    print_report(report)


def print_report(report: LocationReport):
    """Echo a plain-text summary of a report."""
    assessment = report.assessment
    status = report.evacuation_status

    click.echo(f"Location: {report.label}")
    click.echo(f"Status:   {status.title} - {status.message}")
    if assessment is None:
        return

    click.echo(f"Risk:     {assessment.tier.label}")
    if assessment.nearest_distance_miles is not None:
        click.echo(f"Nearest:  {assessment.nearest_distance_miles:.1f} mi")
    else:
        click.echo("Nearest:  none detected")
    click.echo(f"Nearby:   {assessment.nearby_count} within 100 mi")
    click.echo(f"Feed:     {report.feed_status.value} ({len(report.hotspots)} hotspots)")
    click.echo("Recommendations:")
    for item in assessment.recommendations:
        click.echo(f"  - {item}")


def archive_hotspots(report: LocationReport, output_dir: Path) -> Path:
    """Save the report's parsed hotspots to a timestamped CSV."""
    ensure_dir(output_dir)
    output_path = output_dir / timestamp_filename("firms_hotspots", "csv")

    hotspots_to_frame(list(report.hotspots)).to_csv(output_path, index=False)
    save_checksum(output_path)

    logger.info(f"Saved {len(report.hotspots)} hotspots to {output_path}")
    return output_path


def create_mock_firms_csv(
    origin: Coordinate,
    n_hotspots: int = 12,
    spread_degrees: float = 0.5,
    seed: int = 42
) -> str:
    """Create synthetic FIRMS CSV text scattered around a point."""
    rng = np.random.default_rng(seed)

    lats = origin.latitude + rng.normal(0, spread_degrees, n_hotspots)
    lons = origin.longitude + rng.normal(0, spread_degrees, n_hotspots)

    data = {
        'latitude': np.round(lats, 5),
        'longitude': np.round(lons, 5),
        'bright_ti4': np.round(rng.uniform(300, 367, n_hotspots), 2),
        'scan': [0.39] * n_hotspots,
        'track': [0.36] * n_hotspots,
        'acq_date': [pd.Timestamp.now(tz='UTC').strftime('%Y-%m-%d')] * n_hotspots,
        'acq_time': ['1200'] * n_hotspots,
        'satellite': ['N'] * n_hotspots,
        'confidence': rng.choice(['l', 'n', 'h'], n_hotspots),
        'version': ['2.0NRT'] * n_hotspots,
        'bright_ti5': np.round(rng.uniform(280, 300, n_hotspots), 2),
        'frp': np.round(rng.uniform(0.5, 25.0, n_hotspots), 2),
        'daynight': ['D'] * n_hotspots
    }

    df = pd.DataFrame(data, columns=VIIRS_COLUMNS)
    logger.info(f"Created mock FIRMS feed with {n_hotspots} hotspots")
    return df.to_csv(index=False)


if __name__ == '__main__':
    main()
