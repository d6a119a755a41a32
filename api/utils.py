"""Utility functions for the API."""

import os
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

from pipeline.utils import load_config

DEFAULT_CONFIG_PATH = 'configs/risk.yml'


@lru_cache(maxsize=1)
def get_config() -> dict:
    """Load the risk configuration named by RISK_CONFIG, if it exists."""
    config_path = Path(os.getenv('RISK_CONFIG', DEFAULT_CONFIG_PATH))

    if not config_path.exists():
        return {}

    return load_config(str(config_path))


def get_api_key() -> str:
    """FIRMS map key from the environment, empty if unset."""
    return os.getenv('FIRMS_API_KEY', '')


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def get_caveats() -> list:
    """Return standard caveats list."""
    return [
        "Research preview — not for life-safety decisions.",
        "Always follow evacuation orders from local authorities.",
        "Hotspot detection has a 3–6 hour lag and can miss fires under cloud or smoke.",
        "Risk tiers use straight-line distance only; wind, terrain and fuel are not considered."
    ]


def get_attribution() -> list:
    """Return data attribution list."""
    return [
        "FIRMS (NASA): Active fire detections"
    ]
