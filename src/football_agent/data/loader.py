"""Load the static football dataset from YAML."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml

from football_agent.data.schemas import FootballDataset

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "football_data.yaml"


def load_dataset(path: Optional[Union[str, Path]] = None) -> FootballDataset:
    """Read and validate a dataset file (defaults to the bundled one)."""
    data_path = Path(path) if path else DEFAULT_DATA_PATH
    if not data_path.exists():
        raise FileNotFoundError(f"Football dataset not found: {data_path}")

    with open(data_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    dataset = FootballDataset.model_validate(raw)
    logger.info(
        f"Loaded football dataset from {data_path.name}: "
        f"{len(dataset.teams)} teams, {len(dataset.live_matches)} live matches"
    )
    return dataset


@lru_cache(maxsize=None)
def get_dataset(path: Optional[str] = None) -> FootballDataset:
    """Process-wide dataset, loaded on first use."""
    return load_dataset(path)
