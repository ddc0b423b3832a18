"""Seed data loading: the category taxonomy and sample events from YAML."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from lifeline.models import Category, Event

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).parent / "seed_data.yml"


class SeedData(BaseModel):
    categories: list[Category] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)


def load_seed(path: Path | str | None = None) -> SeedData:
    """Load categories and events from a seed YAML file.

    Falls back to the packaged seed_data.yml when no path is given.
    Raises SeedDataError if the file is missing, not YAML, or fails validation.
    """
    seed_path = Path(path) if path is not None else DEFAULT_SEED_PATH
    try:
        with open(seed_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SeedDataError(seed_path, f"cannot read file ({e.strerror})") from e
    except yaml.YAMLError as e:
        raise SeedDataError(seed_path, f"invalid YAML ({e})") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SeedDataError(seed_path, "top level must be a mapping")

    try:
        seed = SeedData.model_validate(data)
    except ValidationError as e:
        raise SeedDataError(seed_path, f"{e.error_count()} validation error(s)") from e

    logger.debug(
        "Loaded %d categories and %d events from %s",
        len(seed.categories), len(seed.events), seed_path,
    )
    return seed


class SeedDataError(Exception):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid seed data in {path}: {reason}")
