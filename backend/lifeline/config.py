"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    seed_path: Path | None = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> "Settings":
        """Build settings from LIFELINE_* variables, loading .env first.

        Variables already set in the process environment win over .env values.
        """
        load_dotenv(env_file)
        values: dict[str, str] = {}
        if seed_path := os.environ.get("LIFELINE_SEED_PATH"):
            values["seed_path"] = seed_path
        if log_level := os.environ.get("LIFELINE_LOG_LEVEL"):
            values["log_level"] = log_level
        return cls.model_validate(values)


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging to stdout."""
    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
