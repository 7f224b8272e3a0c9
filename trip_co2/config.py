"""
config.py – Load and validate CLI settings from the environment.

Settings come from environment variables, or a ``.env`` file at the project
root. Call ``get_config()`` once at startup to obtain a validated Config.
The estimator itself never reads the environment.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from trip_co2.constants import ALLOWED_OUTPUT_FORMATS, OUTPUT_TABLE

# Project root: the directory holding pyproject.toml
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

_env_file = _PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file, override=True)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Validated runtime configuration."""

    log_level: str = DEFAULT_LOG_LEVEL
    output_format: str = OUTPUT_TABLE

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def get_config() -> Config:
    """
    Read ``TRIP_CO2_LOG_LEVEL`` and ``TRIP_CO2_OUTPUT`` and return a Config.

    Raises
    ------
    EnvironmentError
        If either variable holds an unsupported value.
    """
    log_level = os.environ.get("TRIP_CO2_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise EnvironmentError(
            f"Unsupported TRIP_CO2_LOG_LEVEL: {log_level!r}. "
            "Use DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )

    output_format = os.environ.get("TRIP_CO2_OUTPUT", OUTPUT_TABLE).strip().lower()
    if output_format not in ALLOWED_OUTPUT_FORMATS:
        raise EnvironmentError(
            f"Unsupported TRIP_CO2_OUTPUT: {output_format!r}. "
            f"Use one of: {', '.join(sorted(ALLOWED_OUTPUT_FORMATS))}."
        )

    return Config(log_level=log_level, output_format=output_format)
