"""Configuration for weather chart runs."""
from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


COLUMN_SUFFIX = "_temperature"

DATA_PATH = Path(os.getenv("WEATHER_DATA_PATH", "weather_data.csv"))
LOGS_DIR = Path(os.getenv("WEATHER_LOGS_DIR", "logs"))

CHART_HEIGHT = _get_int("WEATHER_CHART_HEIGHT", 20)
MAX_DISPLAY_COUNT = _get_int("WEATHER_MAX_DISPLAY", 40)
MAX_FORECAST_YEARS = _get_int("WEATHER_MAX_FORECAST_YEARS", 50)
COLUMN_WIDTH = _get_int("WEATHER_COLUMN_WIDTH", 5)
LABEL_WIDTH = _get_int("WEATHER_LABEL_WIDTH", 6)
USE_COLOR = _get_bool("WEATHER_COLOR", False)


@dataclass(frozen=True)
class ChartSettings:
    height: int = CHART_HEIGHT
    max_display: int = MAX_DISPLAY_COUNT
    column_width: int = COLUMN_WIDTH
    label_width: int = LABEL_WIDTH
    color: bool = USE_COLOR

    @classmethod
    def from_env(cls) -> "ChartSettings":
        return cls(
            height=_get_int("WEATHER_CHART_HEIGHT", 20),
            max_display=_get_int("WEATHER_MAX_DISPLAY", 40),
            column_width=_get_int("WEATHER_COLUMN_WIDTH", 5),
            label_width=_get_int("WEATHER_LABEL_WIDTH", 6),
            color=_get_bool("WEATHER_COLOR", False),
        )
