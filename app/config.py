import os
from pathlib import Path

from src.config import MAX_FORECAST_YEARS

BASE_DIR = Path(__file__).resolve().parents[1]
LOGS_DIR = Path(os.getenv("WEATHER_LOGS_DIR", str(BASE_DIR / "logs")))
DATA_PATH = Path(os.getenv("WEATHER_DATA_PATH", str(BASE_DIR / "weather_data.csv")))


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


MAX_DISPLAY_COUNT = _get_int("WEATHER_MAX_DISPLAY", 40)
