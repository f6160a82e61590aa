"""Logging helpers for chart runs."""
from __future__ import annotations

from datetime import datetime, timezone
import json
from pathlib import Path
import sys
from typing import Any

from src.config import LOGS_DIR

RUN_LOG = LOGS_DIR / "weather_charts.log"
EVENT_LOG = LOGS_DIR / "weather_events.jsonl"


def log_line(msg: str, path: str | Path | None = None) -> None:
    target = Path(path or RUN_LOG)
    target.parent.mkdir(parents=True, exist_ok=True)
    print(msg, file=sys.stderr)
    with target.open("a", encoding="utf-8") as handle:
        handle.write(msg + "\n")


def log_event(payload: dict[str, Any], path: str | Path | None = None) -> None:
    target = Path(path or EVENT_LOG)
    target.parent.mkdir(parents=True, exist_ok=True)
    event = {"logged_utc": datetime.now(timezone.utc).isoformat(), **payload}
    with target.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(event, ensure_ascii=False, default=str))
        handle.write("\n")


def command_event(result: Any) -> dict[str, Any]:
    """Summarize a command result for the event log."""
    error = result.error
    return {
        "kind": result.kind.value,
        "region": result.region,
        "ok": result.ok,
        "error_kind": error.kind if error is not None else None,
        "error": str(error) if error is not None else None,
        "candles": len(result.candles),
        "histogram_points": len(result.histogram),
        "predictions": len(result.predictions),
    }
