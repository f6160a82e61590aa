import pytest

from src import logging_utils
from src.data import Dataset


@pytest.fixture
def gb_dataset() -> Dataset:
    return Dataset.from_table(
        [
            ["date", "GB_temperature"],
            ["2000", "10"],
            ["2000", "20"],
            ["2001", "15"],
        ]
    )


@pytest.fixture
def trend_dataset() -> Dataset:
    return Dataset.from_table(
        [
            ["utc_timestamp", "AT_temperature", "GB_temperature"],
            ["2000-01-01T00:00:00Z", "1.0", "9.0"],
            ["2000-07-01T00:00:00Z", "2.0", "11.0"],
            ["2001-01-01T00:00:00Z", "3.0", "12.0"],
            ["2002-01-01T00:00:00Z", "4.0", "13.0"],
            ["2002-07-01T00:00:00Z", "oops", "15.0"],
        ]
    )


@pytest.fixture
def log_paths(tmp_path, monkeypatch):
    run_log = tmp_path / "logs" / "run.log"
    event_log = tmp_path / "logs" / "events.jsonl"
    monkeypatch.setattr(logging_utils, "RUN_LOG", run_log)
    monkeypatch.setattr(logging_utils, "EVENT_LOG", event_log)
    return run_log, event_log
