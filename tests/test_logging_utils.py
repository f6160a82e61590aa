import json

from src.commands import Request, RequestType, dispatch
from src.logging_utils import command_event, log_event, log_line


def test_log_line_appends_and_echoes(log_paths, capsys) -> None:
    run_log, _ = log_paths

    log_line("first")
    log_line("second")

    assert run_log.read_text(encoding="utf-8") == "first\nsecond\n"
    assert "first" in capsys.readouterr().err


def test_log_event_writes_jsonl(log_paths) -> None:
    _, event_log = log_paths

    log_event({"kind": "help", "ok": True})

    entries = [json.loads(line) for line in event_log.read_text(encoding="utf-8").splitlines()]
    assert entries[0]["kind"] == "help"
    assert entries[0]["ok"] is True
    assert "logged_utc" in entries[0]


def test_command_event_summarizes_errors(trend_dataset) -> None:
    result = dispatch(Request(kind=RequestType.HISTOGRAM, region="FR"), trend_dataset)

    event = command_event(result)

    assert event["kind"] == "histogram"
    assert event["ok"] is False
    assert event["error_kind"] == "column_not_found"
