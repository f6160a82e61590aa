import json

import pytest
from fastapi import HTTPException

from app import main


@pytest.fixture
def api(trend_dataset, tmp_path, monkeypatch):
    monkeypatch.setattr(main, "get_dataset", lambda: trend_dataset)
    monkeypatch.setattr(main, "EVENT_LOG", tmp_path / "api_events.jsonl")
    return main


def test_list_regions(api) -> None:
    assert api.list_regions().regions == ["AT", "GB"]


def test_candles_endpoint(api) -> None:
    response = api.candles("GB", max_display=2)

    assert response.shown == 2
    assert response.total == 3
    assert response.notice == "Showing 2 of 3 years (display limit 2)."
    assert [candle.year for candle in response.candles] == ["2000", "2001", "2002"]
    assert response.candles[1].open == response.candles[0].close
    assert response.chart[-2].split() == ["2000", "2001"]


def test_histogram_endpoint(api) -> None:
    response = api.histogram("GB", mode="min")

    assert response.mode == "min"
    assert [(p.year, p.value) for p in response.points] == [
        (2000, 9.0),
        (2001, 12.0),
        (2002, 13.0),
    ]


def test_forecast_endpoint(api, tmp_path) -> None:
    response = api.forecast("GB", years=1)

    assert response.slope == pytest.approx(2.0)
    assert response.predictions[0].year == 2003
    assert response.predictions[0].value == pytest.approx(16.0)
    events = (tmp_path / "api_events.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(events[-1])["kind"] == "forecast"


def test_unknown_region_maps_to_404(api) -> None:
    with pytest.raises(HTTPException) as excinfo:
        api.candles("FR")

    assert excinfo.value.status_code == 404
    assert excinfo.value.detail["available"] == ["AT", "GB"]


def test_bad_horizon_maps_to_422(api) -> None:
    with pytest.raises(HTTPException) as excinfo:
        api.forecast("GB", years=0)

    assert excinfo.value.status_code == 422
    assert excinfo.value.detail["error"] == "invalid_request"
