from functools import lru_cache

from fastapi import FastAPI, HTTPException

from app.config import DATA_PATH, LOGS_DIR, MAX_DISPLAY_COUNT, MAX_FORECAST_YEARS
from app.models import (
    CandleOut,
    CandleSeriesResponse,
    ForecastResponse,
    HistogramPointOut,
    HistogramResponse,
    PredictionOut,
    RegionsResponse,
)
from src.commands import CommandResult, Request, RequestType, dispatch
from src.config import ChartSettings
from src.data import Dataset
from src.errors import ColumnNotFound, NoDataForColumn
from src.logging_utils import command_event, log_event
from src.models import StatMode

EVENT_LOG = LOGS_DIR / "weather_api_events.jsonl"

app = FastAPI()


@app.on_event("startup")
def _startup() -> None:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_dataset() -> Dataset:
    if not DATA_PATH.exists():
        raise HTTPException(status_code=503, detail=f"Weather data not found at {DATA_PATH}")
    return Dataset.load(DATA_PATH)


def _settings(max_display: int = MAX_DISPLAY_COUNT) -> ChartSettings:
    return ChartSettings(max_display=max_display, color=False)


def _run(request: Request) -> CommandResult:
    result = dispatch(request, get_dataset())
    log_event(command_event(result), EVENT_LOG)
    if result.ok:
        return result
    error = result.error
    detail = {"error": error.kind, "message": str(error)}
    if isinstance(error, ColumnNotFound):
        detail["available"] = error.available
    status = 404 if isinstance(error, (ColumnNotFound, NoDataForColumn)) else 422
    raise HTTPException(status_code=status, detail=detail)


@app.get("/regions")
def list_regions() -> RegionsResponse:
    return RegionsResponse(regions=get_dataset().region_codes())


@app.get("/candles/{region}")
def candles(region: str, max_display: int = MAX_DISPLAY_COUNT) -> CandleSeriesResponse:
    result = _run(
        Request(kind=RequestType.CANDLE_PLOT, region=region, settings=_settings(max_display))
    )
    window = result.window
    return CandleSeriesResponse(
        region=region,
        shown=window.shown,
        total=window.total,
        notice=window.notice,
        candles=[
            CandleOut(
                year=candle.year,
                open=candle.open,
                high=candle.high,
                low=candle.low,
                close=candle.close,
            )
            for candle in result.candles
        ],
        chart=result.lines,
    )


@app.get("/histogram/{region}")
def histogram(
    region: str, mode: str = "average", max_display: int = MAX_DISPLAY_COUNT
) -> HistogramResponse:
    stat_mode = StatMode.from_selector(mode)
    result = _run(
        Request(
            kind=RequestType.HISTOGRAM,
            region=region,
            mode=stat_mode,
            settings=_settings(max_display),
        )
    )
    window = result.window
    return HistogramResponse(
        region=region,
        mode=stat_mode.value,
        shown=window.shown,
        total=window.total,
        notice=window.notice,
        points=[HistogramPointOut(year=p.year, value=p.value) for p in result.histogram],
        chart=result.lines,
    )


@app.get("/forecast/{region}")
def forecast(region: str, years: int = 5) -> ForecastResponse:
    if years > MAX_FORECAST_YEARS:
        raise HTTPException(
            status_code=422,
            detail={"error": "invalid_request", "message": f"years must be <= {MAX_FORECAST_YEARS}"},
        )
    result = _run(
        Request(kind=RequestType.FORECAST, region=region, years=years, settings=_settings())
    )
    return ForecastResponse(
        region=region,
        slope=result.model.slope,
        intercept=result.model.intercept,
        predictions=[PredictionOut(year=p.year, value=p.value) for p in result.predictions],
        chart=result.lines,
    )
