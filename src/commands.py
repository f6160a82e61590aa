"""Command dispatch for weather chart requests.

Each ``RequestType`` maps to a pure handler that takes the request, the
loaded dataset and the previous command result, and returns a new
``CommandResult``. Callers own input and output; nothing here reads stdin.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from src.aggregation import bin_by_year, compute_candles
from src.config import MAX_FORECAST_YEARS, ChartSettings
from src.data import Dataset
from src.errors import ChartDataError, InvalidRequest, NoDataForColumn
from src.models import Candle, HistogramPoint, PredictedPoint, RegressionModel, StatMode
from src.plotting import (
    DisplayWindow,
    limit_display,
    render_candles,
    render_histogram,
    render_prediction,
)
from src.regression import fit, forecast, points_from_candles
from src.reporting import (
    HELP_TEXT,
    candle_table,
    format_error,
    histogram_title,
    prediction_table,
    regression_summary,
)


class RequestType(str, Enum):
    HELP = "help"
    CANDLE_LIST = "candle_list"
    CANDLE_PLOT = "candle_plot"
    HISTOGRAM = "histogram"
    FORECAST = "forecast"


@dataclass(frozen=True)
class Request:
    kind: RequestType
    region: str = ""
    mode: StatMode = StatMode.AVERAGE
    years: int = 0
    settings: ChartSettings = field(default_factory=ChartSettings)


@dataclass(frozen=True)
class CommandResult:
    kind: RequestType
    region: str = ""
    lines: list[str] = field(default_factory=list)
    candles: list[Candle] = field(default_factory=list)
    histogram: list[HistogramPoint] = field(default_factory=list)
    model: RegressionModel | None = None
    predictions: list[PredictedPoint] = field(default_factory=list)
    window: DisplayWindow | None = None
    error: ChartDataError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


Handler = Callable[[Request, Dataset, "CommandResult | None"], CommandResult]


def _candles_for(request: Request, dataset: Dataset) -> list[Candle]:
    candles = compute_candles(dataset.rows, dataset.header, request.region)
    if not candles:
        raise NoDataForColumn(request.region)
    return candles


def _handle_help(request: Request, dataset: Dataset, previous: CommandResult | None) -> CommandResult:
    return CommandResult(kind=request.kind, lines=list(HELP_TEXT))


def _handle_candle_list(
    request: Request, dataset: Dataset, previous: CommandResult | None
) -> CommandResult:
    candles = _candles_for(request, dataset)
    shown, window = limit_display(candles, request.settings.max_display)
    lines = candle_table(shown, request.region)
    if window.notice:
        lines.append(window.notice)
    return CommandResult(
        kind=request.kind,
        region=request.region,
        lines=lines,
        candles=candles,
        window=window,
    )


def _handle_candle_plot(
    request: Request, dataset: Dataset, previous: CommandResult | None
) -> CommandResult:
    if previous is not None and previous.region == request.region and previous.candles:
        candles = previous.candles
    else:
        candles = _candles_for(request, dataset)
    settings = request.settings
    chart = render_candles(
        candles,
        height=settings.height,
        max_display=settings.max_display,
        column_width=settings.column_width,
        label_width=settings.label_width,
        color=settings.color,
    )
    lines = [f"=== Text-based Candlestick Chart (up to {settings.max_display} candles) ==="]
    lines.extend(chart.lines)
    if chart.window and chart.window.notice:
        lines.append(chart.window.notice)
    return CommandResult(
        kind=request.kind,
        region=request.region,
        lines=lines,
        candles=candles,
        window=chart.window,
    )


def _handle_histogram(
    request: Request, dataset: Dataset, previous: CommandResult | None
) -> CommandResult:
    points = bin_by_year(dataset.rows, dataset.header, request.region, request.mode)
    settings = request.settings
    chart = render_histogram(
        points,
        height=settings.height,
        max_display=settings.max_display,
        column_width=settings.column_width,
        label_width=settings.label_width,
    )
    lines = [histogram_title(request.region, request.mode), ""]
    lines.extend(chart.lines)
    if chart.window and chart.window.notice:
        lines.append(chart.window.notice)
    return CommandResult(
        kind=request.kind,
        region=request.region,
        lines=lines,
        histogram=points,
        window=chart.window,
    )


def _handle_forecast(
    request: Request, dataset: Dataset, previous: CommandResult | None
) -> CommandResult:
    if request.years <= 0:
        raise InvalidRequest("Number of future years must be positive")
    candles = _candles_for(request, dataset)
    points = points_from_candles(candles)
    model = fit(points)
    predictions = forecast(model, points[-1][0], request.years)
    settings = request.settings
    chart = render_prediction(
        points,
        predictions,
        height=settings.height,
        label_width=settings.label_width,
        color=settings.color,
    )
    lines = regression_summary(model)
    lines.append("")
    lines.extend(prediction_table(predictions))
    lines.extend(["", "=== Temperature Prediction Plot ===", ""])
    lines.extend(chart.lines)
    return CommandResult(
        kind=request.kind,
        region=request.region,
        lines=lines,
        candles=candles,
        model=model,
        predictions=predictions,
    )


HANDLERS: dict[RequestType, Handler] = {
    RequestType.HELP: _handle_help,
    RequestType.CANDLE_LIST: _handle_candle_list,
    RequestType.CANDLE_PLOT: _handle_candle_plot,
    RequestType.HISTOGRAM: _handle_histogram,
    RequestType.FORECAST: _handle_forecast,
}


def validate_request(request: Request) -> None:
    if request.kind is RequestType.HELP:
        return
    if not request.region.strip():
        raise InvalidRequest("Region code cannot be empty")
    if request.settings.height < 2:
        raise InvalidRequest("Chart height must be at least 2 rows")
    if request.settings.max_display < 1:
        raise InvalidRequest("Display count must be positive")
    if request.kind is RequestType.FORECAST and request.years > MAX_FORECAST_YEARS:
        raise InvalidRequest(f"Number of future years must be at most {MAX_FORECAST_YEARS}")


def dispatch(
    request: Request, dataset: Dataset, previous: CommandResult | None = None
) -> CommandResult:
    """Run one request and return its result; failures become error results."""
    try:
        validate_request(request)
        return HANDLERS[request.kind](request, dataset, previous)
    except ChartDataError as exc:
        return CommandResult(
            kind=request.kind,
            region=request.region,
            lines=format_error(exc),
            error=exc,
        )
