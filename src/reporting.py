"""Text report helpers for command output."""
from __future__ import annotations

from typing import Sequence

from src.errors import ChartDataError, ColumnNotFound
from src.models import Candle, PredictedPoint, RegressionModel, StatMode

HELP_TEXT = [
    "=========================================",
    "              Help Menu                  ",
    "=========================================",
    "1: Print Help - Display this help message.",
    "2: Compute Candlestick Data - Compute yearly candlestick data for a region code",
    "   and list it as a table.",
    "3: Plot Candlestick Data - Compute (or reuse) the candlestick data and plot it",
    "   as a text chart.",
    "4: Show Yearly Temperature Histogram - Plot one bar per year using the",
    "   average, max or min reading.",
    "5: Predict Future Temperature (Linear Regression) - Fit a trend line over the",
    "   yearly means and extrapolate it.",
    "0: Exit - Close the application.",
    "",
    "Candle 'open' is the previous year's mean, not a measured reading.",
]


def candle_table(candles: Sequence[Candle], region: str) -> list[str]:
    lines = [f"Candle data : {region}", "Date\tOpen\tHigh\tLow\tClose"]
    for candle in candles:
        lines.append(
            f"{candle.year[:4]}\t{candle.open:.3f}\t{candle.high:.3f}\t"
            f"{candle.low:.3f}\t{candle.close:.3f}"
        )
    return lines


def histogram_title(region: str, mode: StatMode) -> str:
    return f"===== Yearly {mode.label} Temp for {region} ====="


def regression_summary(model: RegressionModel) -> list[str]:
    return [
        "=== Linear Regression ===",
        f"Equation: Y = {model.slope:.6g} * X + {model.intercept:.6g}",
    ]


def prediction_table(predictions: Sequence[PredictedPoint]) -> list[str]:
    lines = ["=== Predicted Temperatures ===", "Year\tPredicted Temperature"]
    lines.extend(f"{point.year}\t{point.value:.3f}" for point in predictions)
    return lines


def format_error(error: ChartDataError) -> list[str]:
    lines = [f"Error: {error}"]
    if isinstance(error, ColumnNotFound) and error.available:
        lines.append("Available region codes are as follows:")
        lines.extend(f"- {code}" for code in error.available)
    return lines
