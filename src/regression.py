"""Least-squares trend fitting and extrapolation over yearly values."""
from __future__ import annotations

from typing import Iterable, Sequence

from src.errors import DegenerateFit, InsufficientData, InvalidRequest
from src.models import Candle, PredictedPoint, RegressionModel


def points_from_candles(candles: Iterable[Candle]) -> list[tuple[int, float]]:
    """Use each candle's close (the yearly mean) as the observed value."""
    points = []
    for candle in candles:
        try:
            year = int(candle.year[:4])
        except ValueError:
            continue
        points.append((year, candle.close))
    return points


def fit(points: Sequence[tuple[int, float]]) -> RegressionModel:
    n = len(points)
    if n < 2:
        raise InsufficientData(f"Need at least 2 points for regression, got {n}")
    sum_x = sum(x for x, _ in points)
    sum_y = sum(y for _, y in points)
    sum_xy = sum(x * y for x, y in points)
    sum_x2 = sum(x * x for x, _ in points)

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise DegenerateFit("Denominator is zero; all x values are identical")
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y * sum_x2 - sum_x * sum_xy) / denominator
    return RegressionModel(slope=slope, intercept=intercept)


def predict(model: RegressionModel, x: float) -> float:
    return model.predict(x)


def forecast(model: RegressionModel, last_year: int, years: int) -> list[PredictedPoint]:
    """Predict ``years`` consecutive values starting the year after ``last_year``."""
    if years <= 0:
        raise InvalidRequest("Number of future years must be positive")
    return [
        PredictedPoint(year=year, value=predict(model, year))
        for year in range(last_year + 1, last_year + years + 1)
    ]
