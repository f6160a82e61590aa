"""Shared data models for yearly weather statistics."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class YearStat:
    """Running accumulator for one year's readings."""

    sum: float = 0.0
    count: int = 0
    high: float = float("-inf")
    low: float = float("inf")

    def add(self, value: float) -> None:
        self.sum += value
        self.count += 1
        if value > self.high:
            self.high = value
        if value < self.low:
            self.low = value

    @property
    def mean(self) -> float:
        return self.sum / self.count


@dataclass(frozen=True)
class Candle:
    """One year's statistics shaped as an open/high/low/close quadruple.

    ``close`` is the year's mean reading. ``open`` carries the previous
    candle's close (or the candle's own close for the first year), so it
    tracks drift between yearly means rather than any measured opening value.
    """

    year: str
    open: float
    high: float
    low: float
    close: float

    @property
    def bullish(self) -> bool:
        return self.close >= self.open


class StatMode(str, Enum):
    AVERAGE = "average"
    MAX = "max"
    MIN = "min"

    @classmethod
    def from_selector(cls, value: int | str | None) -> "StatMode":
        """Map a menu selector (1=average, 2=max, 3=min) to a mode.

        Unknown selectors fall back to ``AVERAGE``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            pass
        try:
            selector = int(str(value).strip())
        except ValueError:
            return cls.AVERAGE
        return {1: cls.AVERAGE, 2: cls.MAX, 3: cls.MIN}.get(selector, cls.AVERAGE)

    @property
    def label(self) -> str:
        return {"average": "Average", "max": "Max", "min": "Min"}[self.value]


@dataclass(frozen=True)
class HistogramPoint:
    year: int
    value: float


@dataclass(frozen=True)
class RegressionModel:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class PredictedPoint:
    year: int
    value: float
