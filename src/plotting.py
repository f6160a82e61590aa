"""Text chart rendering for candles, histograms and forecasts.

Every renderer maps values onto a fixed grid of character cells and returns
the rendered lines top row first, followed by a single x-axis label line.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import floor, isfinite
from typing import Sequence, TypeVar

from src.config import CHART_HEIGHT, COLUMN_WIDTH, LABEL_WIDTH, MAX_DISPLAY_COUNT
from src.errors import DegenerateRange, EmptyInput
from src.models import Candle, HistogramPoint, PredictedPoint

T = TypeVar("T")

AXIS = "┃"
GREEN = "\033[32m"
RED = "\033[31m"
BLUE = "\033[34m"
RESET = "\033[0m"

HISTORY_GLYPH = "*"
PREDICTED_GLYPH = "+"
BAR_GLYPH = "█"


class CellKind(str, Enum):
    BLANK = "blank"
    WICK_TOP = "wick_top"
    WICK_BOTTOM = "wick_bottom"
    BODY_BULLISH = "body_bullish"
    BODY_BEARISH = "body_bearish"
    WICK = "wick"


CELL_GLYPHS = {
    CellKind.BLANK: " ",
    CellKind.WICK_TOP: "^",
    CellKind.WICK_BOTTOM: "v",
    CellKind.BODY_BULLISH: "█",
    CellKind.BODY_BEARISH: "▒",
    CellKind.WICK: "│",
}

CELL_COLORS = {
    CellKind.BODY_BULLISH: GREEN,
    CellKind.BODY_BEARISH: RED,
}


@dataclass(frozen=True)
class DisplayWindow:
    shown: int
    total: int
    cap: int

    @property
    def truncated(self) -> bool:
        return self.total > self.shown

    @property
    def notice(self) -> str | None:
        if self.truncated:
            return f"Showing {self.shown} of {self.total} years (display limit {self.cap})."
        if self.total < self.cap:
            return f"Warning: Only {self.total} years of data available."
        return None


@dataclass(frozen=True)
class Chart:
    lines: list[str]
    window: DisplayWindow | None = None


@dataclass(frozen=True)
class CandleLevels:
    high: int
    low: int
    open: int
    close: int

    @property
    def box_top(self) -> int:
        return max(self.open, self.close)

    @property
    def box_bottom(self) -> int:
        return min(self.open, self.close)


def limit_display(items: Sequence[T], cap: int) -> tuple[list[T], DisplayWindow]:
    shown = list(items[: max(cap, 0)])
    return shown, DisplayWindow(shown=len(shown), total=len(items), cap=cap)


def scale_range(values: Sequence[float], height: int) -> tuple[float, float, float]:
    """Return ``(min, max, scale)`` mapping the value range onto ``height`` rows."""
    if not values:
        raise EmptyInput("No data to plot")
    min_val = min(values)
    max_val = max(values)
    value_range = max_val - min_val
    if value_range <= 0:
        raise DegenerateRange("All data points have the same value; cannot scale")
    scale = height / value_range
    if not isfinite(value_range) or not isfinite(scale) or scale == 0:
        raise DegenerateRange(f"Value range {min_val!r}..{max_val!r} cannot be scaled")
    return min_val, max_val, scale


def fixed_width(text: str, width: int) -> str:
    if len(text) >= width:
        return text[:width]
    return text.rjust(width)


def _y_label(value: float, width: int) -> str:
    return f"{value:.1f}".rjust(width)


def _cell(glyph: str, width: int, color_code: str | None = None) -> str:
    left = (width - 1) // 2
    right = width - 1 - left
    if color_code and glyph.strip():
        glyph = f"{color_code}{glyph}{RESET}"
    return " " * left + glyph + " " * right


def _level(value: float, min_val: float, scale: float) -> int:
    return floor((value - min_val) * scale)


def candle_levels(candle: Candle, min_val: float, scale: float) -> CandleLevels:
    return CandleLevels(
        high=_level(candle.high, min_val, scale),
        low=_level(candle.low, min_val, scale),
        open=_level(candle.open, min_val, scale),
        close=_level(candle.close, min_val, scale),
    )


def classify_cell(row: int, levels: CandleLevels, bullish: bool) -> CellKind:
    if row > levels.high or row < levels.low:
        return CellKind.BLANK
    if row == levels.high:
        return CellKind.WICK_TOP
    if row == levels.low:
        return CellKind.WICK_BOTTOM
    if levels.box_bottom <= row <= levels.box_top:
        return CellKind.BODY_BULLISH if bullish else CellKind.BODY_BEARISH
    if levels.box_top <= row <= levels.high or levels.low <= row <= levels.box_bottom:
        return CellKind.WICK
    # rounding gap between wick and body
    return CellKind.BLANK


def render_candles(
    candles: Sequence[Candle],
    *,
    height: int = CHART_HEIGHT,
    max_display: int = MAX_DISPLAY_COUNT,
    column_width: int = COLUMN_WIDTH,
    label_width: int = LABEL_WIDTH,
    color: bool = False,
) -> Chart:
    shown, window = limit_display(candles, max_display)
    values = [candle.low for candle in shown] + [candle.high for candle in shown]
    min_val, _, scale = scale_range(values, height)
    levels = [candle_levels(candle, min_val, scale) for candle in shown]

    lines = []
    for row in range(height, -1, -1):
        cells = []
        for candle, level in zip(shown, levels):
            kind = classify_cell(row, level, candle.bullish)
            cells.append(
                _cell(
                    CELL_GLYPHS[kind],
                    column_width,
                    CELL_COLORS.get(kind) if color else None,
                )
            )
        label = _y_label(min_val + row / scale, label_width)
        lines.append(f"{label} {AXIS} " + "".join(cells))

    axis = " " * (label_width + 3) + "".join(
        fixed_width(candle.year[:4] or "----", column_width) for candle in shown
    )
    lines.append(axis)
    return Chart(lines=lines, window=window)


def render_histogram(
    points: Sequence[HistogramPoint],
    *,
    height: int = CHART_HEIGHT,
    max_display: int = MAX_DISPLAY_COUNT,
    column_width: int = COLUMN_WIDTH,
    label_width: int = LABEL_WIDTH,
) -> Chart:
    shown, window = limit_display(points, max_display)
    min_val, max_val, scale = scale_range([point.value for point in shown], height)
    value_range = max_val - min_val
    bars = [_level(point.value, min_val, scale) for point in shown]

    filled = _cell(BAR_GLYPH, column_width)
    blank = " " * column_width
    lines = []
    for row in range(height, -1, -1):
        label = _y_label(min_val + value_range * row / height, label_width)
        cells = [filled if row <= bar - 1 else blank for bar in bars]
        lines.append(f"{label} {AXIS} " + "".join(cells))

    axis = " " * (label_width + 3) + "".join(
        fixed_width(str(point.year), column_width) for point in shown
    )
    lines.append(axis)
    return Chart(lines=lines, window=window)


def _round_half_up(value: float) -> int:
    return floor(value + 0.5)


def render_prediction(
    history: Sequence[tuple[int, float]],
    predicted: Sequence[PredictedPoint],
    *,
    height: int = CHART_HEIGHT,
    label_width: int = LABEL_WIDTH,
    color: bool = False,
) -> Chart:
    """Scatter observed and extrapolated values on one grid.

    Observed points are drawn with ``*`` and predicted points with ``+``.
    """
    points = [(year, value, False) for year, value in history]
    points.extend((point.year, point.value, True) for point in predicted)
    min_val, _, scale = scale_range([value for _, value, _ in points], height - 1)

    rows = []
    for _, value, _ in points:
        scaled = _round_half_up((value - min_val) * scale)
        rows.append(min(max(scaled, 0), height - 1))

    lines = []
    for row in range(height - 1, -1, -1):
        cells = []
        for (_, _, is_predicted), point_row in zip(points, rows):
            if point_row != row:
                cells.append("   ")
                continue
            glyph = PREDICTED_GLYPH if is_predicted else HISTORY_GLYPH
            if color:
                glyph = f"{GREEN if is_predicted else BLUE}{glyph}{RESET}"
            cells.append(f"{glyph}  ")
        label = _y_label(min_val + row / scale, label_width)
        lines.append(f"{label} {AXIS}" + "".join(cells))

    axis = " " * (label_width + 2) + "".join(
        f"{year % 100:>2d} " for year, _, _ in points
    )
    lines.append(axis)
    return Chart(lines=lines)
