"""Yearly aggregation of weather readings into candles and histogram bins."""
from __future__ import annotations

from functools import reduce
from math import isfinite
from typing import Iterable, Iterator, Sequence

from src.config import COLUMN_SUFFIX
from src.data import region_codes
from src.errors import ColumnNotFound, MalformedRow, NoDataForColumn
from src.models import Candle, HistogramPoint, StatMode, YearStat


def resolve_column(header: Sequence[str], code: str) -> int:
    """Return the index of ``<code>_temperature`` in the header."""
    target = f"{code}{COLUMN_SUFFIX}"
    for index, name in enumerate(header):
        if name == target:
            return index
    raise ColumnNotFound(code, region_codes(header))


def parse_reading(row: Sequence[str], index: int) -> tuple[int, float]:
    """Extract ``(year, value)`` from a data row or raise ``MalformedRow``."""
    if len(row) <= index:
        raise MalformedRow(f"row has {len(row)} cells, column {index} missing")
    timestamp = row[0]
    if len(timestamp) < 4:
        raise MalformedRow(f"timestamp too short: {timestamp!r}")
    prefix = timestamp[:4]
    if not (prefix.isascii() and prefix.isdigit()):
        raise MalformedRow(f"invalid year in timestamp: {timestamp!r}")
    year = int(prefix)
    cell = row[index]
    if "_" in cell:
        raise MalformedRow(f"invalid reading: {cell!r}")
    try:
        value = float(cell)
    except ValueError:
        raise MalformedRow(f"invalid reading: {cell!r}") from None
    if not isfinite(value):
        raise MalformedRow(f"non-finite reading: {cell!r}")
    return year, value


def iter_readings(rows: Iterable[Sequence[str]], index: int) -> Iterator[tuple[int, float]]:
    for row in rows:
        try:
            yield parse_reading(row, index)
        except MalformedRow:
            continue


def aggregate_by_year(
    rows: Iterable[Sequence[str]], header: Sequence[str], code: str
) -> dict[int, YearStat]:
    index = resolve_column(header, code)
    stats: dict[int, YearStat] = {}
    for year, value in iter_readings(rows, index):
        stats.setdefault(year, YearStat()).add(value)
    return stats


def _chain_candle(
    acc: tuple[list[Candle], float | None], item: tuple[int, YearStat]
) -> tuple[list[Candle], float | None]:
    candles, previous_close = acc
    year, stat = item
    if stat.count == 0:
        return acc
    close = stat.mean
    open_ = close if previous_close is None else previous_close
    candles.append(
        Candle(year=str(year), open=open_, high=stat.high, low=stat.low, close=close)
    )
    return candles, close


def build_candles(year_stats: dict[int, YearStat]) -> list[Candle]:
    """Fold yearly stats into candles, ascending by year.

    Each candle opens at the previous retained candle's close; skipped
    (empty) years do not break the chain.
    """
    candles, _ = reduce(_chain_candle, sorted(year_stats.items()), ([], None))
    return candles


def compute_candles(
    rows: Iterable[Sequence[str]], header: Sequence[str], code: str
) -> list[Candle]:
    return build_candles(aggregate_by_year(rows, header, code))


def _reduce(values: list[float], mode: StatMode) -> float:
    if mode is StatMode.MAX:
        return max(values)
    if mode is StatMode.MIN:
        return min(values)
    return sum(values) / len(values)


def bin_by_year(
    rows: Iterable[Sequence[str]],
    header: Sequence[str],
    code: str,
    mode: StatMode = StatMode.AVERAGE,
) -> list[HistogramPoint]:
    index = resolve_column(header, code)
    grouped: dict[int, list[float]] = {}
    for year, value in iter_readings(rows, index):
        grouped.setdefault(year, []).append(value)

    points = [
        HistogramPoint(year=year, value=_reduce(values, mode))
        for year, values in sorted(grouped.items())
        if values
    ]
    if not points:
        raise NoDataForColumn(code)
    return points
