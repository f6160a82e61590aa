"""Data loading utilities for weather tables."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from src.config import COLUMN_SUFFIX

Row = list[str]


def tokenise(line: str, delimiter: str = ",") -> Row:
    if not line:
        return []
    return line.split(delimiter)


def read_table(path: str | Path, delimiter: str = ",") -> list[Row]:
    """Read a delimiter-separated file into rows of string cells.

    The first row is the header. No structural validation is done here.
    """
    rows: list[Row] = []
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            rows.append(tokenise(line.rstrip("\r\n"), delimiter))
    return rows


def region_codes(header: Sequence[str]) -> list[str]:
    """Return the region codes named by ``<CODE>_temperature`` columns."""
    codes = []
    for name in header[1:]:
        if name.endswith(COLUMN_SUFFIX):
            codes.append(name[: -len(COLUMN_SUFFIX)])
    return codes


@dataclass(frozen=True)
class Dataset:
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @classmethod
    def from_table(cls, table: Sequence[Sequence[str]]) -> "Dataset":
        if not table:
            return cls(header=(), rows=())
        return cls(
            header=tuple(table[0]),
            rows=tuple(tuple(row) for row in table[1:]),
        )

    @classmethod
    def load(cls, path: str | Path) -> "Dataset":
        return cls.from_table(read_table(path))

    @property
    def empty(self) -> bool:
        return not self.rows

    def region_codes(self) -> list[str]:
        return region_codes(self.header)
