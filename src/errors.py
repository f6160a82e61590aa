"""Error kinds raised by the weather chart pipeline."""
from __future__ import annotations


class ChartDataError(ValueError):
    """Base class for recoverable, per-request failures."""

    kind = "chart_data_error"


class ColumnNotFound(ChartDataError):
    kind = "column_not_found"

    def __init__(self, code: str, available: list[str] | None = None) -> None:
        self.code = code
        self.available = list(available or [])
        super().__init__(f"Region code {code!r} not found in headers")


class MalformedRow(ChartDataError):
    kind = "malformed_row"


class NoDataForColumn(ChartDataError):
    kind = "no_data_for_column"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"No data available for region code {code!r}")


class InsufficientData(ChartDataError):
    kind = "insufficient_data"


class DegenerateFit(ChartDataError):
    kind = "degenerate_fit"


class EmptyInput(ChartDataError):
    kind = "empty_input"


class DegenerateRange(ChartDataError):
    kind = "degenerate_range"


class InvalidRequest(ChartDataError):
    kind = "invalid_request"
