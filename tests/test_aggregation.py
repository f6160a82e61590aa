import pytest

from src.aggregation import aggregate_by_year, bin_by_year, parse_reading, resolve_column
from src.errors import ColumnNotFound, MalformedRow, NoDataForColumn
from src.models import HistogramPoint, StatMode, YearStat

HEADER = ["utc_timestamp", "AT_temperature", "GB_temperature"]


def _rows() -> list[list[str]]:
    return [
        ["2000-01-01T00:00:00Z", "1.0", "10"],
        ["2000-06-01T00:00:00Z", "2.0", "20"],
        ["2001-01-01T00:00:00Z", "3.0", "15"],
    ]


def test_resolve_column_exact_match() -> None:
    assert resolve_column(HEADER, "GB") == 2
    assert resolve_column(HEADER, "AT") == 1


def test_resolve_column_missing_lists_available_codes() -> None:
    with pytest.raises(ColumnNotFound) as excinfo:
        resolve_column(HEADER, "gb")
    assert excinfo.value.code == "gb"
    assert excinfo.value.available == ["AT", "GB"]


def test_parse_reading_rejects_bad_rows() -> None:
    with pytest.raises(MalformedRow):
        parse_reading(["2000-01-01", "1.0"], 2)
    with pytest.raises(MalformedRow):
        parse_reading(["200", "1.0", "2.0"], 2)
    with pytest.raises(MalformedRow):
        parse_reading(["abcd-01-01", "1.0", "2.0"], 2)
    with pytest.raises(MalformedRow):
        parse_reading(["2000-01-01", "1.0", ""], 2)
    with pytest.raises(MalformedRow):
        parse_reading(["2000-01-01", "1.0", "nan"], 2)
    assert parse_reading(["2000-01-01", "1.0", "-3.5"], 2) == (2000, -3.5)


def test_parse_reading_rejects_loose_number_syntax() -> None:
    with pytest.raises(MalformedRow):
        parse_reading(["1_00-01-01", "1.0"], 1)
    with pytest.raises(MalformedRow):
        parse_reading([" 200-01-01", "1.0"], 1)
    with pytest.raises(MalformedRow):
        parse_reading(["+200-01-01", "1.0"], 1)
    with pytest.raises(MalformedRow):
        parse_reading(["2000-01-01", "1_0.5"], 1)
    assert parse_reading(["2000-01-01", " 10.5 "], 1) == (2000, 10.5)


def test_aggregate_by_year_accumulates_stats() -> None:
    stats = aggregate_by_year(_rows(), HEADER, "GB")

    assert stats[2000] == YearStat(sum=30.0, count=2, high=20.0, low=10.0)
    assert stats[2001] == YearStat(sum=15.0, count=1, high=15.0, low=15.0)


def test_garbage_rows_do_not_change_aggregates() -> None:
    clean = aggregate_by_year(_rows(), HEADER, "GB")
    noisy_rows = _rows() + [
        ["2000-02-01T00:00:00Z", "1.0", "not-a-number"],
        ["2001-02-01T00:00:00Z", "1.0"],
        ["20", "1.0", "99"],
        ["xxxx-01-01", "1.0", "99"],
        [],
    ]

    assert aggregate_by_year(noisy_rows, HEADER, "GB") == clean


def test_aggregate_by_year_unknown_column() -> None:
    with pytest.raises(ColumnNotFound):
        aggregate_by_year(_rows(), HEADER, "FR")


def test_bin_by_year_average() -> None:
    rows = [["2000", "10"], ["2000", "20"], ["2001", "5"]]

    points = bin_by_year(rows, ["date", "GB_temperature"], "GB", StatMode.AVERAGE)

    assert points == [HistogramPoint(2000, 15.0), HistogramPoint(2001, 5.0)]


def test_bin_by_year_max_and_min_sorted_by_year() -> None:
    rows = [["2001", "5"], ["2000", "10"], ["2000", "20"], ["2001", "7"]]
    header = ["date", "GB_temperature"]

    maxima = bin_by_year(rows, header, "GB", StatMode.MAX)
    minima = bin_by_year(rows, header, "GB", StatMode.MIN)

    assert maxima == [HistogramPoint(2000, 20.0), HistogramPoint(2001, 7.0)]
    assert minima == [HistogramPoint(2000, 10.0), HistogramPoint(2001, 5.0)]


def test_bin_by_year_no_valid_rows() -> None:
    rows = [["2000", "n/a"], ["20", "5"]]

    with pytest.raises(NoDataForColumn):
        bin_by_year(rows, ["date", "GB_temperature"], "GB", StatMode.AVERAGE)


def test_bin_by_year_column_missing_fires_before_data_check() -> None:
    with pytest.raises(ColumnNotFound):
        bin_by_year([], ["date", "GB_temperature"], "FR", StatMode.AVERAGE)
