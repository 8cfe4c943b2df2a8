"""Unit tests for grouped count aggregation."""

from __future__ import annotations

from datetime import date

from core.types import (
    AgeGroupTotalRow,
    CouncilTotalRow,
    EnrichedRecord,
    MonthCountRow,
    MonthlySummaryRow,
)
from transforms.aggregation import aggregate_records
from transforms.record_transformer import classify_age, truncate_to_month


def _record(row_number: int, record_date: date, age: float, council_area: str) -> EnrichedRecord:
    return EnrichedRecord(
        row_number=row_number,
        date=record_date,
        month=truncate_to_month(record_date),
        age=age,
        age_group=classify_age(age),
        council_area=council_area,
    )


def test_aggregate_records_counts_scenario_groups() -> None:
    """Three distinct keys should yield three summary rows of one each."""
    records = [
        _record(1, date(2025, 1, 5), 34, "Glasgow City"),
        _record(2, date(2025, 1, 7), 72, "Glasgow City"),
        _record(3, date(2025, 1, 10), 19, "Edinburgh"),
    ]

    result = aggregate_records(records)

    january = date(2025, 1, 1)
    assert result.total_records == 3
    assert set(result.monthly_summary) == {
        MonthlySummaryRow(month=january, council_area="Glasgow City", age_group="20-39", n=1),
        MonthlySummaryRow(month=january, council_area="Glasgow City", age_group="65+", n=1),
        MonthlySummaryRow(month=january, council_area="Edinburgh", age_group="0-19", n=1),
    }
    assert {row.council_area: row.total_deaths for row in result.totals_by_council} == {
        "Glasgow City": 2,
        "Edinburgh": 1,
    }
    assert {row.age_group: row.total_deaths_age for row in result.totals_by_age_group} == {
        "20-39": 1,
        "65+": 1,
        "0-19": 1,
    }
    assert result.counts_by_month == (MonthCountRow(month=january, n=3),)


def test_aggregate_records_merges_shared_keys_and_sorts_rows() -> None:
    """Records sharing a key should collapse into one counted row."""
    records = [
        _record(1, date(2025, 2, 3), 45, "Fife"),
        _record(2, date(2025, 1, 9), 45, "Fife"),
        _record(3, date(2025, 1, 20), 50, "Fife"),
    ]

    result = aggregate_records(records)

    assert result.monthly_summary == (
        MonthlySummaryRow(month=date(2025, 1, 1), council_area="Fife", age_group="40-64", n=2),
        MonthlySummaryRow(month=date(2025, 2, 1), council_area="Fife", age_group="40-64", n=1),
    )
    assert result.totals_by_council == (CouncilTotalRow(council_area="Fife", total_deaths=3),)
    assert result.totals_by_age_group == (
        AgeGroupTotalRow(age_group="40-64", total_deaths_age=3),
    )


def test_aggregate_records_tables_sum_to_total() -> None:
    """Every grouped table should account for every record."""
    records = [
        _record(index, date(2025, 1 + index % 3, 1 + index), age, council)
        for index, (age, council) in enumerate(
            [(5, "Fife"), (25, "Fife"), (45, "Angus"), (85, "Angus"), (65, "Moray"), (19, "Fife")]
        )
    ]

    result = aggregate_records(records)

    assert sum(row.n for row in result.monthly_summary) == result.total_records
    assert sum(row.total_deaths for row in result.totals_by_council) == result.total_records
    assert sum(row.total_deaths_age for row in result.totals_by_age_group) == 6
    assert sum(row.n for row in result.counts_by_month) == 6


def test_aggregate_records_handles_empty_input() -> None:
    """No records should produce empty tables and a zero total."""
    result = aggregate_records([])

    assert result.total_records == 0
    assert result.monthly_summary == ()
    assert all(rows == () for rows in result.tables().values())


def test_tables_follow_published_column_order() -> None:
    """Plain table rows should match each table's column order."""
    result = aggregate_records([_record(1, date(2025, 1, 5), 34, "Fife")])

    tables = result.tables()

    assert tables["monthly_statistics"] == ((date(2025, 1, 1), "Fife", "20-39", 1),)
    assert tables["total_deaths_by_council"] == (("Fife", 1),)
    assert tables["total_deaths_by_age_group"] == (("20-39", 1),)
    assert tables["counts_by_month"] == ((date(2025, 1, 1), 1),)
