"""Unit tests for CSV table persistence."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from core.errors import StatsOutputError
from report.csv_writer import CsvTableWriter


def test_emit_writes_monthly_summary_in_published_column_order(tmp_path: Path) -> None:
    """Monthly summary CSV should carry month, council_area, age_group, n."""
    writer = CsvTableWriter(tmp_path / "outputs")

    writer.emit("monthly_statistics", [(date(2025, 1, 1), "Glasgow City", "65+", 2)])

    table_path = tmp_path / "outputs" / "monthly_statistics.csv"
    assert table_path.read_text(encoding="utf-8").splitlines() == [
        "month,council_area,age_group,n",
        "2025-01-01,Glasgow City,65+,2",
    ]
    assert writer.written_paths == (table_path,)


def test_emit_writes_header_for_empty_totals(tmp_path: Path) -> None:
    """Empty tables should still produce a header-only file."""
    writer = CsvTableWriter(tmp_path)

    writer.emit("total_deaths_by_age_group", [])

    assert (tmp_path / "total_deaths_by_age_group.csv").read_text(
        encoding="utf-8"
    ).splitlines() == ["age_group,total_deaths_age"]


def test_emit_ignores_chart_only_tables(tmp_path: Path) -> None:
    """Month-only counts are for charts and should not become a CSV."""
    writer = CsvTableWriter(tmp_path)

    writer.emit("counts_by_month", [(date(2025, 1, 1), 3)])

    assert writer.written_paths == ()
    assert not (tmp_path / "counts_by_month.csv").exists()


def test_emit_rejects_repeated_table(tmp_path: Path) -> None:
    """Each table should be written exactly once per writer."""
    writer = CsvTableWriter(tmp_path)
    writer.emit("total_deaths_by_council", [("Fife", 1)])

    with pytest.raises(StatsOutputError, match="already emitted"):
        writer.emit("total_deaths_by_council", [("Fife", 1)])
