"""Shared typed models.

This module defines immutable data models passed between the ingest,
transform, aggregation, and report layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, field
from datetime import date
from pathlib import Path
from typing import Literal, Mapping

import pandas as pd

from core.constants import (
    COUNTS_BY_MONTH_TABLE,
    MONTHLY_SUMMARY_TABLE,
    TOTALS_BY_AGE_GROUP_TABLE,
    TOTALS_BY_COUNCIL_TABLE,
)

TableFormat = Literal["csv", "tsv", "excel"]
TableRow = tuple[object, ...]


@dataclass(frozen=True, eq=False)
class RawTable:
    """Parsed input file before schema normalization.

    Attributes:
        source_path: File the table was read from.
        table_format: Parser variant used for the file.
        frame: String-typed cells with header-derived column names.
    """

    source_path: Path
    table_format: TableFormat
    frame: pd.DataFrame


@dataclass(frozen=True, eq=False)
class ValidatedTable:
    """Input table with canonical lower-cased column names.

    Attributes:
        source_path: File the table was read from.
        frame: Copy of the raw frame with canonical column names.
        original_columns: Header strings exactly as found in the file.
    """

    source_path: Path
    frame: pd.DataFrame
    original_columns: tuple[str, ...]

    @property
    def columns(self) -> tuple[str, ...]:
        """Canonical column names in file order."""
        return tuple(str(column) for column in self.frame.columns)


@dataclass(frozen=True)
class EnrichedRecord:
    """One input row with derived calendar and age fields.

    Attributes:
        row_number: One-based data row index in the source file.
        date: Parsed calendar date.
        month: First day of the record's calendar month.
        age: Numeric age value.
        age_group: Age classification label.
        council_area: Opaque council area identifier.
        extra_fields: Passthrough columns not used by aggregation.
    """

    row_number: int
    date: date
    month: date
    age: float
    age_group: str
    council_area: str
    extra_fields: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class MonthlySummaryRow:
    """Count of records sharing one (month, council_area, age_group) key."""

    month: date
    council_area: str
    age_group: str
    n: int


@dataclass(frozen=True)
class CouncilTotalRow:
    """Count of records for one council area."""

    council_area: str
    total_deaths: int


@dataclass(frozen=True)
class AgeGroupTotalRow:
    """Count of records for one age group."""

    age_group: str
    total_deaths_age: int


@dataclass(frozen=True)
class MonthCountRow:
    """Count of records for one calendar month."""

    month: date
    n: int


@dataclass(frozen=True)
class AggregationResult:
    """All grouped outputs derived from one enriched record set.

    Attributes:
        monthly_summary: Counts per (month, council_area, age_group).
        totals_by_council: Counts per council area.
        totals_by_age_group: Counts per age group.
        counts_by_month: Counts per month, used by the monthly chart.
        total_records: Number of records aggregated.
    """

    monthly_summary: tuple[MonthlySummaryRow, ...]
    totals_by_council: tuple[CouncilTotalRow, ...]
    totals_by_age_group: tuple[AgeGroupTotalRow, ...]
    counts_by_month: tuple[MonthCountRow, ...]
    total_records: int

    def tables(self) -> dict[str, tuple[TableRow, ...]]:
        """Return every output table as plain rows keyed by table name.

        Row tuples follow the published column order of each table.
        """
        return {
            MONTHLY_SUMMARY_TABLE: tuple(astuple(row) for row in self.monthly_summary),
            TOTALS_BY_COUNCIL_TABLE: tuple(astuple(row) for row in self.totals_by_council),
            TOTALS_BY_AGE_GROUP_TABLE: tuple(astuple(row) for row in self.totals_by_age_group),
            COUNTS_BY_MONTH_TABLE: tuple(astuple(row) for row in self.counts_by_month),
        }


@dataclass(frozen=True)
class MonthlyUpdateResult:
    """Outcome of one completed monthly update run.

    Attributes:
        input_path: File selected and processed.
        aggregation: Aggregated outputs.
        artifact_paths: Files written to the output directory.
    """

    input_path: Path
    aggregation: AggregationResult
    artifact_paths: tuple[Path, ...]
