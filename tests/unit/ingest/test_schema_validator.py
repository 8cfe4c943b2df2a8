"""Unit tests for schema normalization and required columns."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from core.errors import SchemaValidationError
from core.types import RawTable
from ingest.schema_validator import validate_schema


def _raw_table(columns: list[str]) -> RawTable:
    frame = pd.DataFrame([["x"] * len(columns)], columns=columns, dtype=str)
    return RawTable(source_path=Path("deaths.csv"), table_format="csv", frame=frame)


@pytest.mark.parametrize("date_header", ["DATE", "Date", "date"])
def test_validate_schema_accepts_any_header_case(date_header: str) -> None:
    """Required columns should match regardless of letter case."""
    validated = validate_schema(_raw_table([date_header, "Age", "COUNCIL_AREA"]))

    assert validated.columns == ("date", "age", "council_area")


def test_validate_schema_keeps_original_headers_and_extra_columns() -> None:
    """Validation should pass extra columns through and leave the raw frame untouched."""
    raw_table = _raw_table(["Date", "Age", "Council_Area", "Sex"])

    validated = validate_schema(raw_table)

    assert validated.columns == ("date", "age", "council_area", "sex")
    assert validated.original_columns == ("Date", "Age", "Council_Area", "Sex")
    assert list(raw_table.frame.columns) == ["Date", "Age", "Council_Area", "Sex"]


def test_validate_schema_identifies_missing_columns() -> None:
    """Missing required columns should be listed alongside found columns."""
    with pytest.raises(SchemaValidationError) as error_info:
        validate_schema(_raw_table(["Date", "Region"]))

    assert error_info.value.missing_columns == ("age", "council_area")
    message = str(error_info.value)
    assert "Expected columns (case-insensitive): date, age, council_area" in message
    assert "Found columns: Date, Region" in message
