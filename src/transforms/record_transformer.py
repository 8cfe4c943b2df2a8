"""Record enrichment transform.

This module turns validated table rows into enriched records carrying
the calendar month and age group used by aggregation. Any unusable
row aborts the whole transform; rows are never skipped.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Mapping

import pandas as pd

from core.constants import (
    AGE_COLUMN,
    AGE_GROUP_BOUNDARIES,
    COUNCIL_AREA_COLUMN,
    DATE_COLUMN,
    OLDEST_AGE_GROUP,
    REQUIRED_COLUMNS,
    SUPPORTED_DATE_FORMATS,
)
from core.errors import DateParseError, RecordValueError
from core.logging_config import get_logger
from core.types import EnrichedRecord, ValidatedTable

_LOGGER = get_logger(__name__)


def transform_records(table: ValidatedTable) -> list[EnrichedRecord]:
    """Derive month and age group for every row of a table.

    Args:
        table: Schema-validated input table.

    Returns:
        Enriched records in input row order.

    Raises:
        DateParseError: If any row has an unparseable date.
        RecordValueError: If any row lacks a usable age or council area.
    """
    records = [
        enrich_row(row, row_number)
        for row_number, row in enumerate(table.frame.to_dict("records"), 1)
    ]
    _LOGGER.info(
        "records_transformed",
        path=str(table.source_path),
        record_count=len(records),
    )
    return records


def enrich_row(row: Mapping[str, object], row_number: int) -> EnrichedRecord:
    """Build one enriched record from a canonical-cased row mapping.

    Args:
        row: Column name to raw cell value.
        row_number: One-based data row index for error context.

    Returns:
        Enriched record.
    """
    record_date = parse_record_date(row[DATE_COLUMN], row_number)
    age = parse_age(row[AGE_COLUMN], row_number)
    return EnrichedRecord(
        row_number=row_number,
        date=record_date,
        month=truncate_to_month(record_date),
        age=age,
        age_group=classify_age(age),
        council_area=_parse_council_area(row[COUNCIL_AREA_COLUMN], row_number),
        extra_fields={
            name: (None if _is_missing(value) else value)
            for name, value in row.items()
            if name not in REQUIRED_COLUMNS
        },
    )


def parse_record_date(raw_value: object, row_number: int) -> date:
    """Parse a year-month-day calendar date.

    Accepts date objects and strings in the supported year-month-day
    layouts, with an optional trailing time component.

    Args:
        raw_value: Raw ``date`` cell value.
        row_number: One-based data row index for error context.

    Returns:
        Parsed calendar date.

    Raises:
        DateParseError: If the value is missing or not a valid date.
    """
    if _is_missing(raw_value):
        raise DateParseError(
            f"Row {row_number}: missing value in column '{DATE_COLUMN}'. "
            "Provide a year-month-day date such as 2025-01-31."
        )
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    text = str(raw_value).strip()
    date_text = text.replace("T", " ").split(" ", 1)[0]
    for date_format in SUPPORTED_DATE_FORMATS:
        if date_format == "%Y%m%d" and not (len(date_text) == 8 and date_text.isdigit()):
            continue
        try:
            return datetime.strptime(date_text, date_format).date()
        except ValueError:
            continue
    raise DateParseError(
        f"Row {row_number}: cannot parse '{raw_value}' in column '{DATE_COLUMN}' as a "
        "calendar date. Use a year-month-day value such as 2025-01-31."
    )


def truncate_to_month(value: date) -> date:
    """Return the first day of the value's calendar month."""
    return value.replace(day=1)


def classify_age(age: float) -> str:
    """Assign an age group label using ordered upper bounds.

    The first bound the age falls below wins. Ages below zero are not
    rejected and land in the youngest group.
    """
    for upper_bound, label in AGE_GROUP_BOUNDARIES:
        if age < upper_bound:
            return label
    return OLDEST_AGE_GROUP


def parse_age(raw_value: object, row_number: int) -> float:
    """Parse a numeric age value.

    Args:
        raw_value: Raw ``age`` cell value.
        row_number: One-based data row index for error context.

    Returns:
        Age as a float.

    Raises:
        RecordValueError: If the value is missing or not a finite number.
    """
    if _is_missing(raw_value):
        raise RecordValueError(
            f"Row {row_number}: missing value in column '{AGE_COLUMN}'. "
            "Every record needs a numeric age."
        )
    try:
        age = float(str(raw_value).strip())
    except ValueError as error:
        raise RecordValueError(
            f"Row {row_number}: cannot parse '{raw_value}' in column '{AGE_COLUMN}' as a number."
        ) from error
    if not math.isfinite(age):
        raise RecordValueError(
            f"Row {row_number}: age '{raw_value}' in column '{AGE_COLUMN}' is not finite."
        )
    return age


def _parse_council_area(raw_value: object, row_number: int) -> str:
    council_area = "" if _is_missing(raw_value) else str(raw_value).strip()
    if not council_area:
        raise RecordValueError(
            f"Row {row_number}: missing value in column '{COUNCIL_AREA_COLUMN}'. "
            "Every record needs a council area."
        )
    return council_area


def _is_missing(value: object) -> bool:
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    return isinstance(value, float) and math.isnan(value)
