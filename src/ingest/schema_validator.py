"""Schema normalization and required-column checks."""

from __future__ import annotations

from core.constants import REQUIRED_COLUMNS
from core.errors import SchemaValidationError
from core.logging_config import get_logger
from core.types import RawTable, ValidatedTable

_LOGGER = get_logger(__name__)


def validate_schema(table: RawTable) -> ValidatedTable:
    """Normalize column names and check required columns are present.

    The raw table is left untouched; the validated table carries a
    renamed copy of the frame plus the original header strings.

    Args:
        table: Parsed input table.

    Returns:
        Table with lower-cased column names.

    Raises:
        SchemaValidationError: If any required column is missing.
    """
    original_columns = tuple(str(column) for column in table.frame.columns)
    canonical_columns = [normalize_column_name(column) for column in original_columns]
    missing_columns = [column for column in REQUIRED_COLUMNS if column not in canonical_columns]
    if missing_columns:
        raise SchemaValidationError(
            f"Missing required columns in {table.source_path}: {', '.join(missing_columns)}. "
            f"Expected columns (case-insensitive): {', '.join(REQUIRED_COLUMNS)}. "
            f"Found columns: {', '.join(original_columns) or '<none>'}.",
            missing_columns=missing_columns,
        )
    frame = table.frame.copy()
    frame.columns = canonical_columns
    _LOGGER.info("schema_validated", path=str(table.source_path), columns=canonical_columns)
    return ValidatedTable(
        source_path=table.source_path,
        frame=frame,
        original_columns=original_columns,
    )


def normalize_column_name(column: str) -> str:
    """Return the canonical lower-cased form of a header."""
    return column.strip().lstrip("\ufeff").lower()
