"""Tabular file readers for ingestion.

This module resolves a file extension to a closed set of table formats
and parses the file with the matching pandas reader. Every cell is read
as a string so type interpretation happens in the transform stage; only
empty cells and the literal NA count as missing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import pandas as pd

from core.constants import MISSING_CELL_VALUES, SUPPORTED_INPUT_EXTENSIONS
from core.errors import (
    MalformedInputError,
    StatsDependencyError,
    UnsupportedFileTypeError,
)
from core.logging_config import get_logger
from core.types import RawTable, TableFormat

_LOGGER = get_logger(__name__)

EXTENSION_FORMATS: Mapping[str, TableFormat] = {
    "csv": "csv",
    "tsv": "tsv",
    "txt": "tsv",
    "xlsx": "excel",
    "xls": "excel",
}


def resolve_table_format(path: Path) -> TableFormat:
    """Map a file extension onto its table format.

    Args:
        path: Input file path.

    Returns:
        Table format for the extension.

    Raises:
        UnsupportedFileTypeError: If the extension has no parser.
    """
    extension = path.suffix.lower().lstrip(".")
    table_format = EXTENSION_FORMATS.get(extension)
    if table_format is None:
        raise UnsupportedFileTypeError(
            f"Unsupported file type: '{extension or '<none>'}' for {path}. "
            f"Supported: {', '.join(SUPPORTED_INPUT_EXTENSIONS)}."
        )
    return table_format


def read_table(path: Path) -> RawTable:
    """Parse a supported file into a raw table.

    Args:
        path: Input file path.

    Returns:
        Raw table with header-derived column names.

    Raises:
        UnsupportedFileTypeError: If the extension has no parser.
        MalformedInputError: If the file cannot be parsed.
        StatsDependencyError: If the Excel engine for the file is missing.
    """
    table_format = resolve_table_format(path)
    parser = _PARSERS[table_format]
    try:
        frame = parser(path)
    except (
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
        UnicodeDecodeError,
        ValueError,
        OSError,
    ) as error:
        raise MalformedInputError(
            f"Failed to read {table_format} file {path}: {error}. "
            "Check the file is a valid, non-empty table and retry."
        ) from error
    except ImportError as error:
        raise StatsDependencyError(
            f"Reading {path.name} requires an Excel engine that is not installed. "
            "Install openpyxl for .xlsx files or xlrd for .xls files."
        ) from error
    _LOGGER.info(
        "table_read",
        path=str(path),
        table_format=table_format,
        row_count=len(frame.index),
        column_count=len(frame.columns),
    )
    return RawTable(source_path=path, table_format=table_format, frame=frame)


def _read_csv(path: Path) -> pd.DataFrame:
    return pd.read_csv(
        path, sep=",", dtype=str, keep_default_na=False, na_values=MISSING_CELL_VALUES
    )


def _read_tsv(path: Path) -> pd.DataFrame:
    return pd.read_csv(
        path, sep="\t", dtype=str, keep_default_na=False, na_values=MISSING_CELL_VALUES
    )


def _read_excel(path: Path) -> pd.DataFrame:
    """Read the first sheet, reporting any engine parse failure as malformed input."""
    try:
        return pd.read_excel(
            path,
            sheet_name=0,
            dtype=str,
            keep_default_na=False,
            na_values=MISSING_CELL_VALUES,
        )
    except ImportError:
        raise
    except Exception as error:
        raise MalformedInputError(
            f"Failed to read excel file {path}: {error}. "
            "Check the file is a valid, non-empty workbook and retry."
        ) from error


_PARSERS: Mapping[TableFormat, Callable[[Path], pd.DataFrame]] = {
    "csv": _read_csv,
    "tsv": _read_tsv,
    "excel": _read_excel,
}
