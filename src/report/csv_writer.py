"""CSV persistence for published summary tables."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from core.constants import CSV_TABLE_NAMES, TABLE_COLUMNS
from core.errors import StatsOutputError
from core.logging_config import get_logger
from core.types import TableRow
from report.result_writer import BaseResultWriter

_LOGGER = get_logger(__name__)


class CsvTableWriter(BaseResultWriter):
    """Write the published summary tables as ``<table_name>.csv`` files.

    Tables outside the published set, such as the month-only counts
    used for charting, are accepted and ignored.
    """

    def _write(self, table_name: str, rows: tuple[TableRow, ...]) -> None:
        if table_name not in CSV_TABLE_NAMES:
            return
        table_path = csv_table_path(self._output_dir, table_name)
        frame = pd.DataFrame.from_records(list(rows), columns=list(TABLE_COLUMNS[table_name]))
        try:
            frame.to_csv(table_path, index=False)
        except OSError as error:
            raise StatsOutputError(
                f"Failed to write table '{table_name}' to {table_path}: {error}. "
                "Check the output directory is writable."
            ) from error
        self._record_path(table_path)
        _LOGGER.info("table_written", table=table_name, path=str(table_path), row_count=len(rows))


def csv_table_path(output_dir: Path, table_name: str) -> Path:
    """Return the CSV path used for a published table."""
    return output_dir / f"{table_name}.csv"
