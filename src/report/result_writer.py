"""Writer interface and table publishing.

This module defines the writer contract used by the pipeline and the
publishing loop that hands every table to every writer exactly once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol, Sequence

from core.errors import StatsOutputError
from core.types import AggregationResult, TableRow


class ResultWriter(Protocol):
    """Sink for named output tables."""

    @property
    def written_paths(self) -> tuple[Path, ...]:
        """Files produced so far."""
        ...

    def emit(self, table_name: str, rows: Sequence[TableRow]) -> None:
        """Receive one complete table."""
        ...


class BaseResultWriter(ABC):
    """Writer base that rejects repeated tables and tracks written files."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir
        self._emitted_tables: set[str] = set()
        self._written_paths: list[Path] = []

    @property
    def written_paths(self) -> tuple[Path, ...]:
        """Files produced so far, in write order."""
        return tuple(self._written_paths)

    def emit(self, table_name: str, rows: Sequence[TableRow]) -> None:
        """Write one complete table.

        Args:
            table_name: Output table identifier.
            rows: Every row of the table in column order.

        Raises:
            StatsOutputError: If the table was already emitted or cannot be written.
        """
        if table_name in self._emitted_tables:
            raise StatsOutputError(
                f"Table '{table_name}' was already emitted to {type(self).__name__}. "
                "Each table must be written exactly once per run."
            )
        self._emitted_tables.add(table_name)
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._write(table_name, tuple(rows))

    @abstractmethod
    def _write(self, table_name: str, rows: tuple[TableRow, ...]) -> None:
        """Persist one table the writer has not seen before."""

    def _record_path(self, path: Path) -> None:
        self._written_paths.append(path)


def publish_results(result: AggregationResult, writers: Sequence[ResultWriter]) -> tuple[Path, ...]:
    """Emit every aggregation table to every writer.

    Args:
        result: Aggregation outputs.
        writers: Writers receiving the tables.

    Returns:
        All files written, in writer order.
    """
    tables = result.tables()
    for writer in writers:
        for table_name, rows in tables.items():
            writer.emit(table_name, rows)
    return tuple(path for writer in writers for path in writer.written_paths)
