"""Unit tests for table publishing."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Sequence

import pytest

from core.types import EnrichedRecord, TableRow
from report.result_writer import BaseResultWriter, publish_results
from transforms.aggregation import aggregate_records


class _RecordingWriter:
    def __init__(self) -> None:
        self.emitted: list[tuple[str, tuple[TableRow, ...]]] = []

    @property
    def written_paths(self) -> tuple[Path, ...]:
        return ()

    def emit(self, table_name: str, rows: Sequence[TableRow]) -> None:
        self.emitted.append((table_name, tuple(rows)))


def test_publish_results_emits_every_table_once_to_every_writer() -> None:
    """Each writer should receive each table exactly once, in full."""
    record = EnrichedRecord(
        row_number=1,
        date=date(2025, 1, 5),
        month=date(2025, 1, 1),
        age=34,
        age_group="20-39",
        council_area="Glasgow City",
    )
    writers = [_RecordingWriter(), _RecordingWriter()]

    publish_results(aggregate_records([record]), writers)

    for writer in writers:
        assert [name for name, _ in writer.emitted] == [
            "monthly_statistics",
            "total_deaths_by_council",
            "total_deaths_by_age_group",
            "counts_by_month",
        ]
        assert writer.emitted[1] == ("total_deaths_by_council", (("Glasgow City", 1),))


def test_base_result_writer_requires_write_hook(tmp_path: Path) -> None:
    """Writers must implement the table write hook before they can be built."""
    with pytest.raises(TypeError):
        BaseResultWriter(tmp_path)
