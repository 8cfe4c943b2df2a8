"""Chart rendering for monthly outputs.

This module draws the monthly trend line and the stacked monthly bar
charts by council area and by age group from the published tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pandas as pd

from core.constants import (
    AGE_GROUP_STACKED_PLOT_NAME,
    CHART_FILE_SUFFIX,
    CHART_SIZE_INCHES,
    COUNCIL_STACKED_PLOT_NAME,
    COUNTS_BY_MONTH_TABLE,
    MONTHLY_PLOT_NAME,
    MONTHLY_SUMMARY_TABLE,
    TABLE_COLUMNS,
)
from core.errors import StatsDependencyError, StatsOutputError
from core.logging_config import get_logger
from core.types import TableRow
from report.result_writer import BaseResultWriter

_LOGGER = get_logger(__name__)


class ChartWriter(BaseResultWriter):
    """Render PNG charts from the monthly tables.

    ``counts_by_month`` produces the monthly line chart and
    ``monthly_statistics`` produces both stacked bar charts. Empty
    tables produce no image.
    """

    def _write(self, table_name: str, rows: tuple[TableRow, ...]) -> None:
        if not rows:
            return
        frame = pd.DataFrame.from_records(list(rows), columns=list(TABLE_COLUMNS[table_name]))
        if table_name == COUNTS_BY_MONTH_TABLE:
            self._save_chart(MONTHLY_PLOT_NAME, _draw_monthly_line, frame)
        elif table_name == MONTHLY_SUMMARY_TABLE:
            self._save_chart(
                COUNCIL_STACKED_PLOT_NAME,
                _draw_stacked_bars,
                _stack_counts(frame, "council_area"),
                title="Deaths per Month by Council Area",
                legend_title="Council area",
            )
            self._save_chart(
                AGE_GROUP_STACKED_PLOT_NAME,
                _draw_stacked_bars,
                _stack_counts(frame, "age_group"),
                title="Deaths per Month by Age Group",
                legend_title="Age group",
            )

    def _save_chart(
        self,
        chart_name: str,
        draw: Callable[..., None],
        frame: pd.DataFrame,
        **draw_kwargs: str,
    ) -> None:
        plot = _import_pyplot()
        chart_path = self._output_dir / f"{chart_name}{CHART_FILE_SUFFIX}"
        figure, axis = plot.subplots(1, 1, figsize=CHART_SIZE_INCHES)
        try:
            draw(axis, frame, **draw_kwargs)
            figure.tight_layout()
            figure.savefig(chart_path)
        except OSError as error:
            raise StatsOutputError(
                f"Failed to write chart '{chart_name}' to {chart_path}: {error}. "
                "Check the output directory is writable."
            ) from error
        finally:
            plot.close(figure)
        self._record_path(chart_path)
        _LOGGER.info("chart_written", chart=chart_name, path=str(chart_path))


def _import_pyplot() -> Any:
    """Import pyplot on the non-interactive backend.

    Raises:
        StatsDependencyError: If matplotlib is missing.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plot
    except ImportError as error:
        raise StatsDependencyError(
            "Chart generation requires matplotlib. "
            "Install matplotlib or disable charts with --no-charts."
        ) from error
    return plot


def _stack_counts(summary: pd.DataFrame, category_column: str) -> pd.DataFrame:
    """Pivot the monthly summary into month rows and category columns."""
    return summary.pivot_table(
        index="month",
        columns=category_column,
        values="n",
        aggfunc="sum",
        fill_value=0,
    ).sort_index()


def _draw_monthly_line(axis: Any, counts: pd.DataFrame) -> None:
    """Render total records per month as a line."""
    labels = [_month_label(month) for month in counts["month"]]
    axis.plot(labels, counts["n"].tolist(), color="#0c8e7c", linewidth=2.2, marker="o")
    axis.set_title("Total Records per Month")
    axis.set_xlabel("Month")
    axis.set_ylabel("Number of records")
    axis.grid(alpha=0.3)


def _draw_stacked_bars(axis: Any, stacked: pd.DataFrame, title: str, legend_title: str) -> None:
    """Render one stacked bar per month, one segment per category."""
    labels = [_month_label(month) for month in stacked.index]
    bottoms = [0] * len(labels)
    for category in stacked.columns:
        heights = stacked[category].tolist()
        axis.bar(labels, heights, bottom=bottoms, label=str(category))
        bottoms = [bottom + height for bottom, height in zip(bottoms, heights)]
    axis.set_title(title)
    axis.set_xlabel("Month")
    axis.set_ylabel("Number of deaths")
    axis.legend(title=legend_title, fontsize="small")


def _month_label(month: Any) -> str:
    return f"{month:%Y-%m}"


def chart_paths(output_dir: Path) -> tuple[Path, ...]:
    """Return the image paths the chart writer can produce."""
    return tuple(
        output_dir / f"{chart_name}{CHART_FILE_SUFFIX}"
        for chart_name in (
            MONTHLY_PLOT_NAME,
            COUNCIL_STACKED_PLOT_NAME,
            AGE_GROUP_STACKED_PLOT_NAME,
        )
    )
