"""Output verification workflow and report formatting.

This module re-reads a published output directory and checks that the
tables have the expected columns and mutually consistent totals.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Callable

import pandas as pd

from core.constants import (
    CSV_TABLE_NAMES,
    MONTHLY_SUMMARY_TABLE,
    TABLE_COLUMNS,
    TOTALS_BY_AGE_GROUP_TABLE,
    TOTALS_BY_COUNCIL_TABLE,
    VERIFICATION_REPORT_FILE_NAME,
)
from core.errors import StatsVerificationError
from core.verification_types import (
    VerificationCheckResult,
    VerificationOptions,
    VerificationReport,
    VerificationStatus,
)
from report.chart_writer import chart_paths
from report.csv_writer import csv_table_path

CheckOutcome = tuple[VerificationStatus, str]
CheckCallable = Callable[[Path], CheckOutcome]
CheckRow = tuple[str, str, CheckCallable]

__all__ = [
    "VerificationCheckResult",
    "VerificationOptions",
    "VerificationReport",
    "build_checks",
    "run_verification",
    "render_verification_report",
    "save_verification_report",
]


def run_verification(options: VerificationOptions) -> VerificationReport:
    """Run verification checks and return structured report.

    Raises:
        StatsVerificationError: If the output directory does not exist.
    """
    output_dir = Path(options.output_dir).expanduser().resolve()
    if not output_dir.is_dir():
        raise StatsVerificationError(
            f"Output directory {output_dir} does not exist. Run the monthly update first."
        )
    results = _run_checks(output_dir, build_checks(), options.fail_fast)
    return VerificationReport(output_dir=str(output_dir), checks=tuple(results))


def build_checks() -> tuple[CheckRow, ...]:
    """Build the ordered check list."""
    return (
        ("V001", "Published Tables", check_published_tables),
        ("V002", "Totals Consistency", check_totals_consistency),
        ("V003", "Chart Images", check_chart_images),
    )


def check_published_tables(output_dir: Path) -> CheckOutcome:
    """Validate every published CSV exists with the expected column order."""
    for table_name in CSV_TABLE_NAMES:
        frame = _load_table(output_dir, table_name)
        expected_columns = list(TABLE_COLUMNS[table_name])
        if list(frame.columns) != expected_columns:
            raise StatsVerificationError(
                f"Table '{table_name}' has columns {list(frame.columns)}; "
                f"expected {expected_columns}."
            )
    return "passed", f"tables={','.join(CSV_TABLE_NAMES)}"


def check_totals_consistency(output_dir: Path) -> CheckOutcome:
    """Validate summary, council, and age-group tables count the same records."""
    summary = _load_table(output_dir, MONTHLY_SUMMARY_TABLE)
    by_council = _load_table(output_dir, TOTALS_BY_COUNCIL_TABLE)
    by_age_group = _load_table(output_dir, TOTALS_BY_AGE_GROUP_TABLE)
    totals = {
        MONTHLY_SUMMARY_TABLE: int(summary["n"].sum()),
        TOTALS_BY_COUNCIL_TABLE: int(by_council["total_deaths"].sum()),
        TOTALS_BY_AGE_GROUP_TABLE: int(by_age_group["total_deaths_age"].sum()),
    }
    if len(set(totals.values())) != 1:
        raise StatsVerificationError(f"Table totals disagree: {totals}.")
    _assert_group_totals(summary, by_council, "council_area", "total_deaths")
    _assert_group_totals(summary, by_age_group, "age_group", "total_deaths_age")
    return "passed", f"total_records={totals[MONTHLY_SUMMARY_TABLE]}"


def check_chart_images(output_dir: Path) -> CheckOutcome:
    """Validate chart images exist when any chart was rendered."""
    expected_paths = chart_paths(output_dir)
    missing = [path.name for path in expected_paths if not path.is_file()]
    if len(missing) == len(expected_paths):
        return "skipped", "no chart images rendered"
    if missing:
        raise StatsVerificationError(f"Missing chart images: {', '.join(missing)}.")
    return "passed", f"charts={len(expected_paths)}"


def _assert_group_totals(
    summary: pd.DataFrame,
    totals: pd.DataFrame,
    key_column: str,
    total_column: str,
) -> None:
    expected = summary.groupby(key_column)["n"].sum().to_dict()
    actual = dict(zip(totals[key_column], totals[total_column]))
    if {str(key): int(value) for key, value in expected.items()} != {
        str(key): int(value) for key, value in actual.items()
    }:
        raise StatsVerificationError(
            f"Totals by {key_column} do not match the monthly summary: "
            f"expected {expected}, found {actual}."
        )


def _load_table(output_dir: Path, table_name: str) -> pd.DataFrame:
    table_path = csv_table_path(output_dir, table_name)
    if not table_path.is_file():
        raise StatsVerificationError(f"Missing table file {table_path}.")
    return pd.read_csv(table_path, dtype={"council_area": str, "age_group": str})


def _run_checks(
    output_dir: Path,
    checks: tuple[CheckRow, ...],
    fail_fast: bool,
) -> list[VerificationCheckResult]:
    results: list[VerificationCheckResult] = []
    for check_id, title, check_fn in checks:
        started_at = time.monotonic()
        status, details = _run_single_check(check_fn, output_dir)
        results.append(
            VerificationCheckResult(
                check_id=check_id,
                title=title,
                status=status,
                details=details,
                duration_seconds=round(time.monotonic() - started_at, 3),
            )
        )
        if status == "failed" and fail_fast:
            break
    return results


def _run_single_check(check_fn: CheckCallable, output_dir: Path) -> CheckOutcome:
    try:
        return check_fn(output_dir)
    except Exception as error:
        return "failed", str(error)


def render_verification_report(report: VerificationReport) -> str:
    """Render report into stable multi-line text for CLI output."""
    lines = [f"output_dir={report.output_dir}"]
    for row in report.checks:
        lines.append(
            f"[{row.status.upper()}] {row.check_id} {row.title} "
            f"({row.duration_seconds:.3f}s) :: {row.details}"
        )
    lines.append(f"passed={report.passed_count}")
    lines.append(f"failed={report.failed_count}")
    return "\n".join(lines)


def save_verification_report(report: VerificationReport) -> Path:
    """Persist report JSON into the verified output directory."""
    report_path = Path(report.output_dir) / VERIFICATION_REPORT_FILE_NAME
    payload = {
        "output_dir": report.output_dir,
        "checks": [
            {
                "check_id": row.check_id,
                "title": row.title,
                "status": row.status,
                "details": row.details,
                "duration_seconds": row.duration_seconds,
            }
            for row in report.checks
        ],
    }
    report_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return report_path
