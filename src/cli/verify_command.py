"""Verification command wiring for monthly-stats CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import StatsConfig
from core.verification import (
    VerificationOptions,
    render_verification_report,
    run_verification,
    save_verification_report,
)


def add_verify_command(subparsers: Any) -> None:
    """Register verify subcommand."""
    parser = subparsers.add_parser(
        "verify",
        help="Check published outputs for expected columns and consistent totals",
    )
    parser.add_argument(
        "--output-dir",
        dest="verify_output_dir",
        help="Output directory to verify; overrides MONTHLY_STATS_OUTPUT_DIR",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop after the first failed check",
    )


def run_verify_command(config: StatsConfig, args: argparse.Namespace) -> int:
    """Execute verification workflow and print check report."""
    options = VerificationOptions(
        output_dir=str(config.output_dir),
        fail_fast=args.fail_fast,
    )
    report = run_verification(options)
    report_path = save_verification_report(report)
    print(render_verification_report(report))
    print(f"report_path={report_path}")
    return 0 if report.failed_count == 0 else 1
