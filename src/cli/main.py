"""Monthly-stats CLI entry points.

This module exposes the monthly update and output verification commands.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Any, Sequence

from cli.verify_command import add_verify_command, run_verify_command
from core.config import StatsConfig, resolve_dir
from core.constants import SUCCESS_MESSAGE
from core.errors import MonthlyStatsError
from core.logging_config import get_logger
from core.run_config import apply_run_config, load_run_config
from ingest.pipeline import run_monthly_update

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="monthly-stats",
        description="Monthly statistics pipeline CLI",
    )
    parser.add_argument("--config", help="Optional YAML run-config file")
    parser.add_argument("--output-dir", help="Override MONTHLY_STATS_OUTPUT_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_run_command(subparsers)
    add_verify_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the monthly-stats CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
        if args.command == "run":
            return _run_update_command(config)
        if args.command == "verify":
            return run_verify_command(config, args)
    except MonthlyStatsError as error:
        _LOGGER.error("monthly_update_failed", stage=error.stage, error=str(error))
        print(f"error stage={error.stage}: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> StatsConfig:
    """Resolve config from environment, optional YAML file, then flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Effective runtime configuration.
    """
    config = StatsConfig.from_env()
    if args.config:
        config = apply_run_config(config, load_run_config(args.config))
    output_dir = getattr(args, "verify_output_dir", None) or args.output_dir
    if output_dir:
        config = replace(config, output_dir=resolve_dir(output_dir))
    if getattr(args, "data_dir", None):
        config = replace(config, data_dir=resolve_dir(args.data_dir))
    if getattr(args, "no_charts", False):
        config = replace(config, render_charts=False)
    return config


def _run_update_command(config: StatsConfig) -> int:
    """Handle run command.

    Args:
        config: Effective runtime configuration.

    Returns:
        Exit code.
    """
    result = run_monthly_update(config)
    print(f"input_path={result.input_path}")
    print(f"total_records={result.aggregation.total_records}")
    for artifact_path in result.artifact_paths:
        print(f"artifact={artifact_path}")
    print(SUCCESS_MESSAGE)
    return 0


def _add_run_command(subparsers: Any) -> None:
    """Register run subcommand."""
    parser = subparsers.add_parser(
        "run",
        help="Summarise the latest input file into tables and charts",
    )
    parser.add_argument("--data-dir", help="Override MONTHLY_STATS_DATA_DIR for this run")
    parser.add_argument(
        "--no-charts",
        action="store_true",
        help="Write tables only, without chart images",
    )
