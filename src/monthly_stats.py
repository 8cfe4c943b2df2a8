"""Public SDK surface for monthly-stats.

This module provides a stable import path for scheduled jobs and
notebooks. It re-exports the pipeline entry point and typed models.
"""

from __future__ import annotations

from core.config import StatsConfig
from core.errors import (
    DateParseError,
    MalformedInputError,
    MonthlyStatsError,
    NoInputFileError,
    RecordValueError,
    SchemaValidationError,
    UnsupportedFileTypeError,
)
from core.types import AggregationResult, EnrichedRecord, MonthlyUpdateResult
from ingest.pipeline import run_monthly_update
from report.result_writer import ResultWriter
from transforms.aggregation import aggregate_records
from transforms.record_transformer import classify_age, truncate_to_month

__all__ = [
    "AggregationResult",
    "DateParseError",
    "EnrichedRecord",
    "MalformedInputError",
    "MonthlyStatsError",
    "MonthlyUpdateResult",
    "NoInputFileError",
    "RecordValueError",
    "ResultWriter",
    "SchemaValidationError",
    "StatsConfig",
    "UnsupportedFileTypeError",
    "aggregate_records",
    "classify_age",
    "run_monthly_update",
    "truncate_to_month",
]
