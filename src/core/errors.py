"""Monthly-stats exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import Sequence


class MonthlyStatsError(Exception):
    """Base exception for all monthly-stats failures."""

    stage = "pipeline"


class StatsConfigError(MonthlyStatsError):
    """Raised for invalid runtime configuration."""

    stage = "config"


class StatsIngestError(MonthlyStatsError):
    """Raised for input discovery, parsing, and schema failures."""

    stage = "ingest"


class NoInputFileError(StatsIngestError):
    """Raised when the input directory holds no supported file."""

    stage = "locate"


class UnsupportedFileTypeError(StatsIngestError):
    """Raised when a file extension has no registered parser."""

    stage = "read"


class MalformedInputError(StatsIngestError):
    """Raised when a recognized file cannot be parsed into a table."""

    stage = "read"


class SchemaValidationError(StatsIngestError):
    """Raised when required columns are absent from the input table."""

    stage = "validate"

    def __init__(self, message: str, missing_columns: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.missing_columns = tuple(missing_columns)


class StatsTransformError(MonthlyStatsError):
    """Raised for record transformation failures."""

    stage = "transform"


class DateParseError(StatsTransformError):
    """Raised when a row's date cannot be read as a calendar date."""


class RecordValueError(StatsTransformError):
    """Raised when a required row value is missing or not usable."""


class StatsOutputError(MonthlyStatsError):
    """Raised for result persistence failures."""

    stage = "output"


class StatsDependencyError(MonthlyStatsError):
    """Raised when an optional runtime dependency is missing."""

    stage = "dependency"


class StatsVerificationError(MonthlyStatsError):
    """Raised when output verification cannot run."""

    stage = "verify"
