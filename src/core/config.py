"""Runtime configuration model for monthly-stats.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_DIR, DEFAULT_OUTPUT_DIR
from core.errors import StatsConfigError

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass(frozen=True)
class StatsConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory scanned for the latest input file.
        output_dir: Directory receiving tables and charts.
        render_charts: Whether chart images are produced.
    """

    data_dir: Path
    output_dir: Path
    render_charts: bool = True

    @classmethod
    def from_env(cls) -> "StatsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StatsConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv("MONTHLY_STATS_DATA_DIR", str(DEFAULT_DATA_DIR))
        output_dir_value = os.getenv("MONTHLY_STATS_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        render_charts_value = os.getenv("MONTHLY_STATS_RENDER_CHARTS", "true")
        return cls(
            data_dir=resolve_dir(data_dir_value),
            output_dir=resolve_dir(output_dir_value),
            render_charts=parse_bool(render_charts_value, "MONTHLY_STATS_RENDER_CHARTS"),
        )


def resolve_dir(raw_value: str) -> Path:
    """Expand and resolve a configured directory path."""
    return Path(raw_value).expanduser().resolve()


def parse_bool(raw_value: str, setting_name: str) -> bool:
    """Parse a boolean flag value.

    Args:
        raw_value: Raw string from environment or file.
        setting_name: Setting name used in error messages.

    Returns:
        Parsed boolean.

    Raises:
        StatsConfigError: If value is not a recognized boolean word.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise StatsConfigError(
        f"Invalid {setting_name} value: expected a boolean, got '{raw_value}'. "
        f"Use one of: {', '.join(_TRUE_VALUES + _FALSE_VALUES)}."
    )
