"""Typed YAML run-config parsing for monthly update runs.

This module loads optional YAML files that pin input and output
locations for scheduled runs, so a scheduler entry only has to name
one file. Values overlay the environment-derived ``StatsConfig``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, cast

from core.config import StatsConfig, parse_bool, resolve_dir
from core.constants import RUN_CONFIG_VERSION
from core.errors import StatsConfigError, StatsDependencyError

_ALLOWED_KEYS = frozenset({"version", "data_dir", "output_dir", "render_charts"})


@dataclass(frozen=True)
class RunConfig:
    """Validated run-config file contents."""

    version: int
    data_dir: str | None = None
    output_dir: str | None = None
    render_charts: bool | None = None


def load_run_config(config_path: str) -> RunConfig:
    """Load and validate a YAML run-config from disk.

    Args:
        config_path: File path to YAML run-config.

    Returns:
        Validated run-config object.

    Raises:
        StatsDependencyError: If PyYAML is unavailable.
        StatsConfigError: If file is invalid or schema checks fail.
    """
    payload = _load_yaml_payload(config_path)
    root_mapping = _expect_mapping(payload)
    _validate_root_keys(root_mapping)
    return RunConfig(
        version=_parse_version(root_mapping),
        data_dir=_optional_string(root_mapping, "data_dir"),
        output_dir=_optional_string(root_mapping, "output_dir"),
        render_charts=_optional_bool(root_mapping, "render_charts"),
    )


def apply_run_config(config: StatsConfig, run_config: RunConfig) -> StatsConfig:
    """Overlay run-config values onto a runtime config.

    Args:
        config: Base runtime configuration.
        run_config: Parsed run-config file.

    Returns:
        Config with file values taking precedence.
    """
    updated = config
    if run_config.data_dir is not None:
        updated = replace(updated, data_dir=resolve_dir(run_config.data_dir))
    if run_config.output_dir is not None:
        updated = replace(updated, output_dir=resolve_dir(run_config.output_dir))
    if run_config.render_charts is not None:
        updated = replace(updated, render_charts=run_config.render_charts)
    return updated


def _load_yaml_payload(config_path: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise StatsDependencyError(
            "YAML run-config support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.exists():
        raise StatsConfigError(
            f"Run config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise StatsConfigError(
            f"Failed to read run config at {config_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise StatsConfigError(
            f"Failed to parse YAML run config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise StatsConfigError(f"Run config at {config_file} is empty. Define at least 'version'.")
    return payload


def _expect_mapping(value: object) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise StatsConfigError(
            f"Invalid run config root: expected object mapping, got {type(value).__name__}."
        )
    for key in value:
        if not isinstance(key, str):
            raise StatsConfigError(
                f"Invalid run config root: expected string keys, got {type(key).__name__}."
            )
    return cast(Mapping[str, object], value)


def _validate_root_keys(root_mapping: Mapping[str, object]) -> None:
    unknown_keys = sorted(set(root_mapping) - _ALLOWED_KEYS)
    if unknown_keys:
        raise StatsConfigError(
            f"Unsupported run config keys: {', '.join(unknown_keys)}. "
            f"Allowed keys: {', '.join(sorted(_ALLOWED_KEYS))}."
        )


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int) or isinstance(raw_version, bool):
        raise StatsConfigError(
            f"Run config field 'version' must be an integer. Set version: {RUN_CONFIG_VERSION}."
        )
    if raw_version != RUN_CONFIG_VERSION:
        raise StatsConfigError(
            f"Unsupported run config version {raw_version}. Use version: {RUN_CONFIG_VERSION}."
        )
    return raw_version


def _optional_string(root_mapping: Mapping[str, object], key: str) -> str | None:
    value = root_mapping.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise StatsConfigError(f"Run config field '{key}' must be a non-empty string.")
    return value


def _optional_bool(root_mapping: Mapping[str, object], key: str) -> bool | None:
    value = root_mapping.get(key)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(value, f"run config field '{key}'")
    raise StatsConfigError(f"Run config field '{key}' must be a boolean.")
