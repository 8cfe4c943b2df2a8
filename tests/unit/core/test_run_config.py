"""Unit tests for YAML run-config parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import StatsConfig
from core.errors import StatsConfigError
from core.run_config import RunConfig, apply_run_config, load_run_config


def _write_config(tmp_path: Path, text: str) -> str:
    config_path = tmp_path / "monthly.yaml"
    config_path.write_text(text, encoding="utf-8")
    return str(config_path)


def test_load_run_config_reads_all_fields(tmp_path: Path) -> None:
    """Run config should parse directories and chart flag."""
    config_path = _write_config(
        tmp_path,
        "version: 1\ndata_dir: inbox\noutput_dir: published\nrender_charts: false\n",
    )

    run_config = load_run_config(config_path)

    assert run_config == RunConfig(
        version=1,
        data_dir="inbox",
        output_dir="published",
        render_charts=False,
    )


def test_load_run_config_rejects_unknown_keys(tmp_path: Path) -> None:
    """Run config should fail on keys it does not understand."""
    config_path = _write_config(tmp_path, "version: 1\nschedule: monthly\n")

    with pytest.raises(StatsConfigError, match="schedule"):
        load_run_config(config_path)


def test_load_run_config_rejects_unsupported_version(tmp_path: Path) -> None:
    """Run config should only accept version 1."""
    config_path = _write_config(tmp_path, "version: 2\n")

    with pytest.raises(StatsConfigError, match="version"):
        load_run_config(config_path)


def test_load_run_config_raises_for_missing_file(tmp_path: Path) -> None:
    """Run config should fail clearly when the file is absent."""
    with pytest.raises(StatsConfigError, match="does not exist"):
        load_run_config(str(tmp_path / "absent.yaml"))


def test_apply_run_config_overrides_only_given_values(tmp_path: Path) -> None:
    """Overlay should keep base values for fields the file leaves unset."""
    base = StatsConfig(data_dir=tmp_path / "data", output_dir=tmp_path / "out")

    updated = apply_run_config(base, RunConfig(version=1, render_charts=False))

    assert updated.data_dir == base.data_dir
    assert updated.output_dir == base.output_dir
    assert updated.render_charts is False
