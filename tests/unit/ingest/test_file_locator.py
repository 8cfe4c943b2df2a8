"""Unit tests for latest input file discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.errors import NoInputFileError
from ingest.file_locator import locate_latest_file

_BASE_MTIME_NS = 1_735_689_600_000_000_000


def _touch(directory: Path, name: str, offset_seconds: int = 0) -> Path:
    path = directory / name
    path.write_text("date,age,council_area\n", encoding="utf-8")
    mtime_ns = _BASE_MTIME_NS + offset_seconds * 1_000_000_000
    os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


def test_locate_latest_file_picks_newest_modification_time(tmp_path: Path) -> None:
    """Locator should select the most recently modified candidate."""
    _touch(tmp_path, "january.csv", offset_seconds=0)
    newest = _touch(tmp_path, "march.tsv", offset_seconds=120)
    _touch(tmp_path, "february.xlsx", offset_seconds=60)

    assert locate_latest_file(tmp_path) == newest


def test_locate_latest_file_accepts_single_candidate_of_any_supported_case(
    tmp_path: Path,
) -> None:
    """A lone supported file should be chosen whatever its extension case."""
    only_file = _touch(tmp_path, "REPORT.XLS")

    assert locate_latest_file(tmp_path) == only_file


def test_locate_latest_file_ignores_unsupported_and_nested_files(tmp_path: Path) -> None:
    """Unsupported extensions and subdirectories should not be candidates."""
    expected = _touch(tmp_path, "deaths.txt", offset_seconds=0)
    _touch(tmp_path, "notes.json", offset_seconds=500)
    nested_dir = tmp_path / "archive"
    nested_dir.mkdir()
    _touch(nested_dir, "older_but_nested.csv", offset_seconds=900)

    assert locate_latest_file(tmp_path) == expected


def test_locate_latest_file_breaks_ties_by_name(tmp_path: Path) -> None:
    """Identical modification times should resolve to the smallest name."""
    _touch(tmp_path, "b_deaths.csv")
    expected = _touch(tmp_path, "a_deaths.csv")

    assert locate_latest_file(tmp_path) == expected


def test_locate_latest_file_raises_for_empty_directory(tmp_path: Path) -> None:
    """Locator should fail when no supported file exists."""
    _touch(tmp_path, "readme.md")

    with pytest.raises(NoInputFileError, match="No supported data files"):
        locate_latest_file(tmp_path)


def test_locate_latest_file_raises_for_missing_directory(tmp_path: Path) -> None:
    """A missing input directory should be reported as having no input."""
    with pytest.raises(NoInputFileError):
        locate_latest_file(tmp_path / "does-not-exist")
