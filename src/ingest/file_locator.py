"""Latest input file discovery.

This module scans the input directory for supported tabular files
and selects the most recently modified one.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import SUPPORTED_INPUT_EXTENSIONS
from core.errors import NoInputFileError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def locate_latest_file(data_dir: Path) -> Path:
    """Return the newest supported file in a directory.

    The scan is non-recursive. When several files share the newest
    modification time, the lexicographically smallest name wins.

    Args:
        data_dir: Directory holding monthly input files.

    Returns:
        Path of the selected file.

    Raises:
        NoInputFileError: If no supported file exists in the directory.
    """
    candidates = list_supported_files(data_dir)
    if not candidates:
        raise NoInputFileError(
            f"No supported data files found in {data_dir}. "
            f"Add a file with one of the extensions: {', '.join(SUPPORTED_INPUT_EXTENSIONS)}."
        )
    latest_path = min(candidates, key=_recency_sort_key)
    _LOGGER.info(
        "input_file_selected",
        path=str(latest_path),
        candidate_count=len(candidates),
    )
    return latest_path


def list_supported_files(data_dir: Path) -> list[Path]:
    """List regular files with supported extensions, sorted by name.

    A missing directory yields an empty list.
    """
    if not data_dir.is_dir():
        return []
    return sorted(
        path for path in data_dir.iterdir() if path.is_file() and is_supported_path(path)
    )


def is_supported_path(path: Path) -> bool:
    """Return whether a path has a supported extension, ignoring case."""
    return path.suffix.lower().lstrip(".") in SUPPORTED_INPUT_EXTENSIONS


def _recency_sort_key(path: Path) -> tuple[int, str]:
    return (-path.stat().st_mtime_ns, path.name)
