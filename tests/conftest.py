"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

for _import_root in (_PROJECT_ROOT / "src", _PROJECT_ROOT):
    if str(_import_root) not in sys.path:
        sys.path.insert(0, str(_import_root))


@pytest.fixture(autouse=True)
def _isolate_stats_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer MONTHLY_STATS_* settings out of test runs."""
    for variable in (
        "MONTHLY_STATS_DATA_DIR",
        "MONTHLY_STATS_OUTPUT_DIR",
        "MONTHLY_STATS_RENDER_CHARTS",
    ):
        monkeypatch.delenv(variable, raising=False)
