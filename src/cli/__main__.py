"""Run the monthly-stats CLI via ``python -m cli`` for scheduler entries."""

from __future__ import annotations

from cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
