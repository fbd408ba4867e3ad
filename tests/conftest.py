from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture(scope="session", autouse=True)
def _add_repo_root_to_syspath() -> None:
    """Make local packages importable when running tests from `tests/`.

    Ensure the repo root is on `sys.path` so `import schedlab` and
    `import runner` work without an install.
    """

    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


@pytest.fixture
def process_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a process list into tmp_path and return its path."""

    def _write(text: str, name: str = "processes.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
