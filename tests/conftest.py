from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A helper fixture that materializes directory trees from a layout dict.
3. A recording progress tracker shared by scanner and engine tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Helpers
# -----------------------------------------------------------------------------
class RecordingProgress:
    """ProgressTracker double that records every call."""

    def __init__(self) -> None:
        self.calls: List[str] = []
        self.total = None
        self.completed = 0

    def start(self, total: int) -> None:
        self.calls.append("start")
        self.total = total

    def advance(self, step: int = 1) -> None:
        self.completed += step

    def stop(self) -> None:
        self.calls.append("stop")


def _materialize(base: Path, layout: Dict[str, Any]) -> None:
    """Create files (str values) and folders (dict values) under base."""
    for name, value in layout.items():
        if isinstance(value, dict):
            folder = base / name
            folder.mkdir()
            _materialize(folder, value)
        else:
            (base / name).write_text(value, encoding="utf-8")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Return a factory building a directory tree inside tmp_path.

    Example:
        make_tree({"src": {"main.py": ""}, "README.md": ""})
    """
    def _factory(layout: Dict[str, Any], name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir()
        _materialize(root, layout)
        return root

    return _factory


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors 'foldermap.domain.config.get_default_config'.
    """
    return {
        "target_path": str(tmp_path / "project"),
        "output_dir": str(tmp_path / "out"),
        "json_indent": 2,
        "show_progress": False,
        "dry_run": False,
        "save_log": False,
    }
