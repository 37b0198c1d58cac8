from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared on-disk tree fixtures used by the walker, matcher and CLI tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree used across tests.

    Structure:
    /R
      a.txt        (5 bytes)
      /sub
        b.txt      (3 bytes)
        /sub2      (empty)
    """
    root = tmp_path / "R"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hello")

    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_bytes(b"abc")
    (sub / "sub2").mkdir()

    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """
    Create a wider, deeper tree with mixed extensions.

    Structure:
    /project
      README.md
      notes.txt
      /src
        main.py
        util.py
        /pkg
          core.py
          data.txt
      /docs
        guide.txt
        /img
          logo.png
    """
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "docs" / "img").mkdir(parents=True)

    (root / "README.md").write_text("# Project", encoding="utf-8")
    (root / "notes.txt").write_text("notes", encoding="utf-8")
    (root / "src" / "main.py").write_text("print('main')", encoding="utf-8")
    (root / "src" / "util.py").write_text("def util(): pass", encoding="utf-8")
    (root / "src" / "pkg" / "core.py").write_text("x = 1", encoding="utf-8")
    (root / "src" / "pkg" / "data.txt").write_text("1,2,3", encoding="utf-8")
    (root / "docs" / "guide.txt").write_text("guide", encoding="utf-8")
    (root / "docs" / "img" / "logo.png").write_bytes(b"\x89PNG\r\n")

    return root


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys produced by 'fstree.domain.config.get_default_config'.
    """
    return {
        "root_path": "/tmp/test_root",
        "pattern": "*.txt",
        "recursive": True,
        "follow_symlinks": True,
        "files_only_size": False,
        "human_readable": True,
        "log_level": "INFO",
    }
