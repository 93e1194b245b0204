"""Test utilities for the linediff test suite.

This module provides helpers for temporary directories and for building
line sequences and scripts in a compact form.
"""

import shutil
import tempfile
from pathlib import Path

from linediff.diff.models import EditScript


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def script_repr(script: EditScript) -> list[str]:
    """Compact textual form of a script, e.g. ``["Equal(1,1)", "Delete(2)"]``."""
    return [repr(op) for op in script]


def write_text_file(path: Path, content: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` verbatim (no newline translation) and return the path."""
    with open(path, "w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return path
