"""Test utilities and helper functions.

Created: 2026-10-18
"""

import os
from pathlib import Path
from typing import Dict, List, Union

from dirpanel.core.exceptions import FileOpenError
from dirpanel.core.models import DirectoryEntry

TreeLayout = Dict[str, Union[str, bytes, int, "TreeLayout"]]


def make_tree(base: Path, layout: TreeLayout) -> Path:
    """Create files and folders under ``base``.

    Dict values become folders, ints become files of that many bytes,
    str/bytes become file contents.

    Example:
        make_tree(tmp_path, {"src": {"a.py": "x = 1\\n"}, "big.bin": 2048})
    """
    base.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = base / name
        if isinstance(value, dict):
            make_tree(path, value)
        elif isinstance(value, int):
            path.write_bytes(b"x" * value)
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value)
    return base


def set_mtime(path: Path, seconds: float) -> None:
    """Set both atime and mtime of ``path``."""
    os.utime(path, (seconds, seconds))


def create_test_entry(name: str, **overrides) -> DirectoryEntry:
    """Factory for DirectoryEntry objects with sensible defaults.

    Example:
        entry = create_test_entry("notes.txt", size_bytes=120)
    """
    defaults = {
        "name": name,
        "full_path": f"/data/{name}",
        "is_directory": False,
        "size_bytes": 0,
        "created_at_millis": 0,
        "modified_at_millis": 0,
    }
    defaults.update(overrides)
    return DirectoryEntry(**defaults)


class RecordingOpener:
    """Document opener that records paths instead of launching an editor."""

    def __init__(self, fail_with: str = ""):
        self.opened: List[str] = []
        self.fail_with = fail_with

    def open(self, path: str) -> None:
        if self.fail_with:
            raise FileOpenError(path, self.fail_with)
        self.opened.append(path)
