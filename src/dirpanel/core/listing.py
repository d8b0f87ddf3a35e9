"""
Directory reading, folder sizing, filtering and ordering.

The pieces of the listing pipeline that touch the filesystem or reorder
entries. The Navigator strings them together.

Modified: 2026-10-18
"""

import logging
import os
import stat
from typing import List, Tuple

from dirpanel.core.exceptions import DirectoryReadError
from dirpanel.core.models import DirectoryEntry, SortDirection, SortKey

logger = logging.getLogger(__name__)

HIDDEN_MARKER = "."


def is_hidden(name: str, hidden_marker: str = HIDDEN_MARKER) -> bool:
    """Check whether a name is excluded from listings."""
    return bool(hidden_marker) and name.startswith(hidden_marker)


def folder_size(path: str) -> int:
    """
    Total size in bytes of every file below ``path``.

    Walks the tree with an explicit stack. Any directory or file that cannot
    be read contributes 0; nothing is raised. Symlinked directories are not
    followed.
    """
    total = 0
    pending = [path]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as children:
                for child in children:
                    try:
                        if child.is_dir(follow_symlinks=False):
                            pending.append(child.path)
                        elif child.is_file():
                            total += child.stat().st_size
                    except OSError as e:
                        logger.debug(f"Skipping {child.path} while sizing: {e}")
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {current}: {e}")

    return total


def _created_millis(st: os.stat_result) -> int:
    # st_birthtime exists on macOS and BSD; elsewhere ctime is the closest match
    created = getattr(st, "st_birthtime", None)
    if created is None:
        created = st.st_ctime
    return int(created * 1000)


def read_entry(child: os.DirEntry) -> DirectoryEntry:
    """
    Build a DirectoryEntry from a scandir result.

    A failing stat leaves size and timestamps at zero.
    """
    try:
        is_directory = child.is_dir()
    except OSError:
        is_directory = False

    entry = DirectoryEntry(
        name=child.name,
        full_path=os.path.abspath(child.path),
        is_directory=is_directory,
    )

    try:
        st = child.stat()
    except OSError as e:
        logger.debug(f"Could not stat {child.path}: {e}")
        st = None

    if st is not None:
        entry.created_at_millis = _created_millis(st)
        entry.modified_at_millis = int(st.st_mtime * 1000)
        if not is_directory and stat.S_ISREG(st.st_mode):
            entry.size_bytes = st.st_size

    if is_directory:
        entry.size_bytes = folder_size(entry.full_path)

    return entry


def read_directory(directory: str, hidden_marker: str = HIDDEN_MARKER) -> List[DirectoryEntry]:
    """
    Read the visible children of a directory.

    Args:
        directory: Directory to list
        hidden_marker: Names starting with this are skipped

    Returns:
        Unordered list of DirectoryEntry objects

    Raises:
        DirectoryReadError: If the directory itself cannot be read
    """
    try:
        with os.scandir(directory) as children:
            return [
                read_entry(child)
                for child in children
                if not is_hidden(child.name, hidden_marker)
            ]
    except OSError as e:
        raise DirectoryReadError(directory, e.strerror or str(e)) from e


def filter_entries(entries: List[DirectoryEntry], search_text: str) -> List[DirectoryEntry]:
    """Keep entries whose name contains ``search_text``, ignoring case."""
    if not search_text:
        return list(entries)
    query = search_text.lower()
    return [entry for entry in entries if query in entry.name.lower()]


def _sort_value(entry: DirectoryEntry, key: SortKey) -> Tuple:
    # Ties fall back to the name so repeated listings come out identical
    name = (entry.name.casefold(), entry.name)
    if key is SortKey.NAME:
        return name
    if key is SortKey.SIZE:
        return (entry.size_bytes, *name)
    if key is SortKey.CREATED_AT:
        return (entry.created_at_millis, *name)
    if key is SortKey.MODIFIED_AT:
        return (entry.modified_at_millis, *name)
    raise ValueError(f"Unhandled sort key: {key}")


def sort_entries(
    entries: List[DirectoryEntry],
    key: SortKey,
    direction: SortDirection = SortDirection.ASCENDING,
) -> List[DirectoryEntry]:
    """
    Order entries by a column, directories first.

    The folder/file partition ignores the direction; only the order inside
    each group is reversed for a descending sort.
    """
    ordered = sorted(
        entries,
        key=lambda entry: _sort_value(entry, key),
        reverse=direction is SortDirection.DESCENDING,
    )
    # sorted() is stable, so this keeps the column order within each group
    return sorted(ordered, key=lambda entry: not entry.is_directory)
