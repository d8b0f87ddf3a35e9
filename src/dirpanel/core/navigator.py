"""
Directory navigator: panel state plus the listing pipeline.

Every command mutates the state and is followed by a full re-list of the
current directory. There is no caching and no background work; a command
is handled to completion before the next one arrives.

Modified: 2026-10-18
"""

import logging
import os
from typing import Optional

from dirpanel.core.exceptions import DirectoryReadError, FileOpenError
from dirpanel.core.formatting import DEFAULT_DATE_FORMAT, format_size, format_timestamp
from dirpanel.core.listing import HIDDEN_MARKER, filter_entries, read_directory, sort_entries
from dirpanel.core.models import (
    ColumnHeader,
    Command,
    CommandResult,
    DirectoryEntry,
    DirectoryView,
    EntryRow,
    GoUpCommand,
    NavigatorState,
    NoticeView,
    OpenFileCommand,
    OpenFolderCommand,
    SearchCommand,
    SortCommand,
    SortDirection,
    SortKey,
    View,
)
from dirpanel.core.workspace import EditorOpener, WorkspaceProvider

logger = logging.getLogger(__name__)

NO_WORKSPACE_MESSAGE = "No workspace folder open."


def is_filesystem_root(path: str) -> bool:
    """Check whether ``path`` is its own parent (``/``, ``C:\\``)."""
    return os.path.dirname(path) == path


class Navigator:
    """
    Owns one panel's state and renders it into view models.

    The five public commands are set_sort, set_search, enter_directory,
    open_file and go_up. Each returns nothing; call render() (or use
    dispatch(), which does both) to get the refreshed view.
    """

    def __init__(
        self,
        workspace: WorkspaceProvider,
        opener: Optional[EditorOpener] = None,
        start_directory: Optional[str] = None,
        hidden_marker: str = HIDDEN_MARKER,
        date_format: str = DEFAULT_DATE_FORMAT,
        size_placeholder: str = "-",
    ):
        """
        Initialize the navigator.

        Args:
            workspace: Workspace root provider
            opener: Document opener for files; defaults to EditorOpener()
            start_directory: Directory to show first instead of the workspace root
            hidden_marker: Names starting with this are never listed
            date_format: strftime pattern for the Created/Modified columns
            size_placeholder: Text shown for zero or unknown sizes
        """
        self.workspace = workspace
        self.opener = opener or EditorOpener()
        self.hidden_marker = hidden_marker
        self.date_format = date_format
        self.size_placeholder = size_placeholder

        initial = os.path.abspath(start_directory) if start_directory else workspace.root
        self.state = NavigatorState(current_directory=initial)

    # Commands

    def set_sort(self, key: SortKey) -> None:
        """Sort by ``key``; the active key flips direction instead."""
        if key is self.state.sort_key:
            self.state.sort_direction = self.state.sort_direction.flipped()
        else:
            self.state.sort_key = key
            self.state.sort_direction = SortDirection.ASCENDING
        logger.debug(f"Sort is now {self.state.sort_key.value} {self.state.sort_direction.name.lower()}")

    def set_search(self, text: str) -> None:
        """Replace the search text; an empty string clears the filter."""
        self.state.search_text = text

    def enter_directory(self, path: str) -> None:
        """
        Switch to ``path``.

        The path is not checked here; a bad one shows up as a read error
        on the next render.
        """
        self.state.current_directory = os.path.abspath(path)
        logger.debug(f"Entered {path}")

    def open_file(self, path: str) -> None:
        """
        Open ``path`` in the editor. State is not touched.

        Raises:
            FileOpenError: If the editor cannot open it
        """
        self.opener.open(path)

    def go_up(self) -> bool:
        """
        Move to the parent directory if the boundary policy allows it.

        Inside a workspace the parent must still be within the workspace
        root, except that the filesystem root itself is always reachable.
        Without a workspace there is no restriction.

        Returns:
            True if the current directory changed
        """
        current = self.state.current_directory
        if not current:
            return False

        parent = os.path.dirname(current)
        if parent == current:
            return False

        root = self.workspace.root
        if is_filesystem_root(parent) or not root or self.workspace.contains(parent):
            self.state.current_directory = parent
            logger.debug(f"Went up to {parent}")
            return True

        logger.debug(f"Refused to leave workspace {root} for {parent}")
        return False

    def dispatch(self, command: Command) -> CommandResult:
        """
        Apply one command and re-render.

        A failed file open comes back as the result's notification; it
        never changes the view.
        """
        notification = None

        if isinstance(command, SortCommand):
            self.set_sort(command.by)
        elif isinstance(command, SearchCommand):
            self.set_search(command.value)
        elif isinstance(command, OpenFolderCommand):
            self.enter_directory(command.path)
        elif isinstance(command, OpenFileCommand):
            try:
                self.open_file(command.path)
            except FileOpenError as e:
                logger.warning(f"{e}")
                notification = str(e)
        elif isinstance(command, GoUpCommand):
            self.go_up()
        else:
            raise TypeError(f"Unhandled command: {command!r}")

        return CommandResult(view=self.render(), notification=notification)

    # Listing pipeline

    @property
    def directory(self) -> Optional[str]:
        """Directory the next render lists."""
        return self.state.current_directory or self.workspace.root

    @property
    def show_up(self) -> bool:
        current = self.state.current_directory
        return bool(current) and current != self.workspace.root and not is_filesystem_root(current)

    def list_entries(self) -> list:
        """
        Read, filter and order the current directory.

        Raises:
            DirectoryReadError: If the directory cannot be read
        """
        entries = read_directory(self.directory, self.hidden_marker)
        entries = filter_entries(entries, self.state.search_text)
        return sort_entries(entries, self.state.sort_key, self.state.sort_direction)

    def render(self) -> View:
        """Run the listing pipeline and build the view model."""
        directory = self.directory
        if not directory:
            return NoticeView(NO_WORKSPACE_MESSAGE)

        try:
            entries = self.list_entries()
        except DirectoryReadError as e:
            logger.error(f"{e} ({directory})")
            return NoticeView(str(e), is_error=True, directory=directory, show_up=self.show_up)

        return DirectoryView(
            directory=directory,
            show_up=self.show_up,
            columns=self._columns(),
            rows=[self._row(entry) for entry in entries],
            entries=entries,
        )

    def _columns(self) -> list:
        columns = []
        for key in SortKey:
            active = key is self.state.sort_key
            columns.append(
                ColumnHeader(
                    key=key,
                    label=key.label,
                    active=active,
                    indicator=self.state.sort_direction.indicator if active else "",
                )
            )
        return columns

    def _row(self, entry: DirectoryEntry) -> EntryRow:
        return EntryRow(
            icon="folder" if entry.is_directory else "file",
            name=entry.name,
            size_text=format_size(entry.size_bytes, self.size_placeholder),
            created_text=format_timestamp(entry.created_at_millis, self.date_format),
            modified_text=format_timestamp(entry.modified_at_millis, self.date_format),
            path=entry.full_path,
            is_directory=entry.is_directory,
        )
