"""Main dirpanel TUI application.

Hosts one Navigator and renders its views. Widget gestures arrive as
messages and are forwarded to the navigator as panel commands.

Modified: 2026-10-18
"""

import asyncio
from contextlib import nullcontext
from pathlib import Path
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Header, Static

from ..core.models import (
    Command,
    DirectoryView,
    GoUpCommand,
    OpenFileCommand,
    OpenFolderCommand,
    SearchCommand,
    SortCommand,
    SortKey,
    View,
)
from ..core.navigator import Navigator
from ..core.workspace import EditorOpener, WorkspaceProvider
from ..config.settings import Settings

from .ui.directory_table import DirectoryTable
from .ui.path_header import PathHeader
from .ui.search_input import SearchInput
from .ui.status_bar import StatusBar

from .messages import (
    FileOpened,
    FolderOpened,
    GoUpRequested,
    SearchChanged,
    SortRequested,
)
from .keybindings import registry


logger = logging.getLogger(__name__)


class DirPanelApp(App):
    """Main application class for dirpanel."""

    TITLE = "dirpanel"
    SUB_TITLE = "Directory Browser"

    CSS = """
    #main-container {
        height: 1fr;
    }

    #notice {
        width: 100%;
        height: 100%;
        padding: 1 2;
        color: $text-muted;
    }

    #notice.error {
        color: $error;
    }
    """

    BINDINGS = registry.get_bindings()

    def __init__(
        self,
        settings: Optional[Settings] = None,
        workspace: Optional[WorkspaceProvider] = None,
        start_directory: Optional[str] = None,
        navigator: Optional[Navigator] = None,
    ):
        """Initialize the application.

        Args:
            settings: Loaded settings; defaults are loaded when omitted
            workspace: Workspace root provider
            start_directory: Directory to show first
            navigator: Pre-built navigator, mainly for tests
        """
        super().__init__()

        self.settings = settings or Settings.load()

        if navigator is None:
            workspace = workspace or WorkspaceProvider.from_settings(self.settings)
            navigator = Navigator(
                workspace,
                opener=EditorOpener(
                    editor=self.settings.editor.command,
                    suspend=self._editor_suspend,
                ),
                start_directory=start_directory,
                hidden_marker=self.settings.display.hidden_marker,
                date_format=self.settings.display.date_format,
                size_placeholder=self.settings.display.size_placeholder,
            )
        self.navigator = navigator
        self.view: Optional[View] = None

        # UI components
        self.path_header: Optional[PathHeader] = None
        self.search_input: Optional[SearchInput] = None
        self.table: Optional[DirectoryTable] = None
        self.notice: Optional[Static] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()

        self.path_header = PathHeader(id="path-header")
        yield self.path_header

        self.search_input = SearchInput(
            debounce=self.settings.behavior.search_debounce,
            id="search-input",
        )
        yield self.search_input

        with Container(id="main-container"):
            self.table = DirectoryTable(id="directory-table")
            yield self.table
            self.notice = Static("", id="notice", markup=False)
            yield self.notice

        self.status_bar = StatusBar(hints=registry.hint_text(), id="status-bar")
        yield self.status_bar

    def on_mount(self) -> None:
        """Render the starting directory."""
        self.show_view(self.navigator.render())
        if self.table:
            self.table.focus()

    def _editor_suspend(self):
        # Headless runs (tests) have no terminal to hand over
        if self.is_headless:
            return nullcontext()
        return self.suspend()

    # Rendering

    def show_view(self, view: View) -> None:
        """Display a view model produced by the navigator."""
        self.view = view

        if isinstance(view, DirectoryView):
            self.path_header.update_path(view.directory, view.show_up)
            self.notice.display = False
            self.table.display = True
            self.table.show_view(view)

            self.status_bar.update_context(len(view.rows), self.navigator.state.search_text)
            for column in view.columns:
                if column.active:
                    self.status_bar.update_sort(column.label, column.indicator)
            return

        self.path_header.update_path(view.directory or "", view.show_up)
        self.table.display = False
        self.notice.display = True
        self.notice.set_class(view.is_error, "error")
        self.notice.update(view.message)
        self.status_bar.update_context(0, error=view.is_error)

    def run_command(self, command: Command) -> None:
        """Send one command to the navigator and show the result."""
        try:
            result = self.navigator.dispatch(command)
        except Exception as e:
            logger.error(f"Error handling {command!r}: {e}", exc_info=True)
            self.notify(f"Error: {e}", severity="error")
            return

        self.show_view(result.view)
        if result.notification:
            self.notify(result.notification, title="Open file", severity="error", timeout=5)

    # Action handlers

    def action_sort(self, key: str) -> None:
        """Sort by a column."""
        self.run_command(SortCommand(SortKey(key)))

    def action_go_up(self) -> None:
        """Go to the parent directory."""
        self.run_command(GoUpCommand())

    def action_search(self) -> None:
        """Focus the search box."""
        if self.search_input:
            self.search_input.focus_input()

    def action_clear_search(self) -> None:
        """Clear the search box and return to the table."""
        if self.search_input:
            self.search_input.clear()
        if self.table:
            self.table.focus()

    def action_refresh(self) -> None:
        """Re-list the current directory."""
        self.show_view(self.navigator.render())

    # Message handlers

    def on_sort_requested(self, message: SortRequested) -> None:
        self.run_command(SortCommand(message.by))

    def on_search_changed(self, message: SearchChanged) -> None:
        self.run_command(SearchCommand(message.value))

    def on_folder_opened(self, message: FolderOpened) -> None:
        self.run_command(OpenFolderCommand(message.path))

    def on_file_opened(self, message: FileOpened) -> None:
        self.run_command(OpenFileCommand(message.path))

    def on_go_up_requested(self, message: GoUpRequested) -> None:
        self.run_command(GoUpCommand())


async def run_app(
    settings: Optional[Settings] = None,
    workspace_root: Optional[str] = None,
    start_directory: Optional[Path] = None,
    no_workspace: bool = False,
) -> None:
    """Run the dirpanel TUI application.

    Args:
        settings: Loaded settings
        workspace_root: Explicit workspace root
        start_directory: Directory to show first
        no_workspace: Run without a workspace root
    """
    settings = settings or Settings.load()
    if no_workspace:
        workspace = WorkspaceProvider(None)
    else:
        workspace = WorkspaceProvider.from_settings(settings, override=workspace_root)

    app = DirPanelApp(
        settings=settings,
        workspace=workspace,
        start_directory=str(start_directory) if start_directory else None,
    )
    await app.run_async()


if __name__ == "__main__":
    asyncio.run(run_app())
