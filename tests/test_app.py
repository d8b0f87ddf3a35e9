"""
Tests for the Textual panel.

Drives the app headlessly with Textual's pilot.

Created: 2026-10-18
"""

from unittest.mock import Mock

import pytest

from dirpanel.config.settings import Settings
from dirpanel.core.models import DirectoryView, NoticeView, SearchCommand, SortDirection, SortKey
from dirpanel.core.navigator import Navigator
from dirpanel.core.workspace import WorkspaceProvider
from dirpanel.tui.app import DirPanelApp
from dirpanel.tui.messages import FileOpened, FolderOpened
from dirpanel.tui.ui.directory_table import DirectoryTable
from dirpanel.tui.ui.path_header import PathHeader

from tests.utils import RecordingOpener


@pytest.fixture
def settings():
    settings = Settings()
    settings.behavior.search_debounce = 0
    return settings


@pytest.fixture
def app(navigator, settings):
    return DirPanelApp(settings=settings, navigator=navigator)


@pytest.mark.asyncio
async def test_initial_listing(app, workspace_dir):
    """Test that the starting directory is rendered on mount."""
    async with app.run_test() as pilot:
        await pilot.pause()
        table = app.query_one(DirectoryTable)

        assert isinstance(app.view, DirectoryView)
        assert app.view.directory == str(workspace_dir)
        assert table.row_count == 4
        assert list(table.rows_by_path) == [row.path for row in app.view.rows]


@pytest.mark.asyncio
async def test_sort_key_binding(app, navigator):
    """Test the sort keys, including the toggle on repeat."""
    async with app.run_test() as pilot:
        await pilot.press("s")
        await pilot.pause()

        assert navigator.state.sort_key is SortKey.SIZE
        assert navigator.state.sort_direction is SortDirection.ASCENDING

        await pilot.press("s")
        await pilot.pause()

        assert navigator.state.sort_direction is SortDirection.DESCENDING
        assert app.view.names() == ["src", "docs", "README.md", "setup.cfg"]


@pytest.mark.asyncio
async def test_enter_on_folder_row(app, navigator, workspace_dir):
    """Test that selecting the first row (a folder) opens it."""
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        assert navigator.state.current_directory == str(workspace_dir / "docs")
        assert app.view.names() == ["api.md", "guide.md"]
        assert app.query_one("#go-up").display is True


@pytest.mark.asyncio
async def test_backspace_goes_up(app, navigator, workspace_dir):
    """Test leaving a subfolder with backspace."""
    async with app.run_test() as pilot:
        app.post_message(FolderOpened(str(workspace_dir / "src")))
        await pilot.pause()
        assert app.view.directory == str(workspace_dir / "src")

        app.query_one(DirectoryTable).focus()
        await pilot.press("backspace")
        await pilot.pause()

        assert navigator.state.current_directory == str(workspace_dir)
        assert app.query_one(PathHeader).query_one("#go-up").display is False


@pytest.mark.asyncio
async def test_search_box_filters(app, navigator):
    """Test typing in the search box."""
    async with app.run_test() as pilot:
        await pilot.press("/")
        await pilot.press("r", "e", "a", "d")
        await pilot.pause()

        assert navigator.state.search_text == "read"
        assert app.view.names() == ["README.md"]

        await pilot.press("escape")
        await pilot.pause()

        assert navigator.state.search_text == ""
        assert len(app.view.names()) == 4


@pytest.mark.asyncio
async def test_open_file_message(app, opener, workspace_dir):
    """Test that file rows go to the opener."""
    async with app.run_test() as pilot:
        app.post_message(FileOpened(str(workspace_dir / "README.md")))
        await pilot.pause()

        assert opener.opened == [str(workspace_dir / "README.md")]


@pytest.mark.asyncio
async def test_open_file_failure_notifies(workspace_dir, settings):
    """Test that a failed open is reported, not fatal."""
    navigator = Navigator(
        WorkspaceProvider(str(workspace_dir)),
        opener=RecordingOpener(fail_with="permission denied"),
    )
    app = DirPanelApp(settings=settings, navigator=navigator)

    async with app.run_test() as pilot:
        app.notify = Mock()
        app.post_message(FileOpened(str(workspace_dir / "README.md")))
        await pilot.pause()

        app.notify.assert_called_once()
        args, kwargs = app.notify.call_args
        assert args[0] == "Could not open file: permission denied"
        assert kwargs["severity"] == "error"
        assert isinstance(app.view, DirectoryView)


@pytest.mark.asyncio
async def test_unreadable_folder_shows_notice(app, workspace_dir):
    """Test that a read error replaces the table with a message."""
    async with app.run_test() as pilot:
        app.post_message(FolderOpened(str(workspace_dir / "gone")))
        await pilot.pause()

        assert isinstance(app.view, NoticeView)
        assert app.view.is_error
        assert app.query_one(DirectoryTable).display is False
        assert app.query_one("#notice").display is True


@pytest.mark.asyncio
async def test_search_debounce_coalesces_keystrokes(navigator):
    """Test that a burst of typing sends one search once the box is still."""
    settings = Settings()
    settings.behavior.search_debounce = 0.3
    app = DirPanelApp(settings=settings, navigator=navigator)
    navigator.dispatch = Mock(wraps=navigator.dispatch)

    def searches():
        return [
            call.args[0]
            for call in navigator.dispatch.call_args_list
            if isinstance(call.args[0], SearchCommand)
        ]

    async with app.run_test() as pilot:
        await pilot.press("/")
        await pilot.press("r", "e", "a", "d")

        await pilot.pause(0.6)

        assert searches() == [SearchCommand("read")]
        assert app.view.names() == ["README.md"]

        # Typing and deleting back to the sent text sends nothing
        await pilot.press("x", "backspace")
        await pilot.pause(0.6)

        assert searches() == [SearchCommand("read")]
        assert navigator.state.search_text == "read"
