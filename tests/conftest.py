"""Shared test fixtures for dirpanel tests.

Created: 2026-10-18
"""

import pytest

from dirpanel.core.navigator import Navigator
from dirpanel.core.workspace import WorkspaceProvider

from tests.utils import RecordingOpener, make_tree


@pytest.fixture(autouse=True)
def isolated_env(tmp_path_factory, monkeypatch):
    """Keep the user's config and env vars out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for name in (
        "DIRPANEL_WORKSPACE",
        "DIRPANEL_EDITOR",
        "DIRPANEL_LOG_LEVEL",
        "DIRPANEL_SEARCH_DEBOUNCE",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def workspace_dir(tmp_path):
    """A small project tree used as the workspace root."""
    return make_tree(
        tmp_path / "workspace",
        {
            "docs": {"guide.md": 300, "api.md": 200},
            "src": {
                "app.py": 50,
                "lib": {"util.py": 25, "deep": {"data.bin": 1000}},
            },
            "README.md": 120,
            "setup.cfg": 40,
            ".git": {"HEAD": 20},
            ".env": 10,
        },
    )


@pytest.fixture
def opener():
    """Recording document opener."""
    return RecordingOpener()


@pytest.fixture
def navigator(workspace_dir, opener):
    """Navigator rooted at the sample workspace."""
    return Navigator(WorkspaceProvider(str(workspace_dir)), opener=opener)
