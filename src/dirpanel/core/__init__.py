"""
Core logic for dirpanel.

Navigator state, the listing pipeline and its collaborators.
Nothing in here depends on the terminal UI.

Modified: 2026-10-18
"""

from dirpanel.core.exceptions import (
    DirPanelError,
    DirectoryReadError,
    FileOpenError,
    InvalidCommandError,
    ConfigurationError,
)

__all__ = [
    "DirPanelError",
    "DirectoryReadError",
    "FileOpenError",
    "InvalidCommandError",
    "ConfigurationError",
]
