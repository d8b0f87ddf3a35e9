"""
Custom exceptions for dirpanel.

Modified: 2026-10-18
"""


class DirPanelError(Exception):
    """Base exception for all dirpanel errors."""

    pass


class DirectoryReadError(DirPanelError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Unable to read directory: {reason}" if reason else f"Unable to read directory: {path}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class FileOpenError(DirPanelError):
    """Raised when a file cannot be opened in the editor."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"Could not open file: {reason or path}")
        self.path = path
        self.reason = reason


class InvalidCommandError(DirPanelError):
    """Raised when a panel command message is malformed or unknown."""

    pass


class ConfigurationError(DirPanelError):
    """Raised when configuration is invalid or missing."""

    pass
