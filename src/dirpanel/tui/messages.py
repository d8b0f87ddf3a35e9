"""Custom Textual messages for dirpanel.

Gestures from the display widgets. The app turns each one into a core
panel command.

Modified: 2026-10-18
"""

from textual.message import Message

from ..core.models import SortKey


class SortRequested(Message):
    """Message sent when a column header is clicked."""

    def __init__(self, by: SortKey):
        super().__init__()
        self.by = by


class SearchChanged(Message):
    """Message sent once the search text settles."""

    def __init__(self, value: str):
        super().__init__()
        self.value = value


class FolderOpened(Message):
    """Message sent when a folder row is chosen."""

    def __init__(self, path: str):
        super().__init__()
        self.path = path


class FileOpened(Message):
    """Message sent when a file row is chosen."""

    def __init__(self, path: str):
        super().__init__()
        self.path = path


class GoUpRequested(Message):
    """Message sent when the up button is pressed."""

    pass
