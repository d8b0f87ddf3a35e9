"""
Core data models for dirpanel.

Directory entries, navigator state, panel commands and the view model
handed to the display surface.

Modified: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from dirpanel.core.exceptions import InvalidCommandError


class SortKey(Enum):
    """Column the listing is ordered by."""

    NAME = "name"
    SIZE = "size"
    CREATED_AT = "createdAt"
    MODIFIED_AT = "modifiedAt"

    @classmethod
    def parse(cls, value: str) -> "SortKey":
        """Parse a column id, accepting the short ctime/mtime aliases."""
        value = SORT_KEY_ALIASES.get(value, value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidCommandError(f"Unknown sort key: {value!r}") from None

    @property
    def label(self) -> str:
        return COLUMN_LABELS[self]


SORT_KEY_ALIASES = {
    "ctime": "createdAt",
    "mtime": "modifiedAt",
    "created": "createdAt",
    "modified": "modifiedAt",
}

COLUMN_LABELS = {
    SortKey.NAME: "Name",
    SortKey.SIZE: "Size",
    SortKey.CREATED_AT: "Created",
    SortKey.MODIFIED_AT: "Modified",
}


class SortDirection(IntEnum):
    """Sort direction, usable directly as a comparator multiplier."""

    ASCENDING = 1
    DESCENDING = -1

    def flipped(self) -> "SortDirection":
        return SortDirection(-self.value)

    @property
    def indicator(self) -> str:
        return "▲" if self is SortDirection.ASCENDING else "▼"


@dataclass
class DirectoryEntry:
    """
    One visible child of the current directory.

    Hidden names never get this far; they are dropped while reading.
    """

    name: str
    full_path: str
    is_directory: bool = False
    size_bytes: int = 0
    created_at_millis: int = 0
    modified_at_millis: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "full_path": self.full_path,
            "is_directory": self.is_directory,
            "size_bytes": self.size_bytes,
            "created_at_millis": self.created_at_millis,
            "modified_at_millis": self.modified_at_millis,
        }


@dataclass
class NavigatorState:
    """Per-panel view state. Never persisted."""

    current_directory: Optional[str] = None
    sort_key: SortKey = SortKey.NAME
    sort_direction: SortDirection = SortDirection.ASCENDING
    search_text: str = ""


# Panel commands


@dataclass(frozen=True)
class SortCommand:
    """Sort by a column; repeating the active column flips direction."""

    by: SortKey


@dataclass(frozen=True)
class SearchCommand:
    """Replace the search text."""

    value: str = ""


@dataclass(frozen=True)
class OpenFolderCommand:
    """Show a different directory."""

    path: str


@dataclass(frozen=True)
class OpenFileCommand:
    """Open a file in the editor."""

    path: str


@dataclass(frozen=True)
class GoUpCommand:
    """Move to the parent directory."""

    pass


Command = Union[SortCommand, SearchCommand, OpenFolderCommand, OpenFileCommand, GoUpCommand]


def parse_command(message: Dict[str, Any]) -> Command:
    """
    Build a command from its tagged-message form.

    Args:
        message: Mapping with a "command" tag and its payload,
            e.g. {"command": "sort", "by": "size"}

    Returns:
        Command instance

    Raises:
        InvalidCommandError: If the tag is unknown or the payload is missing
    """
    if not isinstance(message, dict):
        raise InvalidCommandError(f"Command message must be a mapping, got {type(message).__name__}")

    name = message.get("command")

    if name == "sort":
        by = message.get("by")
        if not isinstance(by, str):
            raise InvalidCommandError("sort requires a 'by' column")
        return SortCommand(SortKey.parse(by))

    if name == "search":
        # A missing or null value clears the filter
        return SearchCommand(message.get("value") or "")

    if name in ("openFolder", "openFile"):
        path = message.get("path")
        if not isinstance(path, str) or not path:
            raise InvalidCommandError(f"{name} requires a 'path'")
        if name == "openFolder":
            return OpenFolderCommand(path)
        return OpenFileCommand(path)

    if name == "goUp":
        return GoUpCommand()

    raise InvalidCommandError(f"Unknown command: {name!r}")


# View model


@dataclass
class ColumnHeader:
    """Column header with its sort indicator."""

    key: SortKey
    label: str
    active: bool = False
    indicator: str = ""

    @property
    def title(self) -> str:
        return f"{self.label} {self.indicator}" if self.indicator else self.label


@dataclass
class EntryRow:
    """One render-ready row."""

    icon: str  # "folder" or "file"
    name: str
    size_text: str
    created_text: str
    modified_text: str
    path: str
    is_directory: bool = False


@dataclass
class DirectoryView:
    """Fully computed listing of one directory."""

    directory: str
    show_up: bool
    columns: List[ColumnHeader] = field(default_factory=list)
    rows: List[EntryRow] = field(default_factory=list)
    entries: List[DirectoryEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def names(self) -> List[str]:
        """Entry names in display order."""
        return [row.name for row in self.rows]


@dataclass
class NoticeView:
    """Replaces the listing with a single message."""

    message: str
    is_error: bool = False
    directory: Optional[str] = None
    show_up: bool = False


View = Union[DirectoryView, NoticeView]


@dataclass
class CommandResult:
    """Outcome of one command: the re-rendered view plus an optional transient error."""

    view: View
    notification: Optional[str] = None
