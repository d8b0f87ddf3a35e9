"""Directory listing table for dirpanel.

Renders a DirectoryView as a sortable table and turns clicks into
panel messages.

Modified: 2026-10-18
"""

from typing import Dict

from rich.text import Text
from textual.widgets import DataTable

from ...core.models import DirectoryView, EntryRow, SortKey
from ..messages import FileOpened, FolderOpened, SortRequested

ICONS = {"folder": "📁", "file": "📄"}
ICON_COLUMN = "icon"


class DirectoryTable(DataTable):
    """Table of the current directory's entries."""

    DEFAULT_CSS = """
    DirectoryTable {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("cursor_type", "row")
        kwargs.setdefault("zebra_stripes", True)
        super().__init__(*args, **kwargs)
        self.rows_by_path: Dict[str, EntryRow] = {}
        self.empty_text = "No files/folders"

    def show_view(self, view: DirectoryView) -> None:
        """Replace the table contents with ``view``."""
        self.clear(columns=True)
        self.rows_by_path = {}

        self.add_column("", key=ICON_COLUMN, width=2)
        for column in view.columns:
            self.add_column(column.title, key=column.key.value)

        if view.is_empty:
            # Placeholder row; it has no path so selecting it does nothing
            self.add_row("", self.empty_text, "", "", "")
            return

        for row in view.rows:
            self.rows_by_path[row.path] = row
            self.add_row(
                ICONS[row.icon],
                Text(row.name),
                row.size_text,
                row.created_text,
                row.modified_text,
                key=row.path,
            )

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        event.stop()
        key = event.column_key.value
        if key and key != ICON_COLUMN:
            self.post_message(SortRequested(SortKey(key)))

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        event.stop()
        row = self.rows_by_path.get(event.row_key.value)
        if row is None:
            return
        if row.is_directory:
            self.post_message(FolderOpened(row.path))
        else:
            self.post_message(FileOpened(row.path))
