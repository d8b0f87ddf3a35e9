"""Status bar widget for dirpanel.

Shows the entry count, key hints and the active sort.

Modified: 2026-10-18
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget


class StatusBar(Widget):
    """Status bar showing listing context and key hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }

    StatusBar .status-error {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, hints: str = "", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hints = hints
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left", markup=False)
            self.center_widget = Static("", classes="status-center", markup=False)
            self.right_widget = Static("", classes="status-right", markup=False)

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints()

    def update_context(self, entry_count: int, search_text: str = "", error: bool = False) -> None:
        """Update the left side with what is being listed.

        Args:
            entry_count: Number of rows shown
            search_text: Active filter, if any
            error: Whether the listing failed
        """
        if error:
            text = "Unreadable"
        else:
            noun = "entry" if entry_count == 1 else "entries"
            text = f"{entry_count} {noun}"
            if search_text:
                text = f"{text} matching '{search_text}'"
        if self.left_widget:
            self.left_widget.set_class(error, "status-error")
            self.left_widget.update(text)

    def update_sort(self, label: str, indicator: str) -> None:
        """Update the right side with the active sort column."""
        if self.right_widget:
            self.right_widget.update(f"{label} {indicator}")

    def update_hints(self) -> None:
        """Show the keyboard hints."""
        if self.center_widget:
            self.center_widget.update(self.hints)
