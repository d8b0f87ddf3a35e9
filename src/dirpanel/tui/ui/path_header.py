"""Current-directory header with the up button.

Modified: 2026-10-18
"""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from ..messages import GoUpRequested


class PathHeader(Horizontal):
    """Shows the directory being listed and, when allowed, an up button."""

    DEFAULT_CSS = """
    PathHeader {
        height: 3;
        width: 100%;
        padding: 0 1;
    }

    PathHeader > .current-path {
        width: 1fr;
        height: 3;
        content-align: left middle;
        text-style: bold;
    }

    PathHeader > Button {
        min-width: 5;
        width: 5;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", classes="current-path", id="current-path", markup=False)
        up_button = Button("↑", id="go-up")
        up_button.display = False
        yield up_button

    def update_path(self, directory: str, show_up: bool) -> None:
        """Set the header label and up-button visibility."""
        self.query_one("#current-path", Static).update(directory)
        self.query_one("#go-up", Button).display = show_up

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "go-up":
            event.stop()
            self.post_message(GoUpRequested())
