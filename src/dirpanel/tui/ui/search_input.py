"""Debounced search box for dirpanel.

Keystrokes are coalesced: a SearchChanged message goes out only after the
text has been still for the debounce delay.

Modified: 2026-10-18
"""

from typing import Optional

from textual.app import ComposeResult
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Input

from ..messages import SearchChanged


class SearchInput(Widget):
    """Filter box above the directory table."""

    DEFAULT_CSS = """
    SearchInput {
        height: 3;
        width: 100%;
    }

    SearchInput > Input {
        width: 100%;
    }
    """

    def __init__(self, debounce: float = 0.3, *args, **kwargs):
        """Initialize the search box.

        Args:
            debounce: Seconds of inactivity before the search is sent
        """
        super().__init__(*args, **kwargs)
        self.debounce = debounce
        self._timer: Optional[Timer] = None
        self._pending: Optional[str] = None
        self._sent = ""

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Search...", id="search-box")

    @property
    def value(self) -> str:
        return self.query_one(Input).value

    def focus_input(self) -> None:
        self.query_one(Input).focus()

    def clear(self) -> None:
        """Empty the box and send the cleared search right away."""
        self.query_one(Input).value = ""
        self.flush("")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        if event.value == self._sent:
            # Back to what the navigator already has
            self._pending = None
            return
        self._pending = event.value
        if self.debounce <= 0:
            self.flush(event.value)
            return
        self._timer = self.set_timer(self.debounce, self._emit)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        # Enter skips the wait
        event.stop()
        self.flush(event.value)

    def flush(self, value: str) -> None:
        """Cancel any pending timer and send ``value`` now."""
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self._pending = None
        self._sent = value
        self.post_message(SearchChanged(value))

    def _emit(self) -> None:
        self._timer = None
        if self._pending is not None:
            value, self._pending = self._pending, None
            self._sent = value
            self.post_message(SearchChanged(value))
