"""Central keybinding registry for dirpanel.

Single source of truth for the panel's keys: the app builds its Textual
bindings from it and the status bar builds its hint line from it.

Modified: 2026-10-18
"""

from dataclasses import dataclass
from typing import Dict, List

from textual.binding import Binding


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # The key or key combination
    action: str  # Textual action name
    description: str  # Human-readable description
    category: str = "General"  # Category for grouping in hints
    hint: str = ""  # Short label for the status bar; empty hides it
    priority: bool = False


class KeybindingRegistry:
    """Central registry for all keybindings."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Application
        self.register("q", "quit", "Quit", "Application", hint="quit")
        self.register("ctrl+r", "refresh", "Re-list directory", "Application", hint="refresh")

        # Navigation
        self.register("backspace", "go_up", "Go up one directory", "Navigation", hint="up")

        # Search
        self.register("/", "search", "Focus search box", "Search", hint="search")
        self.register("escape", "clear_search", "Clear search", "Search", priority=True)

        # Sorting
        self.register("n", "sort('name')", "Sort by name", "Sort", hint="name")
        self.register("s", "sort('size')", "Sort by size", "Sort", hint="size")
        self.register("c", "sort('createdAt')", "Sort by created", "Sort", hint="created")
        self.register("m", "sort('modifiedAt')", "Sort by modified", "Sort", hint="modified")

    def register(
        self,
        key: str,
        action: str,
        description: str,
        category: str = "General",
        hint: str = "",
        priority: bool = False,
    ):
        """Register a keybinding."""
        self.keybindings[key] = Keybinding(key, action, description, category, hint, priority)

    def get_bindings(self) -> List[Binding]:
        """Textual bindings for every registered key."""
        return [
            Binding(kb.key, kb.action, kb.description, show=bool(kb.hint), priority=kb.priority)
            for kb in self.keybindings.values()
        ]

    def get_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get all keybindings organized by category."""
        categories: Dict[str, List[Keybinding]] = {}
        for kb in self.keybindings.values():
            categories.setdefault(kb.category, []).append(kb)
        return categories

    def hint_text(self) -> str:
        """Compact "key:label" hint line."""
        return " ".join(
            f"{_display_key(kb.key)}:{kb.hint}"
            for kb in self.keybindings.values()
            if kb.hint
        )


def _display_key(key: str) -> str:
    if key == "backspace":
        return "⌫"
    if key.startswith("ctrl+"):
        return "^" + key[len("ctrl+"):].upper()
    return key


# Global registry instance
registry = KeybindingRegistry()
