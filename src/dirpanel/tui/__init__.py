"""
TUI (Terminal User Interface) for dirpanel.

Textual-based directory panel: path header, search box, sortable table.

Modified: 2026-10-18
"""

__all__ = ["app", "keybindings", "messages"]
