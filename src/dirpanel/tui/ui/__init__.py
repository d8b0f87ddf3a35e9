"""
UI components for dirpanel TUI.

Modified: 2026-10-18
"""

__all__ = [
    "directory_table",
    "path_header",
    "search_input",
    "status_bar",
]
