"""
Tests for the keybinding registry.

Modified: 2026-10-18
"""

from dirpanel.tui.keybindings import KeybindingRegistry


class TestKeybindingRegistry:
    """Test KeybindingRegistry."""

    def test_sort_bindings_cover_every_column(self):
        registry = KeybindingRegistry()
        actions = {kb.action for kb in registry.keybindings.values()}

        for column in ("name", "size", "createdAt", "modifiedAt"):
            assert f"sort('{column}')" in actions

    def test_textual_bindings(self):
        bindings = {binding.key: binding for binding in KeybindingRegistry().get_bindings()}

        assert bindings["backspace"].action == "go_up"
        assert bindings["escape"].show is False
        assert bindings["escape"].priority is True

    def test_hint_text(self):
        hints = KeybindingRegistry().hint_text()

        assert "q:quit" in hints
        assert "⌫:up" in hints
        assert "^R:refresh" in hints
        assert "escape" not in hints

    def test_by_category(self):
        categories = KeybindingRegistry().get_by_category()

        assert set(categories) == {"Application", "Navigation", "Search", "Sort"}
        assert len(categories["Sort"]) == 4
