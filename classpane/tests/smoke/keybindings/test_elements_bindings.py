"""Smoke tests for application and elements screen key bindings."""

from __future__ import annotations

import pytest
from textual.widgets import Tree

from classpane.app import ClassPaneApp
from classpane.keyboard import APP_BINDINGS, ELEMENTS_SCREEN_BINDINGS
from classpane.screens import ElementsScreen


class TestBindingDefinitions:
    """Tests for binding tables."""

    def test_quit_is_priority(self) -> None:
        quit_binding = next(b for b in APP_BINDINGS if b.action == "quit")
        assert quit_binding.priority

    def test_elements_actions(self) -> None:
        actions = {binding.action for binding in ELEMENTS_SCREEN_BINDINGS}
        assert actions == {"toggle_classes", "hide_classes", "focus_tree"}


class TestElementsBindings:
    """Tests that bindings reach their actions."""

    @pytest.mark.asyncio
    async def test_ctrl_t_focuses_tree(self, app: ClassPaneApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            await pilot.press("f2")
            await pilot.pause()
            await pilot.press("ctrl+t")
            await pilot.pause()
            assert app.focused is app.screen.query_one("#dom-tree", Tree)

    @pytest.mark.asyncio
    async def test_escape_with_hidden_pane_is_harmless(self, app: ClassPaneApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, ElementsScreen)

