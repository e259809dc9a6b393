"""Tests for ClassNameInput and ClassNameSuggester."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from textual.app import App, ComposeResult

from classpane.controllers.completion.provider import Suggestion
from classpane.widgets.input.class_name_input import ClassNameInput, ClassNameSuggester


def make_provider(*names: str) -> MagicMock:
    provider = MagicMock()

    async def complete(expression: str, prefix: str, force: bool = False):
        return [Suggestion(name) for name in names if name.startswith(prefix)]

    provider.complete = AsyncMock(side_effect=complete)
    return provider


class InputApp(App[None]):
    """Hosts one ClassNameInput and records its messages."""

    def __init__(self, provider=None) -> None:
        super().__init__()
        self.provider = provider
        self.messages: list[tuple[str, ...]] = []

    def compose(self) -> ComposeResult:
        yield ClassNameInput(self.provider, id="class-input")

    def on_class_name_input_committed(self, event: ClassNameInput.Committed) -> None:
        self.messages.append(("committed", event.text))

    def on_class_name_input_cancelled(self, event: ClassNameInput.Cancelled) -> None:
        self.messages.append(("cancelled",))


# =============================================================================
# Suggester
# =============================================================================


class TestClassNameSuggester:
    """Tests for word-wise suggestions."""

    @pytest.mark.asyncio
    async def test_completes_last_word(self) -> None:
        provider = make_provider("card", "card-compact", "page")
        suggester = ClassNameSuggester(provider)

        assert await suggester.get_suggestion("page ca") == "page card"
        provider.complete.assert_awaited_with("page ca", "ca")

    @pytest.mark.asyncio
    async def test_no_match(self) -> None:
        suggester = ClassNameSuggester(make_provider("card"))
        assert await suggester.get_suggestion("zz") is None

    @pytest.mark.asyncio
    async def test_trailing_space_uses_empty_prefix(self) -> None:
        provider = make_provider("card")
        suggester = ClassNameSuggester(provider)

        assert await suggester.get_suggestion("page ") == "page card"
        provider.complete.assert_awaited_with("page ", "")

    def test_results_are_not_cached(self) -> None:
        suggester = ClassNameSuggester(make_provider())
        assert suggester.cache is None


# =============================================================================
# Input behaviour
# =============================================================================


class TestClassNameInput:
    """Tests for submit, cancel and autocomplete acceptance."""

    def test_defaults(self) -> None:
        class_input = ClassNameInput()
        assert class_input.placeholder == "Add new class"
        assert class_input.suggester is None
        assert class_input.text_with_current_suggestion() == ""

    @pytest.mark.asyncio
    async def test_enter_commits_text(self) -> None:
        app = InputApp()
        async with app.run_test() as pilot:
            await pilot.press("f", "o", "o")
            await pilot.press("enter")
            await pilot.pause()

            assert app.messages == [("committed", "foo")]

    @pytest.mark.asyncio
    async def test_clear_text_resets_value(self) -> None:
        app = InputApp()
        async with app.run_test() as pilot:
            class_input = app.query_one(ClassNameInput)
            await pilot.press("f", "o", "o")
            class_input.clear_text()
            await pilot.pause()

            assert class_input.value == ""

    @pytest.mark.asyncio
    async def test_escape_cancels(self) -> None:
        app = InputApp()
        async with app.run_test() as pilot:
            await pilot.press("b", "a", "r")
            await pilot.press("escape")
            await pilot.pause()

            assert app.messages == [("cancelled",)]

    @pytest.mark.asyncio
    async def test_enter_accepts_suggestion_before_committing(self) -> None:
        app = InputApp(make_provider("card"))
        async with app.run_test() as pilot:
            class_input = app.query_one(ClassNameInput)
            await pilot.press("c", "a")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert class_input.current_suggestion == "card"
            assert class_input.text_with_current_suggestion() == "card"

            await pilot.press("enter")
            await pilot.pause()
            assert class_input.value == "card"
            assert app.messages == []

            await pilot.press("enter")
            await pilot.pause()
            assert app.messages == [("committed", "card")]
