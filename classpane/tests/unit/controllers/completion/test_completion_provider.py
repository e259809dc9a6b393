"""Tests for ClassNameCompletionProvider."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from classpane.controllers.completion.provider import (
    ClassNameCompletionProvider,
    Suggestion,
)
from classpane.models.dom.dom_model import DOMModel
from classpane.models.dom.node import DOMNode


@pytest.fixture
def dom_model() -> DOMModel:
    return DOMModel()


@pytest.fixture
def main_node(dom_model: DOMModel) -> DOMNode:
    return dom_model.create_element(dom_model.create_document("main"), "div")


@pytest.fixture
def widget_node(dom_model: DOMModel) -> DOMNode:
    return dom_model.create_element(dom_model.create_document("widget"), "div")


def make_fetcher(names: list[str] | None = None) -> MagicMock:
    fetcher = MagicMock()
    fetcher.fetch_class_names = AsyncMock(return_value=names or ["alpha", "beta", "button"])
    return fetcher


class TestCompletionProvider:
    """Tests for prefix filtering and memoization."""

    @pytest.mark.asyncio
    async def test_no_selection(self) -> None:
        fetcher = make_fetcher()
        provider = ClassNameCompletionProvider(fetcher, lambda: None)

        assert await provider.complete("b", "b") == []
        fetcher.fetch_class_names.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_input_unforced(self, main_node: DOMNode) -> None:
        fetcher = make_fetcher()
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        assert await provider.complete("", "") == []
        assert await provider.complete("   ", "") == []
        fetcher.fetch_class_names.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_input_forced(self, main_node: DOMNode) -> None:
        provider = ClassNameCompletionProvider(make_fetcher(), lambda: main_node)

        results = await provider.complete("", "", force=True)

        assert [s.text for s in results] == ["alpha", "beta", "button"]

    @pytest.mark.asyncio
    async def test_prefix_filter(self, main_node: DOMNode) -> None:
        provider = ClassNameCompletionProvider(make_fetcher(), lambda: main_node)

        results = await provider.complete("b", "b")

        assert results == [Suggestion("beta"), Suggestion("button")]

    @pytest.mark.asyncio
    async def test_dot_prefix_is_preserved(self, main_node: DOMNode) -> None:
        provider = ClassNameCompletionProvider(make_fetcher(), lambda: main_node)

        results = await provider.complete(".bu", ".bu")

        assert [s.text for s in results] == [".button"]

    @pytest.mark.asyncio
    async def test_fetch_is_memoized_for_frame(self, main_node: DOMNode) -> None:
        fetcher = make_fetcher()
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        await provider.complete("a", "a")
        await provider.complete("al", "al")

        assert fetcher.fetch_class_names.await_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_requests_share_fetch(self, main_node: DOMNode) -> None:
        gate = asyncio.Event()
        fetcher = MagicMock()

        async def slow_fetch(node: DOMNode) -> list[str]:
            await gate.wait()
            return ["alpha", "beta"]

        fetcher.fetch_class_names = AsyncMock(side_effect=slow_fetch)
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        first = asyncio.ensure_future(provider.complete("a", "a"))
        second = asyncio.ensure_future(provider.complete("b", "b"))
        await asyncio.sleep(0)
        gate.set()

        assert [s.text for s in await first] == ["alpha"]
        assert [s.text for s in await second] == ["beta"]
        assert fetcher.fetch_class_names.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_prefix_drops_memo(self, main_node: DOMNode) -> None:
        fetcher = make_fetcher()
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        await provider.complete("a", "a")
        await provider.complete("alpha ", "")

        assert fetcher.fetch_class_names.await_count == 2

    @pytest.mark.asyncio
    async def test_force_drops_memo(self, main_node: DOMNode) -> None:
        fetcher = make_fetcher()
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        await provider.complete("a", "a")
        await provider.complete("a", "a", force=True)

        assert fetcher.fetch_class_names.await_count == 2

    @pytest.mark.asyncio
    async def test_frame_change_refetches(
        self, main_node: DOMNode, widget_node: DOMNode,
    ) -> None:
        fetcher = make_fetcher()
        selection = {"node": main_node}
        provider = ClassNameCompletionProvider(fetcher, lambda: selection["node"])

        await provider.complete("a", "a")
        selection["node"] = widget_node
        await provider.complete("a", "a")

        assert fetcher.fetch_class_names.await_count == 2
        fetcher.fetch_class_names.assert_awaited_with(widget_node)

    @pytest.mark.asyncio
    async def test_fetch_failure_yields_empty_and_retries(self, main_node: DOMNode) -> None:
        fetcher = MagicMock()
        fetcher.fetch_class_names = AsyncMock(side_effect=[RuntimeError("gone"), ["alpha"]])
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        assert await provider.complete("a", "a") == []
        assert [s.text for s in await provider.complete("a", "a")] == ["alpha"]

    @pytest.mark.asyncio
    async def test_reset(self, main_node: DOMNode) -> None:
        fetcher = make_fetcher()
        provider = ClassNameCompletionProvider(fetcher, lambda: main_node)

        await provider.complete("a", "a")
        provider.reset()
        await provider.complete("a", "a")

        assert fetcher.fetch_class_names.await_count == 2
