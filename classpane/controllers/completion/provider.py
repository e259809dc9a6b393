"""Class name completion provider for the classes input."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from classpane.controllers.base.base_controller import BaseController
from classpane.controllers.completion.fetchers.class_name_fetcher import ClassNameFetcher
from classpane.models.dom.node import DOMNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    """One completion entry."""

    text: str


class ClassNameCompletionProvider(BaseController):
    """Completes class names against everything known in the selection's frame.

    The class name fetch is memoized as a single task per frame scope, so
    concurrent completion requests for one frame share one fetch. The memo is
    dropped when the frame changes, on a forced request, and whenever the
    prefix is empty (the user starts a new word).
    """

    def __init__(
        self,
        fetcher: ClassNameFetcher,
        selection: Callable[[], DOMNode | None],
    ) -> None:
        """Initialize the provider.

        Args:
            fetcher: Gathers class names for a node's frame.
            selection: Returns the currently selected node, if any.
        """
        super().__init__()
        self._fetcher = fetcher
        self._selection = selection
        self._selected_frame_id: str | None = None
        self._class_names_task: asyncio.Task[list[str]] | None = None

    def reset(self) -> None:
        self._class_names_task = None
        self._selected_frame_id = None

    def _get_class_names(self, node: DOMNode) -> asyncio.Task[list[str]]:
        self._selected_frame_id = node.frame_id()
        return asyncio.get_running_loop().create_task(self._fetcher.fetch_class_names(node))

    async def complete(
        self,
        expression: str,
        prefix: str,
        force: bool = False,
    ) -> list[Suggestion]:
        """Return class names starting with ``prefix``.

        Args:
            expression: The whole text before the cursor.
            prefix: The word being completed; a leading "." is preserved.
            force: Re-fetch and complete even on blank input.

        Returns:
            Suggestions in sorted order; empty when there is nothing to
            complete or the fetch failed.
        """
        if not prefix or force:
            self._class_names_task = None

        selected_node = self._selection()
        if selected_node is None or (not prefix and not force and not expression.strip()):
            return []

        if (
            self._class_names_task is None
            or self._selected_frame_id != selected_node.frame_id()
        ):
            self._class_names_task = self._get_class_names(selected_node)

        task = self._class_names_task
        try:
            completions = await asyncio.shield(task)
        except Exception as e:
            logger.warning(f"Class name completion failed: {e}")
            if self._class_names_task is task:
                self._class_names_task = None
            return []

        if prefix.startswith("."):
            completions = ["." + value for value in completions]
        return [Suggestion(text=value) for value in completions if value.startswith(prefix)]
