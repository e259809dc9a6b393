"""Class name fetcher - gathers known class names for a node's frame."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from classpane.models.dom.css_model import CSSModel
from classpane.models.dom.dom_model import DOMModel
from classpane.models.dom.node import DOMNode

logger = logging.getLogger(__name__)


class ClassNameFetcher:
    """Collects class names from style sheets and live elements of one frame."""

    def __init__(self, dom_model: DOMModel, css_model: CSSModel) -> None:
        """Initialize with the document collaborators.

        Args:
            dom_model: Source of the document-wide class index.
            css_model: Source of style sheet headers and their class names.
        """
        self._dom_model = dom_model
        self._css_model = css_model

    async def fetch_class_names(self, node: DOMNode) -> list[str]:
        """Return the sorted union of class names known in ``node``'s frame.

        Every source is queried concurrently. A source that fails is logged
        and contributes nothing, so a total failure yields an empty list.
        """
        frame_id = node.frame_id()
        labels: list[str] = []
        queries: list[Awaitable[list[str]]] = []

        for style_sheet in self._css_model.all_style_sheets():
            if style_sheet.frame_id != frame_id:
                continue
            labels.append(f"style sheet {style_sheet.style_sheet_id}")
            queries.append(self._css_model.class_names(style_sheet.style_sheet_id))

        owner_document = node.owner_document
        if owner_document is not None:
            labels.append(f"document {owner_document.node_id}")
            queries.append(self._dom_model.class_names(owner_document.node_id))

        results = await asyncio.gather(*queries, return_exceptions=True)

        completions: set[str] = set()
        for label, result in zip(labels, results):
            if isinstance(result, BaseException):
                logger.warning(f"Class name query failed for {label}: {result}")
                continue
            completions.update(result)

        logger.debug(f"Fetched {len(completions)} class names for frame {frame_id!r}")
        return sorted(completions)
