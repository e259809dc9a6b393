"""Elements screen presenter - builds the engine and formats document nodes."""

from __future__ import annotations

import logging

from rich.text import Text

from classpane.constants.enums import NodeType
from classpane.controllers.classes.controller import ClassesController
from classpane.controllers.completion.fetchers.class_name_fetcher import ClassNameFetcher
from classpane.controllers.completion.provider import ClassNameCompletionProvider
from classpane.models.dom.loader import LoadedDocument
from classpane.models.dom.node import DOMNode
from classpane.models.state.app_settings import PaneSettings

logger = logging.getLogger(__name__)

_TEXT_PREVIEW_CHARS = 40


def format_node_label(node: DOMNode) -> Text:
    """Render a node the way an elements tree shows it."""
    if node.node_type == NodeType.TEXT:
        preview = node.node_value.strip()
        if len(preview) > _TEXT_PREVIEW_CHARS:
            preview = preview[: _TEXT_PREVIEW_CHARS - 1] + "…"
        return Text(f'"{preview}"', style="italic")
    if node.node_type == NodeType.COMMENT:
        return Text(f"<!-- {node.node_value.strip()} -->", style="dim")
    if node.node_type == NodeType.DOCUMENT:
        frame_id = node.frame_id()
        return Text(f"#document ({frame_id})" if frame_id else "#document", style="bold")

    label = Text("<")
    label.append(node.node_name, style="bold magenta")
    for name, value in node.attributes().items():
        label.append(" ")
        label.append(name, style="yellow")
        label.append("=")
        label.append(f'"{value}"', style="cyan")
    label.append(">")
    return label


class ElementsPresenter:
    """Owns the collaborators behind one elements screen."""

    def __init__(self, loaded: LoadedDocument, settings: PaneSettings) -> None:
        """Initialize the presenter.

        Args:
            loaded: DOM and CSS models of the inspected document.
            settings: Pane settings (flush delay, placeholder, start visibility).
        """
        self._loaded = loaded
        self._settings = settings
        self.controller = ClassesController(
            loaded.dom_model,
            flush_delay=settings.flush_delay_seconds,
        )
        self.completion_provider = ClassNameCompletionProvider(
            ClassNameFetcher(loaded.dom_model, loaded.css_model),
            selection=lambda: self.controller.selected_node,
        )

    @property
    def document(self) -> DOMNode:
        return self._loaded.document

    @property
    def settings(self) -> PaneSettings:
        return self._settings

    def attach(self) -> None:
        self.controller.attach()

    def detach(self) -> None:
        self.controller.detach()
        self.completion_provider.reset()
