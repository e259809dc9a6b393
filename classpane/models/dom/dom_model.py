"""In-memory document store with asynchronous attribute writes.

The store plays the part of the inspected page: it owns the node tree,
applies attribute writes after an optional latency, and notifies listeners of
every attribute mutation regardless of who caused it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from classpane.constants.enums import NodeType
from classpane.constants.patterns import CLASS_ATTRIBUTE_SPLIT_PATTERN
from classpane.constants.values import CLASS_ATTRIBUTE
from classpane.models.dom.node import DOMNode

logger = logging.getLogger(__name__)

MutationListener = Callable[[DOMNode], None]


class DOMModel:
    """Document model owning nodes, attribute writes and mutation notifications."""

    def __init__(self, *, write_latency: float = 0.0) -> None:
        self._write_latency = write_latency
        self._nodes: dict[int, DOMNode] = {}
        self._next_node_id = 1
        self._listeners: list[MutationListener] = []
        self._document: DOMNode | None = None

    # =========================================================================
    # Tree construction
    # =========================================================================

    @property
    def document(self) -> DOMNode | None:
        """The root document node, if one has been created."""
        return self._document

    def create_document(self, frame_id: str = "") -> DOMNode:
        """Create a document node.

        The first document created becomes the model's root document; later
        ones are typically attached under an ``iframe`` element.
        """
        document = self._register(NodeType.DOCUMENT, "#document", frame_id=frame_id)
        if self._document is None:
            self._document = document
        return document

    def create_element(
        self,
        parent: DOMNode,
        node_name: str,
        attributes: dict[str, str] | None = None,
    ) -> DOMNode:
        return self._register(
            NodeType.ELEMENT, node_name, attributes=attributes, parent=parent,
        )

    def create_text(self, parent: DOMNode, text: str) -> DOMNode:
        return self._register(NodeType.TEXT, "#text", node_value=text, parent=parent)

    def create_comment(self, parent: DOMNode, text: str) -> DOMNode:
        return self._register(
            NodeType.COMMENT, "#comment", node_value=text, parent=parent,
        )

    def attach_document(self, parent: DOMNode, document: DOMNode) -> None:
        """Attach a sub-document (frame content) under an element."""
        document.parent = parent
        parent.children.append(document)

    def _register(
        self,
        node_type: NodeType,
        node_name: str,
        *,
        attributes: dict[str, str] | None = None,
        node_value: str = "",
        frame_id: str = "",
        parent: DOMNode | None = None,
    ) -> DOMNode:
        node = DOMNode(
            self,
            self._next_node_id,
            node_type,
            node_name,
            attributes=attributes,
            node_value=node_value,
            frame_id=frame_id,
            parent=parent,
        )
        self._next_node_id += 1
        self._nodes[node.node_id] = node
        if parent is not None:
            parent.children.append(node)
        return node

    # =========================================================================
    # Mutation notifications
    # =========================================================================

    def add_mutation_listener(self, listener: MutationListener) -> None:
        """Subscribe to attribute mutations on any node."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_mutation_listener(self, listener: MutationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_mutated(self, node: DOMNode) -> None:
        for listener in list(self._listeners):
            listener(node)

    # =========================================================================
    # Attribute writes
    # =========================================================================

    def set_attribute(self, node: DOMNode, name: str, value: str) -> None:
        """Apply an attribute change immediately (e.g. from page script)."""
        node._attributes[name] = value
        logger.debug(f"Attribute {name} of {node!r} set to {value!r}")
        self._notify_mutated(node)

    async def set_attribute_value(self, node: DOMNode, name: str, value: str) -> None:
        """Write an attribute asynchronously.

        The mutation notification is delivered before this coroutine returns,
        so callers observe their own echo while the write is still in flight.

        Raises:
            KeyError: If the node does not belong to this model.
        """
        if self._nodes.get(node.node_id) is not node:
            raise KeyError(f"Node {node.node_id} is not part of this document")
        if self._write_latency > 0:
            await asyncio.sleep(self._write_latency)
        else:
            await asyncio.sleep(0)
        self.set_attribute(node, name, value)

    # =========================================================================
    # Document-wide class index
    # =========================================================================

    async def class_names(self, document_id: int) -> list[str]:
        """Return every class name used by elements under a document.

        Nested sub-documents are not descended into; they form their own
        frame scope.

        Raises:
            KeyError: If ``document_id`` does not name a document node.
        """
        document = self._nodes.get(document_id)
        if document is None or document.node_type != NodeType.DOCUMENT:
            raise KeyError(f"Unknown document id: {document_id}")
        await asyncio.sleep(0)

        names: set[str] = set()
        stack = list(document.children)
        while stack:
            node = stack.pop()
            if node.node_type == NodeType.DOCUMENT:
                continue
            class_attribute = node.get_attribute(CLASS_ATTRIBUTE) or ""
            names.update(
                token for token in CLASS_ATTRIBUTE_SPLIT_PATTERN.split(class_attribute) if token
            )
            stack.extend(node.children)
        return sorted(names)
