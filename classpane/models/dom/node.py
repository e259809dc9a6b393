"""DOM node handle used by the classes engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from classpane.constants.enums import NodeType

if TYPE_CHECKING:
    from classpane.models.dom.dom_model import DOMModel


class DOMNode:
    """A node in an externally owned document tree.

    Nodes are referenced by identity: equality and hashing are the object
    defaults, so a node can key dictionaries and weak side-tables.
    """

    def __init__(
        self,
        dom_model: DOMModel,
        node_id: int,
        node_type: NodeType,
        node_name: str,
        *,
        attributes: dict[str, str] | None = None,
        node_value: str = "",
        frame_id: str = "",
        parent: DOMNode | None = None,
    ) -> None:
        self._dom_model = dom_model
        self.node_id = node_id
        self.node_type = node_type
        self.node_name = node_name
        self.node_value = node_value
        self._attributes: dict[str, str] = dict(attributes or {})
        self._frame_id = frame_id
        self.parent = parent
        self.children: list[DOMNode] = []

    def __repr__(self) -> str:
        return f"DOMNode(id={self.node_id}, name={self.node_name!r})"

    def dom_model(self) -> DOMModel:
        """Return the model that owns this node."""
        return self._dom_model

    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or None when the attribute is absent."""
        return self._attributes.get(name)

    def attributes(self) -> dict[str, str]:
        """Return a copy of the node's attributes."""
        return dict(self._attributes)

    def enclosing_element_or_self(self) -> DOMNode | None:
        """Return this node if it is an element, else the closest element ancestor."""
        node: DOMNode | None = self
        while node is not None and not node.is_element():
            node = node.parent
        return node

    def frame_id(self) -> str:
        """Return the frame scope this node belongs to.

        Nodes created without an explicit frame inherit their parent's.
        """
        if self._frame_id or self.parent is None:
            return self._frame_id
        return self.parent.frame_id()

    @property
    def owner_document(self) -> DOMNode | None:
        """Return the closest document node, including this node."""
        node: DOMNode | None = self
        while node is not None and node.node_type != NodeType.DOCUMENT:
            node = node.parent
        return node

    def descendants(self) -> list[DOMNode]:
        """Return all descendants in document order."""
        result: list[DOMNode] = []
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            result.append(node)
            stack.extend(reversed(node.children))
        return result

    async def set_attribute_value(self, name: str, value: str) -> None:
        """Write an attribute through the owning model."""
        await self._dom_model.set_attribute_value(self, name, value)
