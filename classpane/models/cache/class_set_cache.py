"""Per-element class state cache."""

from __future__ import annotations

import logging
import weakref

from classpane.constants.values import CLASS_ATTRIBUTE
from classpane.models.dom.node import DOMNode
from classpane.utils.class_parser import parse_class_attribute

logger = logging.getLogger(__name__)

ClassSet = dict[str, bool]


class ClassSetCache:
    """Side-table mapping each element to its enabled/disabled class model.

    Entries are held weakly: dropping the last reference to a node drops its
    class set too. Reads are lazy: the first ``get`` for a node builds the
    set from the live ``class`` attribute with every class enabled, and every
    later ``get`` returns that same dict until ``invalidate`` is called.
    """

    def __init__(self) -> None:
        self._class_sets: weakref.WeakKeyDictionary[DOMNode, ClassSet] = (
            weakref.WeakKeyDictionary()
        )

    def __contains__(self, node: DOMNode) -> bool:
        return node in self._class_sets

    def __len__(self) -> int:
        return len(self._class_sets)

    def get(self, node: DOMNode) -> ClassSet:
        """Return the cached class set for ``node``, building it if needed."""
        result = self._class_sets.get(node)
        if result is None:
            result = {}
            for class_name in parse_class_attribute(node.get_attribute(CLASS_ATTRIBUTE)):
                result[class_name] = True
            self._class_sets[node] = result
        return result

    def toggle(self, node: DOMNode, class_name: str, enabled: bool) -> None:
        """Set the flag for ``class_name``, inserting it when absent."""
        self.get(node)[class_name] = enabled

    def invalidate(self, node: DOMNode) -> None:
        """Drop the cached set for ``node`` only; the next get rebuilds it."""
        if self._class_sets.pop(node, None) is not None:
            logger.debug(f"Invalidated class set for {node!r}")

    def clear(self) -> None:
        self._class_sets.clear()
