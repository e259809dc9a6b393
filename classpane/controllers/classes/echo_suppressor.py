"""Tracks nodes with an in-flight write issued by the classes engine."""

from __future__ import annotations

import logging
from collections import Counter

from classpane.models.dom.node import DOMNode

logger = logging.getLogger(__name__)


class EchoSuppressor:
    """Reference-counted set of nodes whose mutations are our own echo.

    A node is armed when a write is issued and released when that write
    settles. Overlapping writes to one node keep it armed until the last
    one settles.
    """

    def __init__(self) -> None:
        self._in_flight: Counter[DOMNode] = Counter()

    def __contains__(self, node: DOMNode) -> bool:
        return self.is_suppressed(node)

    def __len__(self) -> int:
        return len(self._in_flight)

    def arm(self, node: DOMNode) -> None:
        self._in_flight[node] += 1

    def release(self, node: DOMNode) -> None:
        """Release one in-flight write; releasing an unarmed node is a no-op."""
        count = self._in_flight.get(node, 0)
        if count <= 1:
            self._in_flight.pop(node, None)
        else:
            self._in_flight[node] = count - 1

    def is_suppressed(self, node: DOMNode) -> bool:
        return self._in_flight.get(node, 0) > 0
