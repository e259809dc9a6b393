"""Classes controller - keeps per-element class state in sync with the document.

The controller owns four pieces of state:

- a ClassSetCache with the locally edited enabled/disabled model per element,
- a pending-write buffer mapping each dirtied element to its next ``class`` value,
- an EchoSuppressor naming elements with a write of ours still in flight,
- a Throttler that coalesces bursts of edits into one flush.

Usage:
    controller = ClassesController(dom_model)
    controller.attach()                       # subscribe to mutations
    controller.bind_input(class_input)        # text source for previews
    controller.on_selected_node_changed(node)
    controller.on_class_toggled("active", False)
    await controller.wait_for_flush()
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from classpane.constants.enums import PaneState
from classpane.constants.timeouts import FLUSH_THROTTLE_DELAY
from classpane.constants.values import CLASS_ATTRIBUTE
from classpane.controllers.base.base_controller import BaseController, WorkerResult
from classpane.controllers.classes.echo_suppressor import EchoSuppressor
from classpane.controllers.classes.throttler import Throttler
from classpane.models.cache.class_set_cache import ClassSet, ClassSetCache
from classpane.models.dom.dom_model import DOMModel
from classpane.models.dom.node import DOMNode
from classpane.utils.class_parser import serialize_classes, split_text_into_classes

logger = logging.getLogger(__name__)


class ClassTextInput(Protocol):
    """The text box the user types new class names into."""

    value: str

    def text_with_current_suggestion(self) -> str:
        """Return the typed text with any visible autocomplete suggestion applied."""
        ...

    def clear_text(self) -> None:
        """Clear the text without reporting it as a user edit."""
        ...


@dataclass(frozen=True)
class ClassesViewState:
    """Snapshot the pane renders: target element and its sorted class flags."""

    node: DOMNode | None
    classes: tuple[tuple[str, bool], ...] = ()

    @property
    def input_enabled(self) -> bool:
        return self.node is not None


class ClassesController(BaseController):
    """Edits class names on the selected element and writes them back."""

    def __init__(
        self,
        dom_model: DOMModel,
        *,
        flush_delay: float = FLUSH_THROTTLE_DELAY,
        on_update: Callable[[], None] | None = None,
    ) -> None:
        super().__init__()
        self._dom_model = dom_model
        self._class_sets = ClassSetCache()
        self._mutating_nodes = EchoSuppressor()
        self._pending_node_classes: dict[DOMNode, str] = {}
        self._update_node_throttler = Throttler(flush_delay)
        self._selected_node: DOMNode | None = None
        self._input: ClassTextInput | None = None
        self._on_update = on_update
        self._last_flush_results: list[WorkerResult] = []

    # =========================================================================
    # Wiring
    # =========================================================================

    def attach(self) -> None:
        """Subscribe to the document's mutation notifications."""
        self._dom_model.add_mutation_listener(self.on_external_mutation)

    def detach(self) -> None:
        """Unsubscribe and drop any flush that has not started yet."""
        self._dom_model.remove_mutation_listener(self.on_external_mutation)
        self._update_node_throttler.cancel()

    def bind_input(self, text_input: ClassTextInput | None) -> None:
        self._input = text_input

    def set_update_callback(self, on_update: Callable[[], None] | None) -> None:
        self._on_update = on_update

    # =========================================================================
    # State
    # =========================================================================

    @property
    def dom_model(self) -> DOMModel:
        return self._dom_model

    @property
    def selected_node(self) -> DOMNode | None:
        return self._selected_node

    @property
    def target_node(self) -> DOMNode | None:
        """The element class edits apply to: the selection or its enclosing element."""
        if self._selected_node is None:
            return None
        return self._selected_node.enclosing_element_or_self()

    @property
    def state(self) -> PaneState:
        if self.target_node is None:
            return PaneState.NO_SELECTION
        if self._input_text():
            return PaneState.EDITING
        return PaneState.VIEWING

    @property
    def pending_node_classes(self) -> dict[DOMNode, str]:
        """Copy of the values waiting to be flushed."""
        return dict(self._pending_node_classes)

    @property
    def last_flush_results(self) -> list[WorkerResult]:
        return list(self._last_flush_results)

    def is_suppressed(self, node: DOMNode) -> bool:
        return self._mutating_nodes.is_suppressed(node)

    def node_classes(self, node: DOMNode) -> ClassSet:
        return self._class_sets.get(node)

    def toggle_class(self, node: DOMNode, class_name: str, enabled: bool) -> None:
        self._class_sets.toggle(node, class_name, enabled)

    def view_state(self) -> ClassesViewState:
        node = self.target_node
        if node is None:
            return ClassesViewState(node=None)
        classes = self.node_classes(node)
        names = sorted(classes, key=lambda name: (name.lower(), name))
        return ClassesViewState(
            node=node,
            classes=tuple((name, classes[name]) for name in names),
        )

    def reset(self) -> None:
        self._update_node_throttler.cancel()
        self._class_sets.clear()
        self._pending_node_classes.clear()
        self._selected_node = None
        self.update()

    # =========================================================================
    # Input helpers
    # =========================================================================

    def _input_text(self) -> str:
        return self._input.value if self._input is not None else ""

    def _input_text_with_suggestion(self) -> str:
        if self._input is None:
            return ""
        return self._input.text_with_current_suggestion()

    def _clear_input(self) -> None:
        if self._input is not None:
            self._input.clear_text()

    # =========================================================================
    # Selection and user edits
    # =========================================================================

    def on_selected_node_changed(self, node: DOMNode | None) -> None:
        """Switch selection, committing text still sitting in the input first."""
        previous = self.target_node
        text = self._input_text()
        if previous is not None and text:
            self._clear_input()
            for class_name in split_text_into_classes(text):
                self.toggle_class(previous, class_name, True)
            self.install_node_classes(previous)
        self._selected_node = node
        self.update()

    def on_class_toggled(self, class_name: str, enabled: bool) -> None:
        """Handle a checkbox click for ``class_name``."""
        node = self.target_node
        if node is None:
            return
        self.toggle_class(node, class_name, enabled)
        self.install_node_classes(node)

    def commit_text(self, text: str) -> None:
        """Enable every class named in ``text`` and clear the input."""
        self._clear_input()
        node = self.target_node
        if node is None:
            return
        for class_name in split_text_into_classes(text):
            self.toggle_class(node, class_name, True)
        self.install_node_classes(node)
        self.update()

    def cancel_text(self) -> None:
        """Drop the typed text; the preview it caused is written back out."""
        self.commit_text("")

    def on_text_changed(self) -> None:
        """Preview the typed text (and suggestion) on the live attribute."""
        node = self.target_node
        if node is None:
            return
        self.install_node_classes(node)

    # =========================================================================
    # Write-back
    # =========================================================================

    def install_node_classes(self, node: DOMNode) -> None:
        """Queue the node's active classes for writing and schedule a flush."""
        classes = self.node_classes(node)
        active_classes = {class_name for class_name, enabled in classes.items() if enabled}
        active_classes.update(split_text_into_classes(self._input_text_with_suggestion()))

        self._pending_node_classes[node] = serialize_classes(active_classes)
        self._update_node_throttler.schedule(self.flush_pending_classes)

    async def flush_pending_classes(self) -> list[WorkerResult]:
        """Issue one write per dirtied node.

        The buffer is swapped out before any write is issued, so edits made
        while writes are in flight collect in a fresh buffer for the next flush.
        """
        pending, self._pending_node_classes = self._pending_node_classes, {}
        if not pending:
            return []

        logger.debug(f"Flushing class writes for {len(pending)} node(s)")
        for node in pending:
            self._mutating_nodes.arm(node)
        results = await asyncio.gather(
            *(self._write_node_classes(node, value) for node, value in pending.items())
        )
        self._last_flush_results = list(results)
        return list(results)

    async def _write_node_classes(self, node: DOMNode, value: str) -> WorkerResult:
        start = self._start_timer()
        try:
            await self._dom_model.set_attribute_value(node, CLASS_ATTRIBUTE, value)
        except Exception as e:
            logger.warning(f"Failed to write class={value!r} on {node!r}: {e}")
            return WorkerResult(
                success=False,
                data=value,
                error=str(e),
                duration_ms=self._elapsed_ms(start),
            )
        finally:
            self._mutating_nodes.release(node)
        return WorkerResult(success=True, data=value, duration_ms=self._elapsed_ms(start))

    async def wait_for_flush(self) -> None:
        """Wait until every scheduled flush has finished."""
        await self._update_node_throttler.join()

    # =========================================================================
    # Document notifications
    # =========================================================================

    def on_external_mutation(self, node: DOMNode) -> None:
        """Drop the cached class set unless the mutation is our own echo."""
        if self._mutating_nodes.is_suppressed(node):
            logger.debug(f"Ignoring echo of own write on {node!r}")
            return
        self._class_sets.invalidate(node)
        self.update()

    def update(self) -> None:
        """Ask the host to re-render."""
        if self._on_update is not None:
            self._on_update()
