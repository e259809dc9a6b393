"""Classes pane - text input plus one checkbox per class of the selected element."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Show
from textual.suggester import SuggestionReady
from textual.widgets import Input

from classpane.constants.defaults import PLACEHOLDER_DEFAULT
from classpane.controllers.classes.controller import ClassesController
from classpane.controllers.completion.provider import ClassNameCompletionProvider
from classpane.widgets._base import BaseWidget
from classpane.widgets.input.class_name_input import ClassNameInput
from classpane.widgets.selection.class_checkbox_list import ClassCheckboxList

logger = logging.getLogger(__name__)


class ClassesPane(BaseWidget):
    """Toolbar pane for toggling and adding classes on the selected element.

    The pane is a thin view over ClassesController: user edits are forwarded
    to the controller, and the controller asks for a re-render through the
    update callback bound on mount. Re-rendering is skipped while hidden and
    done on show instead.
    """

    DEFAULT_CSS = """
    ClassesPane {
        height: auto;
        max-height: 50%;
        padding: 0 1;
        border-bottom: solid $primary-darken-2;
    }

    ClassesPane > .title-container {
        height: auto;
    }

    ClassesPane #new-class-input {
        border: tall $surface-lighten-1;
    }

    ClassesPane > #classes-container {
        height: auto;
        max-height: 12;
        overflow-y: auto;
    }
    """

    _default_classes = "styles-element-classes-pane"

    def __init__(
        self,
        controller: ClassesController,
        completion_provider: ClassNameCompletionProvider | None = None,
        *,
        placeholder: str = PLACEHOLDER_DEFAULT,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._controller = controller
        self._completion_provider = completion_provider
        self._placeholder = placeholder

    @property
    def controller(self) -> ClassesController:
        return self._controller

    @property
    def is_showing(self) -> bool:
        return self.is_mounted and self.display

    def compose(self) -> ComposeResult:
        yield Container(
            ClassNameInput(
                self._completion_provider,
                placeholder=self._placeholder,
                id="new-class-input",
                classes="monospace",
            ),
            classes="title-container",
        )
        yield ClassCheckboxList(
            id="classes-container",
            classes=self.compose_classes("source-code", "styles-element-classes-container"),
        )

    def on_mount(self) -> None:
        self._controller.bind_input(self.query_one(ClassNameInput))
        self._controller.set_update_callback(self.refresh_classes)
        self.refresh_classes()

    def on_unmount(self) -> None:
        self._controller.bind_input(None)
        self._controller.set_update_callback(None)

    def on_show(self, _: Show) -> None:
        self.refresh_classes()

    def focus_input(self) -> None:
        class_input = self.query_one(ClassNameInput)
        class_input.disabled = self._controller.target_node is None
        class_input.focus()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_classes(self) -> None:
        """Rebuild the checkbox list from the controller's view state."""
        if not self.is_showing:
            return
        self.run_worker(self._render_classes, exclusive=True, group="classes-render")

    async def _render_classes(self) -> None:
        view_state = self._controller.view_state()
        self.query_one(ClassNameInput).disabled = not view_state.input_enabled
        await self.query_one(ClassCheckboxList).set_classes(view_state.classes)

    # =========================================================================
    # User edits
    # =========================================================================

    def on_class_checkbox_list_class_toggled(
        self, event: ClassCheckboxList.ClassToggled,
    ) -> None:
        event.stop()
        self._controller.on_class_toggled(event.class_name, event.enabled)

    def on_class_name_input_committed(self, event: ClassNameInput.Committed) -> None:
        event.stop()
        self._controller.commit_text(event.text)

    def on_class_name_input_cancelled(self, event: ClassNameInput.Cancelled) -> None:
        event.stop()
        self._controller.cancel_text()

    @on(Input.Changed, "#new-class-input")
    def _on_text_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._controller.on_text_changed()

    @on(SuggestionReady)
    def _on_suggestion_ready(self, _: SuggestionReady) -> None:
        # The suggestion is part of the live preview.
        self._controller.on_text_changed()
