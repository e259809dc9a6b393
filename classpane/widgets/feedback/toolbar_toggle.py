"""Toolbar toggle button."""

from __future__ import annotations

from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button

from classpane.constants.values import TOOLBAR_TOGGLE_LABEL, TOOLBAR_TOGGLE_TOOLTIP


class ToolbarToggle(Button):
    """Button with an on/off state, used to show and hide a toolbar pane."""

    DEFAULT_CSS = """
    ToolbarToggle {
        min-width: 6;
        height: 1;
        border: none;
    }

    ToolbarToggle.-toggled {
        text-style: bold reverse;
    }
    """

    toggled = reactive(False)

    class Toggled(Message):
        """Posted when the user flips the toggle."""

        def __init__(self, toolbar_toggle: ToolbarToggle, toggled: bool) -> None:
            super().__init__()
            self.toolbar_toggle = toolbar_toggle
            self.toggled = toggled

        @property
        def control(self) -> ToolbarToggle:
            return self.toolbar_toggle

    def __init__(
        self,
        label: str = TOOLBAR_TOGGLE_LABEL,
        *,
        tooltip: str = TOOLBAR_TOGGLE_TOOLTIP,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(label, id=id, classes=classes, tooltip=tooltip, compact=True)

    def watch_toggled(self, toggled: bool) -> None:
        self.set_class(toggled, "-toggled")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.toggled = not self.toggled
        self.post_message(self.Toggled(self, self.toggled))
