"""Checkbox list showing one toggle per class name."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.message import Message
from textual.widgets import Checkbox

from classpane.widgets._base import BaseWidget


class ClassCheckboxList(BaseWidget):
    """Vertical list of class checkboxes; posts ClassToggled on clicks."""

    DEFAULT_CSS = """
    ClassCheckboxList {
        height: auto;
        layout: vertical;
    }

    ClassCheckboxList > .class-checkbox {
        border: none;
        padding: 0 1;
        height: 1;
    }
    """

    _default_classes = "class-checkbox-list"

    class ClassToggled(Message):
        """Posted when the user toggles a class checkbox."""

        def __init__(self, class_name: str, enabled: bool) -> None:
            super().__init__()
            self.class_name = class_name
            self.enabled = enabled

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(id=id, classes=classes)
        self._entries: tuple[tuple[str, bool], ...] = ()

    @property
    def entries(self) -> tuple[tuple[str, bool], ...]:
        """The (class name, checked) pairs currently shown."""
        return self._entries

    async def set_classes(self, entries: Iterable[tuple[str, bool]]) -> None:
        """Replace the checkboxes; unchanged entries leave the list untouched."""
        new_entries = tuple(entries)
        if new_entries == self._entries and len(self.children) == len(new_entries):
            return
        self._entries = new_entries
        await self.remove_children()
        if new_entries:
            await self.mount_all(
                Checkbox(
                    Text(class_name),
                    enabled,
                    name=class_name,
                    classes=self.compose_classes("class-checkbox", "monospace"),
                )
                for class_name, enabled in new_entries
            )

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        class_name = event.checkbox.name
        if class_name is None:
            return
        self._entries = tuple(
            (name, event.value if name == class_name else enabled)
            for name, enabled in self._entries
        )
        self.post_message(self.ClassToggled(class_name, event.value))
