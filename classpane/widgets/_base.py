"""Shared widget base for classpane.

Widgets declare their permanent CSS classes once in ``_default_classes``;
the base adds them on construction next to any caller-supplied classes.

Example:
    >>> from classpane.widgets._base import BaseWidget
    >>>
    >>> class ClassBadge(BaseWidget):
    ...     _default_classes = "badge monospace"
"""

from __future__ import annotations

from typing import ClassVar

from textual.widget import Widget


class BaseWidget(Widget):
    """Widget that always carries its ``_default_classes``.

    Attributes:
        _default_classes: Space separated CSS classes added to every instance.
    """

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *children: Widget,
        name: str | None = None,
        id: str | None = None,
        classes: str = "",
        disabled: bool = False,
    ) -> None:
        super().__init__(*children, name=name, id=id, classes=classes, disabled=disabled)

        # Caller classes are already set; defaults are added on top.
        if self._default_classes:
            self.add_class(*self._default_classes.split())

    def compose_classes(self, *class_names: str) -> str:
        """Join non-empty class names into one class string.

        Args:
            *class_names: Class names; empty strings are skipped.

        Returns:
            The names separated by single spaces.
        """
        return " ".join(name for name in class_names if name)
