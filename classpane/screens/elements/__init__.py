"""Elements screen module exports."""

from classpane.screens.elements.components import ClassesPane
from classpane.screens.elements.elements_screen import ElementsScreen
from classpane.screens.elements.presenter import ElementsPresenter, format_node_label

__all__ = [
    "ClassesPane",
    "ElementsPresenter",
    "ElementsScreen",
    "format_node_label",
]
