"""Elements screen components."""

from classpane.screens.elements.components.classes_pane import ClassesPane

__all__ = [
    "ClassesPane",
]
