"""Screens for the classpane TUI."""

from classpane.screens.elements import ElementsScreen

__all__ = [
    "ElementsScreen",
]
