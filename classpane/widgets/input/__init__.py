"""Input widgets for the classpane TUI.

This module provides input widgets for user interaction:
- ClassNameInput: Class name input with inline autocompletion
"""

from classpane.widgets.input.class_name_input import ClassNameInput, ClassNameSuggester

__all__ = [
    "ClassNameInput",
    "ClassNameSuggester",
]
