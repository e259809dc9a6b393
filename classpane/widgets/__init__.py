"""Widgets module for the classpane TUI.

This module provides all reusable widgets organized into submodules:
- feedback: Toolbar toggle
- input: Class name input with autocompletion
- selection: Class checkbox list
"""

# Base classes
from classpane.widgets._base import BaseWidget

# Feedback widgets
from classpane.widgets.feedback import ToolbarToggle

# Input widgets
from classpane.widgets.input import ClassNameInput, ClassNameSuggester

# Selection widgets
from classpane.widgets.selection import ClassCheckboxList

__all__ = [
    # Base classes
    "BaseWidget",
    # Selection
    "ClassCheckboxList",
    # Input
    "ClassNameInput",
    "ClassNameSuggester",
    # Feedback
    "ToolbarToggle",
]
