"""Feedback widgets for the classpane TUI.

This module provides feedback widgets:
- ToolbarToggle: Toolbar button with an on/off state
"""

from classpane.widgets.feedback.toolbar_toggle import ToolbarToggle

__all__ = [
    "ToolbarToggle",
]
