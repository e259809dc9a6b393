"""Keyboard bindings module.

This module provides all keyboard bindings for the classpane TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from classpane.keyboard.app import APP_BINDINGS
from classpane.keyboard.navigation import ELEMENTS_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "ELEMENTS_SCREEN_BINDINGS",
]
