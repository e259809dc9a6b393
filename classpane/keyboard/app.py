"""Bindings available on every screen of the app."""

from textual.binding import Binding

# ============================================================================
# App-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+q", "quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
