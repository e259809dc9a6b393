"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Elements screen
# ============================================================================

ELEMENTS_SCREEN_BINDINGS: list[Binding] = [
    Binding("f2", "toggle_classes", ".cls"),
    Binding("escape", "hide_classes", "Hide classes", show=False),
    Binding("ctrl+t", "focus_tree", "Tree"),
]

__all__ = [
    "ELEMENTS_SCREEN_BINDINGS",
]
