"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, IntEnum

# =============================================================================
# Document Enums
# =============================================================================


class NodeType(IntEnum):
    """DOM node type codes."""

    ELEMENT = 1
    TEXT = 3
    COMMENT = 8
    DOCUMENT = 9


# =============================================================================
# Pane Enums
# =============================================================================


class PaneState(Enum):
    """Interaction state of the classes pane for the current selection."""

    NO_SELECTION = "no_selection"
    VIEWING = "viewing"
    EDITING = "editing"


__all__ = [
    "NodeType",
    "PaneState",
]
