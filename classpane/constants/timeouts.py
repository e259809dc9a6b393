"""Timeout constants for the TUI.

Delay values for write-back scheduling.
"""

from typing import Final

# ============================================================================
# Write-back scheduling (float, in seconds)
# ============================================================================

# Zero-delay coalescing window: edits within one loop tick share a flush.
FLUSH_THROTTLE_DELAY: Final = 0.0

__all__ = [
    "FLUSH_THROTTLE_DELAY",
]
