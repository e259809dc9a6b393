"""Default values for settings.

All default values used in the PaneSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

PLACEHOLDER_DEFAULT: Final = "Add new class"
SHOW_PANE_ON_START_DEFAULT: Final = False

# ============================================================================
# Write-back defaults
# ============================================================================

FLUSH_DELAY_SECONDS_DEFAULT: Final = 0.0
WRITE_LATENCY_SECONDS_DEFAULT: Final = 0.0

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FILE_DEFAULT: Final = ""

__all__ = [
    "FLUSH_DELAY_SECONDS_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "PLACEHOLDER_DEFAULT",
    "SHOW_PANE_ON_START_DEFAULT",
    "WRITE_LATENCY_SECONDS_DEFAULT",
]
