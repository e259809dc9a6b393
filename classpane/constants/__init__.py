"""Constants module for the classpane TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Delay values (seconds)
- defaults.py: Default values for settings
- patterns.py: Regex patterns for class attribute and input parsing

Note: Keyboard bindings are defined in classpane.keyboard module.
"""

from classpane.constants.defaults import (
    FLUSH_DELAY_SECONDS_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PLACEHOLDER_DEFAULT,
    SHOW_PANE_ON_START_DEFAULT,
    WRITE_LATENCY_SECONDS_DEFAULT,
)
from classpane.constants.enums import NodeType, PaneState
from classpane.constants.timeouts import (
    FLUSH_THROTTLE_DELAY,
)
from classpane.constants.values import (
    APP_TITLE,
    CLASS_ATTRIBUTE,
    CONFIG_DIR_NAME,
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    CSS_GROUPING_AT_RULES,
    TOOLBAR_TOGGLE_LABEL,
    TOOLBAR_TOGGLE_TOOLTIP,
)

__all__ = [
    "APP_TITLE",
    "CLASS_ATTRIBUTE",
    "CONFIG_DIR_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "CSS_GROUPING_AT_RULES",
    "FLUSH_DELAY_SECONDS_DEFAULT",
    "FLUSH_THROTTLE_DELAY",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "PLACEHOLDER_DEFAULT",
    "SHOW_PANE_ON_START_DEFAULT",
    "TOOLBAR_TOGGLE_LABEL",
    "TOOLBAR_TOGGLE_TOOLTIP",
    "WRITE_LATENCY_SECONDS_DEFAULT",
    "NodeType",
    "PaneState",
]
