"""Scalar constants (strings with Final)."""

from typing import Final

APP_TITLE: Final = "classpane"

CLASS_ATTRIBUTE: Final = "class"

TOOLBAR_TOGGLE_LABEL: Final = ".cls"
TOOLBAR_TOGGLE_TOOLTIP: Final = "Element Classes"

CONFIG_ENV_VAR: Final = "CLASSPANE_CONFIG"
CONFIG_DIR_NAME: Final = "classpane"
CONFIG_FILE_NAME: Final = "settings.yaml"

# At-rules whose block holds further style rules.
CSS_GROUPING_AT_RULES: Final = frozenset({"media", "supports", "layer", "container", "document", "scope"})

__all__ = [
    "APP_TITLE",
    "CLASS_ATTRIBUTE",
    "CONFIG_DIR_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "CSS_GROUPING_AT_RULES",
    "TOOLBAR_TOGGLE_LABEL",
    "TOOLBAR_TOGGLE_TOOLTIP",
]
