"""Settings state for the classpane TUI."""

from classpane.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    PaneSettings,
)
from classpane.models.state.config_manager import ConfigManager

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "PaneSettings",
]
