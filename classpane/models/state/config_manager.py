"""Load and save PaneSettings as YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from classpane.constants.values import CONFIG_DIR_NAME, CONFIG_ENV_VAR, CONFIG_FILE_NAME
from classpane.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    PaneSettings,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads and writes the settings file.

    The file location is, in order: the explicit ``path`` argument, the
    ``CLASSPANE_CONFIG`` environment variable, then
    ``~/.config/classpane/settings.yaml``.
    """

    @staticmethod
    def default_path() -> Path:
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return Path(override).expanduser()
        return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | str | None = None) -> PaneSettings:
        """Load settings; a missing file yields defaults.

        Raises:
            ConfigLoadError: If the file exists but cannot be read or validated.
        """
        config_path = Path(path) if path is not None else cls.default_path()
        if not config_path.is_file():
            logger.debug(f"No settings file at {config_path}, using defaults")
            return PaneSettings()

        try:
            with open(config_path, encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Failed to read settings {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings file {config_path} must contain a mapping")

        try:
            settings = PaneSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {e}") from e

        logger.info(f"Loaded settings from {config_path}")
        return settings

    @classmethod
    def save(cls, settings: PaneSettings, path: Path | str | None = None) -> Path:
        """Write settings to disk, creating parent directories.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        config_path = Path(path) if path is not None else cls.default_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as handle:
                yaml.safe_dump(settings.model_dump(), handle, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigSaveError(f"Failed to write settings {config_path}: {e}") from e
        return config_path


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "PaneSettings",
]
