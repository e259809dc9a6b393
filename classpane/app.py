"""Main application class for the classpane TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from classpane.constants import APP_TITLE
from classpane.keyboard.app import APP_BINDINGS
from classpane.models.dom.loader import LoadedDocument
from classpane.models.state.config_manager import (
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
    PaneSettings,
)
from classpane.screens import ElementsScreen

logger = logging.getLogger(__name__)


class ClassPaneApp(App[None]):
    """Terminal elements inspector with the classes pane."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: PaneSettings

    def __init__(
        self,
        loaded: LoadedDocument,
        settings: PaneSettings | None = None,
        config_path: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.loaded = loaded
        self.config_path = config_path
        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as e:
            # Use defaults if loading fails
            logger.warning(f"{e}; using default settings")
            self.settings = PaneSettings()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(ElementsScreen(self.loaded, self.settings))

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        if self.config_path is None:
            return
        try:
            ConfigManager.save(self.settings, self.config_path)
        except ConfigSaveError as e:
            logger.warning(f"Failed to save settings: {e}")
