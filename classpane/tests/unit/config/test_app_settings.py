"""Tests for PaneSettings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from classpane.constants.defaults import PLACEHOLDER_DEFAULT
from classpane.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    PaneSettings,
)


class TestPaneSettings:
    """Tests for PaneSettings defaults and validators."""

    def test_defaults(self) -> None:
        settings = PaneSettings()
        assert settings.placeholder == PLACEHOLDER_DEFAULT
        assert settings.show_pane_on_start is False
        assert settings.flush_delay_seconds == 0.0
        assert settings.log_level == "WARNING"
        assert settings.log_file == ""

    def test_log_level_is_normalized(self) -> None:
        assert PaneSettings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PaneSettings(log_level="verbose")

    def test_negative_delays_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PaneSettings(flush_delay_seconds=-1)
        with pytest.raises(ValidationError):
            PaneSettings(write_latency_seconds=-0.5)


class TestConfigErrors:
    """Tests for the config exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)
        assert issubclass(ConfigSaveError, ConfigError)
