"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from classpane.constants.defaults import (
    FLUSH_DELAY_SECONDS_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PLACEHOLDER_DEFAULT,
    SHOW_PANE_ON_START_DEFAULT,
    WRITE_LATENCY_SECONDS_DEFAULT,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PaneSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Write-back
    flush_delay_seconds: float = Field(default=FLUSH_DELAY_SECONDS_DEFAULT, ge=0.0)
    write_latency_seconds: float = Field(default=WRITE_LATENCY_SECONDS_DEFAULT, ge=0.0)

    # UI preferences
    placeholder: str = PLACEHOLDER_DEFAULT
    show_pane_on_start: bool = SHOW_PANE_ON_START_DEFAULT

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = str(value or "").strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
