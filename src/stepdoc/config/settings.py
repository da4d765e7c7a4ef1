"""Configuration management for stepdoc using pydantic-settings.

Settings come from environment variables prefixed with ``STEPDOC_`` and an
optional ``.env`` file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StepdocSettings(BaseSettings):
    """Main configuration settings for stepdoc."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STEPDOC_",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level when debug mode is off")
    structured_logging: bool = Field(True, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional file to mirror logs into")

    # Markup settings
    recover_markup: bool = Field(
        True, description="Let the XML parser repair malformed markup where it can"
    )

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level.upper()


# Singleton instance
_settings: StepdocSettings | None = None


def get_settings() -> StepdocSettings:
    """Get the singleton settings instance.

    Returns:
        StepdocSettings instance
    """
    global _settings

    if _settings is None:
        _settings = StepdocSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
