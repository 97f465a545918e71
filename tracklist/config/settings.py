"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables (and a `.env` file when present)
and validated on startup.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- TrackListConfig: Defaults for newly created track lists
"""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    # File logging is off unless a path is configured
    log_file: Path | None = None
    real_time_debug: bool = True


class TrackListConfig(BaseModel):
    """Defaults applied when a track list is created without explicit values."""

    default_capacity: int = Field(default=10, ge=0)


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Nested values use a double underscore delimiter:
    - LOGGING__CONSOLE_LEVEL=DEBUG
    - TRACKLIST__DEFAULT_CAPACITY=25
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    tracklist: TrackListConfig = TrackListConfig()


# Singleton instance for application use
settings = Settings()
