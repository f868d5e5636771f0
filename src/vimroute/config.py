"""Configuration management for vimroute."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="VIMROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Binary discovery
    app_dir: Optional[Path] = Field(
        None,
        validation_alias=AliasChoices("VIM_APP_DIR", "VIMROUTE_APP_DIR"),
        description="Directory holding MacVim.app; disables the candidate search",
    )
    fallback_binary: str = Field(default="vim", description="Command-line editor looked up on PATH")

    # Server selection
    default_server_name: str = Field(default="VIM", description="Server name used when none is given or running")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: Literal["text", "rich"] = Field(default="text", description="Log format")


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance with logging configured

    Raises:
        ConfigurationError: the environment holds an invalid setting
    """
    # pydantic-settings loads the environment and an optional .env file
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc

    try:
        configure_logging(level=settings.log_level, profile=settings.log_format)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid log level {settings.log_level!r}: {exc}") from exc

    return settings
