"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). They locate the front-end project whose Jest configuration is being built.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Directories left unset are derived from `APP_DIRECTORY` by `resolve_app_paths`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_directory: Path = Field(default_factory=Path.cwd, alias="APP_DIRECTORY")
    scripts_directory: Path | None = Field(default=None, alias="SCRIPTS_DIRECTORY")
    sibling_packages_dir: Path | None = Field(default=None, alias="SIBLING_PACKAGES_DIR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is a standard `logging` level name."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level


def load_settings(**overrides: object) -> Settings:
    """Load and validate settings from environment variables.

    Keyword overrides use the environment variable names (e.g. `APP_DIRECTORY=...`) and take
    precedence over the environment.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
