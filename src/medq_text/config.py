"""Configuration management for medq-text."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output settings
    default_format: str = Field(
        default="console",
        alias="MEDQ_TEXT_FORMAT",
    )
    json_indent: int = Field(
        default=2,
        alias="MEDQ_TEXT_JSON_INDENT",
    )

    # Console rendering
    code_theme: str = Field(
        default="monokai",
        alias="MEDQ_TEXT_CODE_THEME",
    )
    console_width: Optional[int] = Field(
        default=None,
        alias="MEDQ_TEXT_CONSOLE_WIDTH",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        alias="MEDQ_TEXT_LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
