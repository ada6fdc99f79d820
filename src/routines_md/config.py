"""Configuration management for routines-md."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rendering
    link_scheme: str = Field(
        default="https://",
        alias="ROUTINES_MD_LINK_SCHEME",
    )
    bullet_glyph: str = Field(
        default="•",
        alias="ROUTINES_MD_BULLET",
    )
    code_block_label: str = Field(
        default="Code",
        alias="ROUTINES_MD_CODE_LABEL",
    )

    # Export
    json_indent: int = Field(
        default=2,
        ge=0,
        alias="ROUTINES_MD_JSON_INDENT",
    )
    default_format: str = Field(
        default="json",
        pattern="^(json|txt|md)$",
        alias="ROUTINES_MD_FORMAT",
    )

    # Logging level used by the CLI when --verbose is not given
    log_level: str = Field(
        default="WARNING",
        pattern="^(?i:debug|info|warning|error|critical)$",
        alias="ROUTINES_MD_LOG_LEVEL",
    )


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


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads them."""
    global _settings
    _settings = None
