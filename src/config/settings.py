"""
Application settings management using Pydantic.

This module combines YAML configuration with environment variables to create
a unified settings object.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config.loader import ConfigurationError, load_config, merge_with_env

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(env_prefix="RESLIDES_API_")

    host: str = "127.0.0.1"
    port: int = 8000
    cors_enabled: bool = True
    cors_origins: list[str] = Field(default_factory=list)
    max_script_length: int = 100_000

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("max_script_length")
    @classmethod
    def validate_max_script_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_script_length must be positive")
        return v


class OutputSettings(BaseSettings):
    """Names and labels used for generated artifacts."""

    model_config = SettingsConfigDict(env_prefix="RESLIDES_OUTPUT_")

    presentation_filename: str = "presentation.html"
    chart_prefix: str = "chart"
    chart_extension: str = ".html"
    readme_filename: str = "readme.md"
    archive_filename: str = "reslides_presentation.zip"
    pptx_filename: str = "presentation.pptx"
    document_title: str = "Generated presentation"
    language: str = "en"

    @field_validator(
        "presentation_filename",
        "chart_prefix",
        "readme_filename",
        "archive_filename",
        "pptx_filename",
    )
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError("File names must be non-empty and contain no path separators")
        return v

    @field_validator("chart_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError("chart_extension must start with '.'")
        return v


class ThemeSettings(BaseSettings):
    """Colours and fonts applied to the HTML presentation and chart pages."""

    model_config = SettingsConfigDict(env_prefix="RESLIDES_THEME_")

    primary_color: str = "#1B365D"
    secondary_color: str = "#2C5F7F"
    accent_color: str = "#D4AF37"
    text_color: str = "#2D3748"
    background_color: str = "#FAFBFC"
    heading_font: str = "Sorts Mill Goudy"
    body_font: str = "Oranienbaum"

    @field_validator(
        "primary_color",
        "secondary_color",
        "accent_color",
        "text_color",
        "background_color",
    )
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not HEX_COLOR_PATTERN.match(v):
            raise ValueError(f"Colour must be a #RRGGBB hex string, got {v!r}")
        return v.upper()


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="RESLIDES_LOG_")

    level: str = "INFO"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Combines environment variables with YAML configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    api: APISettings = Field(default_factory=APISettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    environment: str = "development"


def create_settings(config_dir: Optional[Path] = None) -> AppSettings:
    """
    Create application settings by combining YAML config and environment variables.

    Returns:
        AppSettings instance with all configuration loaded

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    try:
        config = merge_with_env(load_config(config_dir))

        return AppSettings(
            api=APISettings(**config["api"]),
            output=OutputSettings(**config["output"]),
            theme=ThemeSettings(**config["theme"]),
            logging=LoggingSettings(**config["logging"]),
            environment=config.get("environment", "development"),
        )

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to create settings: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Get the application settings singleton.

    This function is cached, so subsequent calls return the same instance.
    Use reload_settings() to force a reload during development.
    """
    return create_settings()


def reload_settings() -> AppSettings:
    """Reload settings by clearing the cache and recreating."""
    get_settings.cache_clear()
    return get_settings()
