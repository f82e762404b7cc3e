"""Configuration loading and settings."""

from src.config.loader import ConfigurationError, load_config, merge_with_env
from src.config.settings import AppSettings, create_settings, get_settings, reload_settings

__all__ = [
    "AppSettings",
    "ConfigurationError",
    "create_settings",
    "get_settings",
    "load_config",
    "merge_with_env",
    "reload_settings",
]
