"""
YAML configuration loading.

ReSlides reads a single ``config.yaml`` with one section per concern
(``api``, ``output``, ``theme``, ``logging``) and lets a few environment
variables override it at startup.
"""

import copy
import os
from pathlib import Path
from typing import Any, Optional

import yaml


class ConfigurationError(Exception):
    """Raised when config.yaml is missing, malformed or incomplete."""

    pass


REQUIRED_SECTIONS = ["api", "output", "theme", "logging"]

CONFIG_DIR_ENV = "RESLIDES_CONFIG_DIR"


def _default_config_dir() -> Path:
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    # src/config/loader.py -> repository root
    return Path(__file__).resolve().parent.parent.parent / "config"


def get_config_path(filename: str, config_dir: Optional[Path] = None) -> Path:
    """
    Resolve a file inside the configuration directory.

    Args:
        filename: File to look up, e.g. ``config.yaml``
        config_dir: Directory to search; falls back to ``$RESLIDES_CONFIG_DIR``
            and then to ``config/`` at the repository root

    Raises:
        ConfigurationError: If the file does not exist
    """
    config_path = (config_dir or _default_config_dir()) / filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Pass --config-dir or set {CONFIG_DIR_ENV}"
        )

    return config_path


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Read a YAML document whose root is a mapping.

    Raises:
        ConfigurationError: If the file is unreadable, empty, invalid YAML
            or not a mapping
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read file {file_path}: {e}") from e

    if content is None:
        raise ConfigurationError(f"YAML file is empty: {file_path}")

    if not isinstance(content, dict):
        raise ConfigurationError(
            f"YAML file must contain a dictionary at root level: {file_path}"
        )

    return content


def load_config(config_dir: Optional[Path] = None) -> dict[str, Any]:
    """
    Load config.yaml and check that every required section is present.

    Raises:
        ConfigurationError: If the file cannot be loaded or sections are missing
    """
    config = load_yaml_file(get_config_path("config.yaml", config_dir))

    missing = [section for section in REQUIRED_SECTIONS if section not in config]
    if missing:
        raise ConfigurationError(
            f"Missing required configuration sections: {', '.join(missing)}"
        )

    return config


def merge_with_env(config: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of ``config`` with environment overrides applied.

    Recognised variables:
    - API_PORT -> api.port (ignored unless it is an integer)
    - LOG_LEVEL -> logging.level
    - ENVIRONMENT -> environment
    """
    merged = copy.deepcopy(config)

    if port := os.getenv("API_PORT"):
        try:
            merged["api"]["port"] = int(port)
        except (ValueError, KeyError):
            pass

    if log_level := os.getenv("LOG_LEVEL"):
        if "logging" in merged:
            merged["logging"]["level"] = log_level.upper()

    if environment := os.getenv("ENVIRONMENT"):
        merged["environment"] = environment

    return merged
