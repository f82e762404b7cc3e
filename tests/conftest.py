"""
Pytest configuration and shared fixtures.

This module provides fixtures that are available to all test modules.
"""

import os
from pathlib import Path
from typing import Any, Generator
from unittest.mock import patch

import pytest

from src.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """
    Clear settings cache before each test.

    This ensures each test gets fresh settings.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_env_vars() -> Generator[dict[str, str], None, None]:
    """Provide mock environment variables for testing."""
    env_vars = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "debug",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Provide a complete configuration dictionary."""
    return {
        "environment": "development",
        "api": {
            "host": "127.0.0.1",
            "port": 8000,
            "cors_enabled": True,
            "cors_origins": ["http://localhost:3000"],
            "max_script_length": 5000,
        },
        "output": {
            "presentation_filename": "presentation.html",
            "chart_prefix": "chart",
            "chart_extension": ".html",
            "readme_filename": "readme.md",
            "archive_filename": "reslides_presentation.zip",
            "pptx_filename": "presentation.pptx",
            "document_title": "Generated presentation",
            "language": "en",
        },
        "theme": {
            "primary_color": "#1B365D",
            "secondary_color": "#2C5F7F",
            "accent_color": "#D4AF37",
            "text_color": "#2D3748",
            "background_color": "#FAFBFC",
            "heading_font": "Sorts Mill Goudy",
            "body_font": "Oranienbaum",
        },
        "logging": {
            "level": "INFO",
            "format": "text",
        },
    }


@pytest.fixture
def temp_config_dir(tmp_path: Path, sample_config: dict[str, Any]) -> Path:
    """Write sample_config to a temporary config directory."""
    import yaml

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    with open(config_dir / "config.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(sample_config, f)
    return config_dir


@pytest.fixture
def sample_script() -> str:
    """A two-slide script with a chart, as users write it."""
    return (
        "Diapositiva 1\n"
        "Titulo: Presentacion de prueba\n"
        "Contenido: Esto es la primera diapositiva; Tiene varios puntos de texto; Puede listar items\n"
        "\n"
        "Diapositiva 2\n"
        "Titulo: Frecuencia de uso\n"
        "Datos: Labels: Resumenes, Ideas, Redaccion; Valores: 4.2, 3.8, 2.5\n"
        "Descripcion: Frecuencia de uso por actividad\n"
        "Contenido: La mayoria usa IA para resumir, generar ideas y redactar trabajos.\n"
    )


@pytest.fixture
def chart_script() -> str:
    """Four slides; slides 2 and 4 carry renderable charts, slide 3 an empty one."""
    return (
        "Slide 1\n"
        "Title: Quarterly review\n"
        "Content: Highlights; Next steps\n"
        "Slide 2\n"
        "Title: Revenue\n"
        "Data: Labels: Q1, Q2, Q3; Values: 10, 12.5, 14\n"
        "Description: Revenue by quarter\n"
        "Slide 3\n"
        "Title: Notes\n"
        "Data: nothing useful here\n"
        "Slide 4\n"
        "Title: Costs\n"
        "Chart: Labels: Rent, Staff; Values: 3, 7\n"
    )


@pytest.fixture(autouse=True)
def restore_root_logger():
    """
    Restore the root logger after each test.

    The CLI and the API lifespan call setup_logging, which installs a
    handler bound to the stream that was current at the time.
    """
    import logging

    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.handlers = handlers
    root.setLevel(level)
