"""Utility modules."""

from src.utils.error_handling import (
    AppException,
    ConfigurationError,
    EmptyScriptError,
    ExportError,
    format_exception_for_logging,
)
from src.utils.logging_config import setup_logging

__all__ = [
    # Error handling
    "AppException",
    "ConfigurationError",
    "EmptyScriptError",
    "ExportError",
    "format_exception_for_logging",
    # Logging
    "setup_logging",
]
