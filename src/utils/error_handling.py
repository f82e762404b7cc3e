"""Exception types shared by the services, API and CLI."""

from typing import Any, Dict, Optional

from src.config.loader import ConfigurationError

NO_SLIDES_MESSAGE = (
    "No slides were detected. Start each slide with a line such as "
    "'Diapositiva 1' (or 'Slide 1') followed by lines like 'Título: ...' "
    "and 'Contenido: ...'."
)


class AppException(Exception):
    """Base class for application errors.

    Attributes:
        message: Human-readable description
        details: Structured context for logs and API responses
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class EmptyScriptError(AppException):
    """Raised when a script yields no slides and there is nothing to render."""

    def __init__(self, message: str = NO_SLIDES_MESSAGE, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ExportError(AppException):
    """Raised when an archive or slideshow file cannot be produced."""


def format_exception_for_logging(exc: BaseException) -> Dict[str, Any]:
    """Flatten an exception into a dict suitable for ``extra=``."""
    info: Dict[str, Any] = {
        "error_type": type(exc).__name__,
        "error_message": str(exc),
    }
    if isinstance(exc, AppException) and exc.details:
        info["error_details"] = exc.details
    return info


__all__ = [
    "AppException",
    "ConfigurationError",
    "EmptyScriptError",
    "ExportError",
    "NO_SLIDES_MESSAGE",
    "format_exception_for_logging",
]
