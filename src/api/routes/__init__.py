"""API routes."""

from src.api.routes.export import router as export_router
from src.api.routes.script import router as script_router

__all__ = [
    "export_router",
    "script_router",
]
