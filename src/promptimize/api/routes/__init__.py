"""API routes."""

from .enhancement import router as enhancement_router
from .history import router as history_router
from .sharing import router as sharing_router
from .health import router as health_router

__all__ = [
    "enhancement_router",
    "history_router",
    "sharing_router",
    "health_router",
]
