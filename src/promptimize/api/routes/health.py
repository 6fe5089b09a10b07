"""Health check routes."""

from fastapi import APIRouter, Depends

from ... import Promptimize, __version__
from ..schemas import HealthResponse
from .deps import get_app_core

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(core: Promptimize = Depends(get_app_core)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        history_size=len(core.store)
    )


@router.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Promptimize API",
        "version": __version__,
        "description": "Heuristic prompt improvement with a versioned history",
        "docs": "/docs",
        "endpoints": {
            "improve": "/api/v1/improve",
            "analyze": "/api/v1/analyze",
            "diff": "/api/v1/diff",
            "history": "/api/v1/history",
            "share": "/api/v1/share",
            "health": "/health"
        }
    }
