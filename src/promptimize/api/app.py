"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import Promptimize, __version__
from ..core.config import get_settings
from ..core.logging import configure_logging
from .routes import (
    enhancement_router,
    history_router,
    sharing_router,
    health_router,
)


def create_app(
    core: Optional[Promptimize] = None,
    title: str = "Promptimize API",
    description: str = "Heuristic prompt improvement with a versioned history",
    enable_cors: bool = True,
    cors_origins: Optional[list] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        core: Application core to serve (default: built from settings)
        title: API title
        description: API description
        enable_cors: Whether to enable CORS
        cors_origins: Allowed CORS origins (default: from settings)

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        debug=settings.api.debug,
    )
    app.state.promptimize = core or Promptimize.from_settings(settings)

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins or settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health_router)
    app.include_router(enhancement_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")
    app.include_router(sharing_router, prefix="/api/v1")

    return app


def run_server(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
    workers: int = 1
) -> None:
    """
    Run the API server.

    Workers share one history file and each keeps its own copy in memory;
    the last write wins.
    """
    import uvicorn

    uvicorn.run(
        "promptimize.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=workers
    )


if __name__ == "__main__":
    run_server()
