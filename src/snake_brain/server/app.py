"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from snake_brain.config import ServerConfig
from snake_brain.server.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    config: ServerConfig = app.state.config
    logger.info(
        "Starting Battlesnake server at http://%s:%d...", config.host, config.port,
    )
    yield
    logger.info("Battlesnake server stopped.")


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or ServerConfig()
    app = FastAPI(
        title="Snake Brain", version=config.appearance.version, lifespan=_lifespan,
    )
    app.state.config = config
    app.include_router(router)
    return app
