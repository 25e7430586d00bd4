"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from scrap_hunter.api.dependencies import set_engine_manager
from scrap_hunter.api.engine_manager import EngineManager
from scrap_hunter.api.routes import api_router
from scrap_hunter.config import SimulationConfig
from scrap_hunter.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: SimulationConfig | None = None, configure_logging: bool = True) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = SimulationConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logging:
            setup_logging(_config.log_level)
        manager = EngineManager(_config)
        set_engine_manager(manager)
        logger.info("API server started: day %d ready.", manager.get_snapshot().day)
        yield
        set_engine_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Scrap Hunter Engine",
        description=(
            "Turn-based grid exploration engine: one command per request.\n\n"
            "## API Groups\n\n"
            "- **State**: HUD numbers, player, pursuers, events, finished days\n"
            "- **Map**: the rendered board\n"
            "- **Control**: player commands and session reset\n"
            "- **Config**: read-only simulation configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(api_router)
    return app
