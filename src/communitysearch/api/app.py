"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from communitysearch import __version__
from communitysearch.adapters.base.adapter import KnowledgeBaseAdapter
from communitysearch.api.cors import install_cors
from communitysearch.api.router import router as api_router
from communitysearch.config.settings import Settings
from communitysearch.core.engine import CommunitySearchEngine
from communitysearch.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, adapter: KnowledgeBaseAdapter | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.
        adapter: Upstream adapter override. Defaults to DevRev built from settings.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting %s v%s", settings.app_name, __version__)

        engine = CommunitySearchEngine(settings, adapter=adapter)
        await engine.initialize()

        app.state.settings = settings
        app.state.engine = engine

        logger.info("Ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down...")
        await engine.shutdown()
        app.state.engine = None

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Translates community search queries into knowledge-base searches "
            "and returns published help center articles in a paginated contract."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    install_cors(app, settings.server.cors_origin)
    app.include_router(api_router, prefix="/api")

    return app
