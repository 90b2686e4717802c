"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from fastapi import Request

from communitysearch.core.engine import CommunitySearchEngine


def get_engine(request: Request) -> CommunitySearchEngine:
    """Return the engine the app lifespan stored on ``app.state``.

    Raises:
        RuntimeError: If the lifespan has not run (or has already shut down).
    """
    engine: CommunitySearchEngine | None = getattr(request.app.state, "engine", None)
    if engine is None:
        raise RuntimeError("Search engine not initialized. Is the server running?")
    return engine
