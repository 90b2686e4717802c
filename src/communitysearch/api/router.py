"""API router — Search and health endpoints, mounted under ``/api``."""

from __future__ import annotations

from fastapi import APIRouter

from communitysearch.api.endpoints.health import router as health_router
from communitysearch.api.endpoints.search import router as search_router

router = APIRouter()
router.include_router(search_router)
router.include_router(health_router)
