"""Health check endpoint — liveness check for deployment platforms."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from communitysearch import __version__
from communitysearch.api.deps import get_engine
from communitysearch.core.engine import CommunitySearchEngine

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="Adapter version")
    service: str = Field(description="Service name ('community-search')")
    upstream: str = Field(description="Name of the upstream adapter")
    auth_required: bool = Field(description="Whether requests must carry the adapter key")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
)
async def health_check(
    engine: CommunitySearchEngine = Depends(get_engine),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="community-search",
        upstream=engine.adapter.name,
        auth_required=bool(engine.settings.auth.adapter_key),
    )
