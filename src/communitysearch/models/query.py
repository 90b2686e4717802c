"""Query models — Canonical search query and per-request context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_PER_PAGE = 50
DEFAULT_PER_PAGE = 10


class QueryDescriptor(BaseModel):
    """Canonical, immutable description of one community search request."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="Free-text search query")
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE, description="Results per page")
    page: int = Field(default=1, ge=1, description="1-based page number as seen by the caller")
    cursor: str = Field(default="", description="Opaque upstream cursor, replayed as-is")


class RequestContext(BaseModel):
    """Request-scoped values derived from settings and inbound headers."""

    model_config = ConfigDict(frozen=True)

    help_base: str = Field(description="Help center base URL without trailing slash")
    adapter_base: str | None = Field(default=None, description="Absolute base URL of this adapter, if known")
    adapter_key: str = Field(default="", description="Configured shared secret, echoed into pager URLs")
    debug: bool = Field(default=False, description="Include diagnostics in error responses")
