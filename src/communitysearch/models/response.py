"""Response models — The paginated contract expected by the community platform.

Field names on the wire are camelCase (``currentPage``, ``perPage``); the
models accept either spelling on input and serialize by alias.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResultItem(BaseModel):
    """A single published help center article."""

    title: str = Field(description="Article title")
    url: str = Field(description="Public help center URL")


class PageEnvelope(BaseModel):
    """One page of results with an approximate total and pager links."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(default=0, ge=0, description="Approximate number of published matches")
    current_page: int = Field(alias="currentPage", ge=1, description="1-based page number")
    per_page: int = Field(alias="perPage", ge=1, description="Page size")
    next: str | None = Field(default=None, description="Absolute URL of the next page")
    previous: str | None = Field(default=None, description="Absolute URL of the previous page")
    results: list[ResultItem] = Field(default_factory=list, description="Results on this page")


class SearchResponse(BaseModel):
    """Top-level 200 response body."""

    results: PageEnvelope


class ErrorResponse(BaseModel):
    """Error body for 401 and 500 responses."""

    error: str
