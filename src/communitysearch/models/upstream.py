"""Upstream models — Request and tolerant response shapes of the knowledge-base search API.

Upstream records are loosely shaped: the article may be nested under an
``article`` key or be the record itself, and every field is optional. They are
normalized once into ``UpstreamHit`` so the rest of the pipeline can rely on a
fixed shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

ARTICLE_NAMESPACE = "article"


class UpstreamPageRequest(BaseModel):
    """Body of one upstream search call."""

    query: str = Field(default="", description="Search text")
    namespaces: list[str] = Field(default_factory=lambda: [ARTICLE_NAMESPACE], description="Object types to search")
    limit: int = Field(ge=1, description="Maximum hits to return")
    cursor: str | None = Field(default=None, description="Cursor to resume from")
    mode: str = Field(default="after", description="Cursor direction")

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the wire; an empty cursor is omitted."""
        payload = self.model_dump(exclude={"cursor"})
        if self.cursor:
            payload["cursor"] = self.cursor
        return payload


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class UpstreamHit(BaseModel):
    """A single upstream search hit, reduced to the fields the adapter uses."""

    title: str | None = None
    display_name: str | None = None
    name: str | None = None
    external_reference: str | None = Field(
        default=None,
        description="Published help center URL (``sync_metadata.external_reference``)",
    )

    @classmethod
    def from_raw(cls, raw: Any) -> UpstreamHit:
        if not isinstance(raw, dict):
            return cls()
        article = raw.get("article")
        if not isinstance(article, dict):
            article = raw
        sync_metadata = article.get("sync_metadata")
        if not isinstance(sync_metadata, dict):
            sync_metadata = {}
        return cls(
            title=_str_or_none(article.get("title")),
            display_name=_str_or_none(article.get("display_name")),
            name=_str_or_none(article.get("name")),
            external_reference=_str_or_none(sync_metadata.get("external_reference")),
        )


class UpstreamPage(BaseModel):
    """One page of upstream results plus its pagination cursors."""

    hits: list[UpstreamHit] = Field(default_factory=list)
    next_cursor: str | None = None
    prev_cursor: str | None = None

    @classmethod
    def from_payload(cls, data: Any) -> UpstreamPage:
        if not isinstance(data, dict):
            return cls()
        results = data.get("results")
        if not isinstance(results, list):
            results = []
        return cls(
            hits=[UpstreamHit.from_raw(item) for item in results],
            next_cursor=_str_or_none(data.get("next_cursor")) or None,
            prev_cursor=_str_or_none(data.get("prev_cursor")) or None,
        )
