"""Result projector — Filters upstream hits and builds the downstream page.

A hit is shown only when its article is published on the configured help
center, i.e. its external reference starts with the help center base URL. The
same predicate drives the count walk, so ``count`` and ``results`` agree on
what is visible.
"""

from __future__ import annotations

from urllib.parse import urlencode

from communitysearch.core.normalizer import ADAPTER_KEY_PARAM
from communitysearch.models.query import QueryDescriptor, RequestContext
from communitysearch.models.response import PageEnvelope, ResultItem
from communitysearch.models.upstream import UpstreamHit, UpstreamPage

FALLBACK_TITLE = "Help Center Article"


class ResultProjector:
    """Maps upstream pages onto ``PageEnvelope`` for one request.

    Args:
        context: Request context (help center base, adapter base, secret).
        search_path: Path of this adapter's search endpoint, used in pager URLs.
    """

    def __init__(self, context: RequestContext, search_path: str = "/api/search") -> None:
        self.context = context
        self.search_path = "/" + search_path.lstrip("/")

    def is_visible(self, hit: UpstreamHit) -> bool:
        ref = hit.external_reference
        return isinstance(ref, str) and ref.startswith(self.context.help_base)

    def to_item(self, hit: UpstreamHit) -> ResultItem:
        title = next((t for t in (hit.title, hit.display_name, hit.name) if t), FALLBACK_TITLE)
        return ResultItem(title=title, url=hit.external_reference or "")

    def project(self, hits: list[UpstreamHit], limit: int) -> list[ResultItem]:
        """Visible hits as result items, in upstream order, at most ``limit`` of them."""
        return [self.to_item(hit) for hit in hits if self.is_visible(hit)][:limit]

    def pager_url(self, cursor: str | None, target_page: int, query: QueryDescriptor) -> str | None:
        """Absolute URL back to this adapter that resumes at ``cursor``.

        Returns ``None`` when there is no cursor or no known adapter base URL.
        """
        if not cursor or not self.context.adapter_base:
            return None

        params: dict[str, str] = {}
        if query.text:
            params["q"] = query.text
        params["perPage"] = str(query.per_page)
        params["page"] = str(target_page)
        params["cursor"] = cursor
        if self.context.adapter_key:
            params[ADAPTER_KEY_PARAM] = self.context.adapter_key

        base = self.context.adapter_base.rstrip("/")
        return f"{base}{self.search_path}?{urlencode(params)}"

    def build_envelope(self, query: QueryDescriptor, page: UpstreamPage, count: int) -> PageEnvelope:
        return PageEnvelope(
            count=max(0, count),
            current_page=query.page,
            per_page=query.per_page,
            next=self.pager_url(page.next_cursor, query.page + 1, query),
            previous=self.pager_url(page.prev_cursor, max(1, query.page - 1), query),
            results=self.project(page.hits, query.per_page),
        )
