"""Upstream search client — Page fetch and the bounded count walk.

The upstream API has no total-count field, so the total is approximated by
walking cursors from the start of the result set and counting qualifying hits,
up to ``count.max_pages`` calls. Large result sets are undercounted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from communitysearch.adapters.base.adapter import KnowledgeBaseAdapter
from communitysearch.adapters.base.exceptions import AdapterError
from communitysearch.config.settings import CountSettings
from communitysearch.models.query import QueryDescriptor
from communitysearch.models.upstream import UpstreamHit, UpstreamPage, UpstreamPageRequest

logger = logging.getLogger(__name__)


class UpstreamSearchClient:
    """Issues page and count-walk searches through a ``KnowledgeBaseAdapter``.

    Args:
        adapter: Transport to the upstream search API.
        count_settings: Bounds of the count walk.
    """

    def __init__(self, adapter: KnowledgeBaseAdapter, count_settings: CountSettings) -> None:
        self.adapter = adapter
        self.count_settings = count_settings

    async def fetch_page(self, query: QueryDescriptor) -> UpstreamPage:
        """Fetch the page the caller asked for.

        Raises:
            UpstreamError: Relayed unchanged; the page fetch is never retried.
        """
        request = UpstreamPageRequest(
            query=query.text,
            limit=query.per_page,
            cursor=query.cursor or None,
        )
        return await self.adapter.search(request)

    async def count_matches(self, text: str, predicate: Callable[[UpstreamHit], bool]) -> int:
        """Count hits satisfying ``predicate`` across the bounded cursor walk.

        The walk always starts from the first page and is sequential, since
        each call needs the previous call's cursor. A failed call ends the
        walk; the partial total is returned.
        """
        total = 0
        cursor: str | None = None
        for calls in range(self.count_settings.max_pages):
            request = UpstreamPageRequest(
                query=text,
                limit=self.count_settings.page_size,
                cursor=cursor,
            )
            try:
                page = await self.adapter.search(request)
            except AdapterError as e:
                logger.warning("Count walk stopped after %d calls: %s", calls, e)
                break

            total += sum(1 for hit in page.hits if predicate(hit))

            if not page.next_cursor:
                break
            cursor = page.next_cursor
        return total
