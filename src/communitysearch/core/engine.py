"""Community search engine — Orchestrates one search request end to end.

Pipeline (no state is kept between requests):
  QueryDescriptor → [UpstreamSearchClient.fetch_page]    → UpstreamPage
                  → [UpstreamSearchClient.count_matches] → approximate count
                  → [ResultProjector]                    → PageEnvelope
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from communitysearch.adapters.base.adapter import KnowledgeBaseAdapter
from communitysearch.adapters.devrev.adapter import DevRevAdapter
from communitysearch.core.normalizer import QueryNormalizer
from communitysearch.core.projector import ResultProjector
from communitysearch.core.upstream import UpstreamSearchClient
from communitysearch.models.query import QueryDescriptor, RequestContext
from communitysearch.models.response import PageEnvelope

if TYPE_CHECKING:
    from communitysearch.config.settings import Settings

logger = logging.getLogger(__name__)


class CommunitySearchEngine:
    """Core orchestrator of the adapter.

    Attributes:
        settings: Application configuration.
        normalizer: Request parameter normalizer.
        adapter: Transport to the upstream knowledge base.
        upstream: Page fetch and count walk client.
    """

    def __init__(self, settings: Settings, adapter: KnowledgeBaseAdapter | None = None) -> None:
        self.settings = settings
        self.normalizer = QueryNormalizer(settings)
        self.adapter = adapter or DevRevAdapter(
            base_url=settings.upstream.base_url,
            search_path=settings.upstream.search_path,
            token=settings.upstream.token,
            timeout=settings.upstream.timeout,
        )
        self.upstream = UpstreamSearchClient(self.adapter, settings.count)

    async def initialize(self) -> None:
        await self.adapter.initialize()
        logger.info("Search engine initialized with adapter '%s'", self.adapter.name)

    async def shutdown(self) -> None:
        await self.adapter.shutdown()
        logger.info("Search engine shut down")

    async def search(self, query: QueryDescriptor, context: RequestContext) -> PageEnvelope:
        """Run the page fetch, the count walk and the projection.

        Raises:
            UpstreamError: The page fetch failed; count-walk failures never raise.
        """
        projector = ResultProjector(context, self.settings.server.search_path)

        page = await self.upstream.fetch_page(query)
        count = await self.upstream.count_matches(query.text, projector.is_visible)
        envelope = projector.build_envelope(query, page, count)

        logger.info(
            "Search q=%r page=%d per_page=%d -> %d results, count=%d",
            query.text,
            query.page,
            query.per_page,
            len(envelope.results),
            envelope.count,
        )
        return envelope
