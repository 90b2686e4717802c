"""Base knowledge-base adapter — Abstract interface for upstream search connectors.

An adapter owns the transport to one upstream search API. It is responsible for:
  1. Issuing a single search call for an ``UpstreamPageRequest``
  2. Normalizing the raw payload into an ``UpstreamPage``
  3. Raising ``UpstreamError`` for non-success statuses and ``QueryError`` for
     transport failures, without retrying

Pagination policy (page fetch vs. count walk) lives in
``communitysearch.core.upstream``, not in the adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from communitysearch.models.upstream import UpstreamPage, UpstreamPageRequest


class KnowledgeBaseAdapter(ABC):
    """Abstract base class for knowledge-base search adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'devrev')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections. Called once during application startup."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connections. Called during application shutdown."""

    @abstractmethod
    async def search(self, request: UpstreamPageRequest) -> UpstreamPage:
        """Execute one search call against the upstream API.

        Args:
            request: The upstream request body.

        Returns:
            The normalized page of hits and cursors.

        Raises:
            UpstreamError: The upstream answered with a non-success status.
            QueryError: The call failed in transport or returned an unreadable body.
        """
