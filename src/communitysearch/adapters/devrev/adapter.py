"""DevRev adapter — Article search via the DevRev ``search.core`` API.

API reference:
  POST /search.core
    {"query": "...", "namespaces": ["article"], "limit": 10,
     "cursor": "...", "mode": "after"}
  -> {"results": [{"article": {...}}, ...], "next_cursor": "...", "prev_cursor": "..."}

The API exposes no total hit count; callers paginate with the returned cursors.
"""

from __future__ import annotations

import logging
import time

import httpx

from communitysearch.adapters.base.adapter import KnowledgeBaseAdapter
from communitysearch.adapters.base.exceptions import ConnectionError, QueryError, UpstreamError
from communitysearch.models.upstream import UpstreamPage, UpstreamPageRequest

logger = logging.getLogger(__name__)


class DevRevAdapter(KnowledgeBaseAdapter):
    """Search adapter for the DevRev knowledge base.

    Args:
        base_url: DevRev API base URL.
        search_path: Path of the search endpoint.
        token: Bearer token for authentication.
        timeout: HTTP request timeout in seconds.
        client: Pre-built ``httpx.AsyncClient`` (tests); created on ``initialize()`` otherwise.
    """

    def __init__(
        self,
        base_url: str = "https://api.devrev.ai",
        search_path: str = "/search.core",
        token: str = "",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._search_path = search_path
        self._token = token
        self._timeout = timeout
        self._client = client

    @property
    def name(self) -> str:
        return "devrev"

    async def initialize(self) -> None:
        """Create the ``httpx.AsyncClient`` used for all upstream calls."""
        if self._client is not None:
            return
        if not self._token:
            logger.warning("DevRev token is empty; upstream calls will likely be rejected")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            headers={
                "Authorization": f"Bearer {self._token}",
                "Content-Type": "application/json",
            },
        )
        logger.info("DevRev adapter ready (base_url=%s)", self._base_url)

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def search(self, request: UpstreamPageRequest) -> UpstreamPage:
        if not self._client:
            raise ConnectionError("DevRev client not initialized. Call initialize() first.")

        payload = request.to_payload()
        start = time.monotonic()
        try:
            resp = await self._client.post(self._search_path, json=payload)
        except httpx.HTTPError as e:
            raise QueryError(f"DevRev search failed: {e}") from e
        took_ms = int((time.monotonic() - start) * 1000)

        logger.debug(
            "DevRev search limit=%d cursor=%s -> HTTP %d in %dms",
            request.limit,
            "yes" if request.cursor else "no",
            resp.status_code,
            took_ms,
        )

        if not resp.is_success:
            raise UpstreamError(
                status_code=resp.status_code,
                body=resp.text,
                content_type=resp.headers.get("content-type"),
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise QueryError(f"DevRev returned an unreadable body: {e}") from e

        return UpstreamPage.from_payload(data)
