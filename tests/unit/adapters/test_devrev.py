"""Tests for the DevRev adapter."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from communitysearch.adapters.base.exceptions import ConnectionError, QueryError, UpstreamError
from communitysearch.adapters.devrev.adapter import DevRevAdapter
from communitysearch.models.upstream import UpstreamPageRequest

# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture
def adapter() -> DevRevAdapter:
    return DevRevAdapter(base_url="https://api.devrev.test/", token="test-token")


@pytest.fixture
def sample_devrev_response() -> dict[str, Any]:
    """Sample search.core response."""
    return {
        "results": [
            {
                "type": "article",
                "article": {
                    "id": "don:core:dvrv-us-1:devo/1:article/42",
                    "title": "Update billing details",
                    "sync_metadata": {"external_reference": "https://help.acme.io/articles/billing"},
                },
            },
            {"type": "article", "article": {"display_name": "Internal runbook"}},
        ],
        "next_cursor": "eyJuZXh0IjoyfQ==",
    }


def _mock_client(response: httpx.Response) -> AsyncMock:
    client = AsyncMock(spec=httpx.AsyncClient)
    client.post.return_value = response
    return client


# ── Properties ───────────────────────────────────────────────────────────────


class TestDevRevProperties:
    def test_name(self, adapter: DevRevAdapter) -> None:
        assert adapter.name == "devrev"

    def test_base_url_trailing_slash_stripped(self, adapter: DevRevAdapter) -> None:
        assert adapter._base_url == "https://api.devrev.test"

    async def test_initialize_sets_auth_header(self, adapter: DevRevAdapter) -> None:
        await adapter.initialize()
        try:
            assert adapter._client is not None
            assert adapter._client.headers["Authorization"] == "Bearer test-token"
        finally:
            await adapter.shutdown()
        assert adapter._client is None


# ── Search ───────────────────────────────────────────────────────────────────


class TestDevRevSearch:
    async def test_search_not_initialized_raises(self, adapter: DevRevAdapter) -> None:
        with pytest.raises(ConnectionError, match="not initialized"):
            await adapter.search(UpstreamPageRequest(query="billing", limit=10))

    async def test_search_returns_page(self, adapter: DevRevAdapter, sample_devrev_response: dict) -> None:
        adapter._client = _mock_client(httpx.Response(200, json=sample_devrev_response))

        page = await adapter.search(UpstreamPageRequest(query="billing", limit=10))

        assert len(page.hits) == 2
        assert page.hits[0].title == "Update billing details"
        assert page.hits[0].external_reference == "https://help.acme.io/articles/billing"
        assert page.hits[1].display_name == "Internal runbook"
        assert page.hits[1].external_reference is None
        assert page.next_cursor == "eyJuZXh0IjoyfQ=="
        assert page.prev_cursor is None

    async def test_search_posts_payload(self, adapter: DevRevAdapter) -> None:
        client = _mock_client(httpx.Response(200, json={"results": []}))
        adapter._client = client

        await adapter.search(UpstreamPageRequest(query="billing", limit=5, cursor="abc"))

        client.post.assert_awaited_once_with(
            "/search.core",
            json={"query": "billing", "namespaces": ["article"], "limit": 5, "mode": "after", "cursor": "abc"},
        )

    async def test_non_success_raises_upstream_error(self, adapter: DevRevAdapter) -> None:
        adapter._client = _mock_client(
            httpx.Response(401, text='{"message":"invalid token"}', headers={"content-type": "application/json"})
        )

        with pytest.raises(UpstreamError) as exc_info:
            await adapter.search(UpstreamPageRequest(query="billing", limit=10))

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == '{"message":"invalid token"}'
        assert exc_info.value.content_type == "application/json"

    async def test_transport_error_raises_query_error(self, adapter: DevRevAdapter) -> None:
        client = AsyncMock(spec=httpx.AsyncClient)
        client.post.side_effect = httpx.ConnectError("connection refused")
        adapter._client = client

        with pytest.raises(QueryError, match="DevRev search failed"):
            await adapter.search(UpstreamPageRequest(query="billing", limit=10))

    async def test_unreadable_body_raises_query_error(self, adapter: DevRevAdapter) -> None:
        adapter._client = _mock_client(httpx.Response(200, text="<html>gateway</html>"))

        with pytest.raises(QueryError, match="unreadable body"):
            await adapter.search(UpstreamPageRequest(query="billing", limit=10))
