"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from communitysearch.adapters.base.adapter import KnowledgeBaseAdapter
from communitysearch.adapters.base.exceptions import UpstreamError
from communitysearch.config.settings import Settings
from communitysearch.models.upstream import UpstreamPage, UpstreamPageRequest

HELP_BASE = "https://help.acme.io"


def article_hit(title: str | None, ref: str | None, *, nested: bool = True, **extra: Any) -> dict[str, Any]:
    """Build a raw upstream hit the way ``search.core`` returns it."""
    article: dict[str, Any] = {"title": title, **extra}
    if ref is not None:
        article["sync_metadata"] = {"external_reference": ref}
    return {"type": "article", "article": article} if nested else article


class FakeKnowledgeBase(KnowledgeBaseAdapter):
    """In-memory upstream with offset cursors (``"off:<n>"``).

    Records every request; ``fail_on_call`` maps a 0-based call index to an
    HTTP status returned as ``UpstreamError`` for that call.
    """

    def __init__(self, hits: list[dict[str, Any]], fail_on_call: dict[int, int] | None = None) -> None:
        self.hits = hits
        self.fail_on_call = fail_on_call or {}
        self.requests: list[UpstreamPageRequest] = []

    @property
    def name(self) -> str:
        return "fake"

    async def initialize(self) -> None:
        pass

    async def shutdown(self) -> None:
        pass

    async def search(self, request: UpstreamPageRequest) -> UpstreamPage:
        call_index = len(self.requests)
        self.requests.append(request)
        if call_index in self.fail_on_call:
            raise UpstreamError(self.fail_on_call[call_index], '{"message":"boom"}', "application/json")

        offset = int(request.cursor.split(":")[1]) if request.cursor else 0
        end = offset + request.limit
        payload: dict[str, Any] = {"results": self.hits[offset:end]}
        if end < len(self.hits):
            payload["next_cursor"] = f"off:{end}"
        if offset > 0:
            payload["prev_cursor"] = f"off:{max(0, offset - request.limit)}"
        return UpstreamPage.from_payload(payload)


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        help_center={"base_url": HELP_BASE + "/"},
        upstream={"token": "test-token"},
    )


@pytest.fixture
def published_hits() -> list[dict[str, Any]]:
    """Six hits: four published on the help center, two not."""
    return [
        article_hit("Update billing details", f"{HELP_BASE}/articles/billing-details"),
        article_hit("Internal billing runbook", "https://wiki.internal/billing"),
        article_hit("Billing FAQ", f"{HELP_BASE}/articles/billing-faq"),
        article_hit("Draft: billing changes", None),
        article_hit("Invoices", f"{HELP_BASE}/articles/invoices"),
        article_hit("Refunds", f"{HELP_BASE}/articles/refunds"),
    ]


@pytest.fixture
def make_knowledge_base() -> Callable[..., FakeKnowledgeBase]:
    return FakeKnowledgeBase
