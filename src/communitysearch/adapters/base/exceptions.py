"""Adapter-specific exceptions."""

from __future__ import annotations


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter is used before it is connected."""


class QueryError(AdapterError):
    """Raised when a search call fails in transport or returns an unreadable body."""


class UpstreamError(AdapterError):
    """Raised when the upstream API answers with a non-success status.

    Carries the upstream response so it can be relayed to the caller verbatim.
    """

    def __init__(self, status_code: int, body: str, content_type: str | None = None) -> None:
        super().__init__(f"Upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
