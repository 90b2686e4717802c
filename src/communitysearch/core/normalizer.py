"""Query normalizer — Turns raw request parameters into a canonical query.

Every input is defaulted: malformed numbers fall back to their defaults and
nothing here raises.
"""

from __future__ import annotations

import math
import secrets
from collections.abc import Mapping

from communitysearch.config.settings import Settings
from communitysearch.models.query import DEFAULT_PER_PAGE, MAX_PER_PAGE, QueryDescriptor, RequestContext

ADAPTER_KEY_HEADER = "x-adapter-key"
ADAPTER_KEY_PARAM = "adapter_key"


def _parse_int(value: str | None, default: int) -> int:
    """Parse an integer query parameter, truncating decimals; ``default`` on failure."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return int(number) if math.isfinite(number) else default


def _first_entry(value: str | None) -> str:
    """First element of a comma-separated proxy header."""
    return (value or "").split(",")[0].strip()


class QueryNormalizer:
    """Builds ``QueryDescriptor`` and ``RequestContext`` from an inbound request.

    Args:
        settings: Application settings (help center URL, secret, fallbacks).
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def normalize_query(self, params: Mapping[str, str]) -> QueryDescriptor:
        text = params.get("q")
        if text is None:
            text = params.get("query", "")

        per_page = _parse_int(params.get("perPage"), DEFAULT_PER_PAGE)
        per_page = max(1, min(per_page, MAX_PER_PAGE))
        page = max(1, _parse_int(params.get("page"), 1))

        return QueryDescriptor(
            text=text,
            per_page=per_page,
            page=page,
            cursor=params.get("cursor", ""),
        )

    def build_context(self, params: Mapping[str, str], headers: Mapping[str, str]) -> RequestContext:
        return RequestContext(
            help_base=self.settings.help_center.base_url,
            adapter_base=self.adapter_base(headers),
            adapter_key=self.settings.auth.adapter_key,
            debug=self.settings.debug and params.get("debug") == "1",
        )

    def adapter_base(self, headers: Mapping[str, str]) -> str | None:
        """Absolute base URL of this adapter as seen by the caller.

        Prefers the proxy forwarding headers, then ``Host``, then the
        configured ``server.public_base_url``.
        """
        headers = {k.lower(): v for k, v in headers.items()}
        host = _first_entry(headers.get("x-forwarded-host")) or _first_entry(headers.get("host"))
        if host:
            proto = _first_entry(headers.get("x-forwarded-proto")) or "https"
            return f"{proto}://{host}"
        fallback = self.settings.server.public_base_url
        return fallback.rstrip("/") if fallback else None

    def authorize(self, params: Mapping[str, str], headers: Mapping[str, str]) -> bool:
        """Check the shared secret from the header or query parameter.

        Always succeeds when no secret is configured.
        """
        expected = self.settings.auth.adapter_key
        if not expected:
            return True
        headers = {k.lower(): v for k, v in headers.items()}
        candidates = (headers.get(ADAPTER_KEY_HEADER), params.get(ADAPTER_KEY_PARAM))
        return any(
            candidate is not None and secrets.compare_digest(candidate.encode(), expected.encode())
            for candidate in candidates
        )
