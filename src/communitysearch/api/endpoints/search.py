"""Search endpoint — Community search backed by the upstream knowledge base.

Response modes:

- **200** — ``{"results": PageEnvelope}``.
- **401** — ``{"error": "Unauthorized"}`` when the shared secret does not match.
  No upstream call is made.
- **Upstream status** — a failed page fetch is relayed with the upstream status
  code and body.
- **500** — ``{"error": "Server error"}`` for anything unexpected. With
  ``debug=true`` in settings, ``?debug=1`` adds the message and traceback.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from communitysearch.adapters.base.exceptions import UpstreamError
from communitysearch.api.deps import get_engine
from communitysearch.core.engine import CommunitySearchEngine
from communitysearch.models.response import ErrorResponse, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route(
    "/search",
    methods=["GET", "POST"],
    response_model=SearchResponse,
    summary="Community Search",
    description=(
        "Search published help center articles.\n\n"
        "**Query parameters:** `q` (or `query`), `perPage` (default 10, max 50), "
        "`page` (default 1), `cursor` (opaque, from a previous `next`/`previous` URL), "
        "`adapter_key` (alternative to the `x-adapter-key` header).\n\n"
        "`count` is approximate: it counts published matches over a bounded walk "
        "of the upstream result set."
    ),
    responses={
        200: {"description": "One page of published articles"},
        401: {"model": ErrorResponse, "description": "Shared secret missing or wrong"},
        500: {"model": ErrorResponse, "description": "Unexpected internal failure"},
    },
)
async def search(
    request: Request,
    engine: CommunitySearchEngine = Depends(get_engine),
) -> SearchResponse | Response:
    """Normalize the request, run the search pipeline and shape the response."""
    params = request.query_params
    headers = request.headers
    normalizer = engine.normalizer
    context = normalizer.build_context(params, headers)

    try:
        if not normalizer.authorize(params, headers):
            logger.warning("Rejected search request with missing or invalid adapter key")
            return JSONResponse(status_code=401, content={"error": "Unauthorized"})

        query = normalizer.normalize_query(params)
        envelope = await engine.search(query, context)
    except UpstreamError as e:
        logger.warning("Upstream page fetch failed with HTTP %d", e.status_code)
        if context.debug:
            return JSONResponse(
                status_code=e.status_code,
                content={"error": "Upstream error", "status": e.status_code, "body": e.body},
            )
        return Response(
            content=e.body,
            status_code=e.status_code,
            media_type=e.content_type or "text/plain",
        )
    except Exception as e:
        logger.error("Search failed: %s", e, exc_info=True)
        if context.debug:
            return JSONResponse(
                status_code=500,
                content={"error": str(e) or "Server error", "stack": traceback.format_exc()},
            )
        return JSONResponse(status_code=500, content={"error": "Server error"})

    return SearchResponse(results=envelope)
