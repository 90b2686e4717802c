"""CORS handling for the community platform widget.

Every response carries the same fixed CORS headers, whether or not the
request sent an ``Origin``; any ``OPTIONS`` request is answered with 204.
Failures that escape the endpoint still get a JSON 500 with those headers.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET,POST,OPTIONS"
ALLOWED_HEADERS = "Content-Type,Authorization,x-adapter-key"
MAX_AGE = "600"


def cors_headers(allowed_origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Max-Age": MAX_AGE,
    }


def install_cors(app: FastAPI, allowed_origin: str) -> None:
    """Register an HTTP middleware that applies ``cors_headers`` to ``app``."""
    headers = cors_headers(allowed_origin)

    @app.middleware("http")
    async def apply_cors(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=headers)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, e, exc_info=True)
            return JSONResponse(status_code=500, content={"error": "Server error"}, headers=headers)
        response.headers.update(headers)
        return response
