"""CLI entry point for the community search adapter server."""

from __future__ import annotations

import argparse
import os

ENV_PREFIX = "COMMUNITY_SEARCH_"


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="community-search",
        description="Community Search Adapter — knowledge-base search for community platforms",
    )
    parser.add_argument("--host", type=str, default=None, help="Server bind address (overrides config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Server port (overrides config)")
    parser.add_argument("--workers", "-w", type=int, default=None, help="Number of worker processes")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument("--version", action="version", version=f"community-search {_get_version()}")

    args = parser.parse_args()

    # The app factory builds its own Settings in every worker, so overrides
    # travel through the environment.
    overrides = {
        "SERVER__HOST": args.host,
        "SERVER__PORT": args.port,
        "SERVER__WORKERS": args.workers,
        "OBSERVABILITY__LOG_LEVEL": args.log_level,
    }
    for key, value in overrides.items():
        if value:
            os.environ[f"{ENV_PREFIX}{key}"] = str(value)

    from communitysearch.config.settings import Settings

    settings = Settings()

    import uvicorn

    uvicorn.run(
        "communitysearch.api.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        workers=settings.server.workers if not args.reload else 1,
        reload=args.reload,
        log_level=settings.observability.log_level.lower(),
    )


def _get_version() -> str:
    from communitysearch import __version__

    return __version__


if __name__ == "__main__":
    main()
