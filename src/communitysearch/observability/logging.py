"""Structured logging configuration using structlog.

Modules log through ``logging.getLogger(__name__)``. ``setup_logging`` installs
one root handler whose ``structlog.stdlib.ProcessorFormatter`` runs those
stdlib records through the structlog processor chain, so they come out as JSON
(or console) lines with timestamp, level and logger name.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from communitysearch.config.settings import ObservabilitySettings

HANDLER_NAME = "communitysearch"


def setup_logging(settings: ObservabilitySettings | None = None, stream: IO[str] | None = None) -> None:
    """Configure structured logging for the adapter service.

    Safe to call more than once; the previously installed handler is replaced.

    Args:
        settings: Observability settings. Uses defaults if None.
        stream: Output stream for log lines. Defaults to stdout.
    """
    log_level = settings.log_level.upper() if settings else "INFO"
    log_format = settings.log_format if settings else "json"

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "console":
        render_chain: list = [structlog.dev.ConsoleRenderer()]
    else:
        render_chain = [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render_chain],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level, logging.INFO))
