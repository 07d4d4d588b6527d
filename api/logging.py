"""Structured logging configuration.

The API logs to stdout. The evaluation script passes stderr so that its
stdout carries only the JSON result.
"""

import logging
import sys
from typing import Any, TextIO

import structlog

from api.config import Settings, get_settings


def _processors(settings: Settings) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.json_logs:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(
                colors=not settings.is_test,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]
    return processors


def setup_logging(settings: Settings | None = None, stream: TextIO | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        settings: Settings to read level and format from; cached settings when None
        stream: Output stream; stdout when None
    """
    settings = settings or get_settings()
    stream = stream or sys.stdout
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(stream),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=stream, level=log_level)

    # Request lines come from LoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
