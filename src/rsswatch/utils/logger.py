"""Logging configuration using structlog.

The library only emits events through ``structlog.get_logger()``; the
host application decides how they are rendered by calling
:func:`configure_logging` once at startup.
"""

import logging
import sys

import structlog

from rsswatch.config.settings import settings


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure structured logging.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``settings.log_level`` (``RSSWATCH_LOG_LEVEL``).
        json_format: If True, output JSON lines instead of colored console.
            Defaults to ``settings.log_json`` (``RSSWATCH_LOG_JSON``).
    """
    if log_level is None:
        log_level = settings.log_level
    if json_format is None:
        json_format = settings.log_json

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return the rsswatch event logger.

    ``name`` identifies the emitting component (``"poller"``, a source id)
    and is bound as the ``logger`` key on every event.
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger
