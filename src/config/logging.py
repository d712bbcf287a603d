"""
structlog setup driven by application settings.
"""

import logging
import sys

import structlog

from src.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog processors and level filtering.

    Logs go to stderr: JSON for log_format="json", console output otherwise.
    Unknown level names fall back to INFO.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    renderer: structlog.types.Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
