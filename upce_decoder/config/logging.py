"""
structlog configuration driven by the decoder settings.
"""

import logging
import sys

import structlog

from upce_decoder.config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog for the process.

    Args:
        settings: Settings to read ``log_level`` and ``log_format`` from
            (default: cached settings)
    """
    settings = settings or get_settings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
