"""
Structured logging setup for strutils.

The library only emits events (decode fallbacks, rejected input); it never
configures logging on import. Applications call ``configure_logging`` once.
"""

import logging
from typing import Optional

import structlog

from strutils.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog with the stdlib processor chain.

    Args:
        settings: Settings to read ``log_level`` and ``log_json`` from.
                  Defaults to the global settings instance.

    Example:
        >>> from strutils.log_config import configure_logging
        >>> configure_logging()
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("strutils").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
