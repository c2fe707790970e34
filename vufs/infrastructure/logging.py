"""Structured logging setup.

The engine logs through ``structlog.get_logger()``; host services call
``configure_logging`` once at startup to route those events through the
standard library handlers.
"""

import logging
import sys

import structlog

from vufs.infrastructure.config import EngineSettings, get_settings


def configure_logging(settings: EngineSettings | None = None) -> None:
    """Configure stdlib logging and the structlog processor chain.

    Args:
        settings: Settings to read the level and renderer from. Loaded
            from the environment when omitted.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(message)s",
        stream=sys.stderr,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
