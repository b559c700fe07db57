"""Structured logging setup.

The library only emits events through ``structlog.get_logger()``; hosts call
``configure_logging()`` once at startup if they want the default pipeline.
"""

import logging
from typing import Optional

import structlog

from input_validation.config import get_settings


def configure_logging(level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """Install the structlog processor chain.

    Args:
        level: Log level name ("debug", "info", ...). Defaults to settings.LOG_LEVEL.
        debug: Use the console renderer instead of JSON. Defaults to settings.DEBUG.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    use_console = settings.DEBUG if debug is None else debug

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if use_console else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
    )
