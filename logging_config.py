"""
logging_config.py
=================
structlog setup for the API process. Call ``setup_logging`` once at startup;
modules obtain loggers with ``structlog.get_logger(__name__)``.
"""

import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure structlog: ISO timestamps, level, console or JSON output."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer = (structlog.processors.JSONRenderer() if json
                else structlog.dev.ConsoleRenderer())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
