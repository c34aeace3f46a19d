"""
Structured logging configuration.

Uses structlog for machine-readable, context-rich logging.
Development gets a colored console renderer; staging and production
emit one JSON object per line.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from core.config import settings


def _log_level() -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def configure_logging() -> None:
    """
    Configure structlog with appropriate processors based on environment.

    Safe to call more than once; the last call wins.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.is_development:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # uvicorn and fastapi log through the standard library
    logging.basicConfig(
        format="%(message)s",
        level=_log_level(),
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        **initial_context: Initial context values to bind

    Usage:
        logger = get_logger(__name__, backend="memory")
        logger.info("Article created", article_id=7, slug="aluguel")
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
