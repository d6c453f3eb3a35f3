"""Structured logging built on structlog over the stdlib logging tree."""
import logging
import sys
from typing import Optional

import structlog

from openai_client.config import get_settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Library modules log through stdlib loggers, so nothing is emitted
    until an application calls this (or configures logging itself).
    Defaults to the LOG_LEVEL setting.
    """
    log_level = log_level or get_settings().log_level
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a bound logger backed by the stdlib logger of the same name."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
