"""Logging configuration for keyhash."""

from __future__ import annotations

import logging

import structlog

from .core.config import load_config


def configure_logging(level: str | int | None = None) -> None:
    """Configure stdlib logging and the structlog JSON pipeline.

    ``level`` defaults to ``KEYHASH_LOG_LEVEL`` when omitted.
    """
    if level is None:
        level = load_config().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
