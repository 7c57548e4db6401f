"""
Structured logging setup.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable, Optional

import structlog


def configure_logging(log_format: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        log_format: "console" (default) or "json"; falls back to LOG_FORMAT
        level: Log level name; falls back to LOG_LEVEL, then INFO
    """
    log_format = (log_format or os.getenv("LOG_FORMAT", "console")).lower()
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
