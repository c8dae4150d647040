"""Structured logging for tdd-primer.

Thin structlog setup on top of the standard library ``logging`` module:
- ``json`` output for machines, ``console`` output for people
- optional rotating log file
- request-style context (e.g. a lesson or kata id) bound via contextvars

Usage:
    from tddprimer.observability import configure_logging, get_logger

    configure_logging(level="DEBUG", format="console")

    logger = get_logger(__name__)
    logger.info("shape_created", kind="circle", dimension=2.0)
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import Processor

VALID_FORMATS = ("json", "console")


def configure_logging(
    level: str = "INFO",
    format: str = "console",
    log_file: Optional[Path] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
) -> None:
    """Configure structlog and the stdlib root logger.

    Calling it again replaces the previous handlers, so tests and scripts
    can reconfigure freely.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console")
        log_file: Optional path for file logging with rotation
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of rotated files to keep

    Raises:
        ValueError: If ``format`` is not one of VALID_FORMATS

    Example:
        >>> configure_logging(level="DEBUG", format="json")
    """
    if format not in VALID_FORMATS:
        raise ValueError(f"Unknown log format: {format!r}")

    logging_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                filename=str(log_file),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging_level)
    for handler in handlers:
        handler.setLevel(logging_level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("strings_joined", count=3)
    """
    return structlog.get_logger(name)


def bind_context(**values: Any) -> None:
    """Attach key/value pairs to every log entry in the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "VALID_FORMATS",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
