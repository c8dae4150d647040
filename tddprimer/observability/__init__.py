"""Observability helpers for tdd-primer.

Components:
    - logging: Structured logging with structlog
"""

from tddprimer.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
]
