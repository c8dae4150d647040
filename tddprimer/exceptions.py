"""
tdd-primer - Custom Exceptions

Defines the exception hierarchy shared by the shape factories, the factory
registry and the configuration loader. Every error raised on purpose by the
package derives from ``TDDPrimerError`` so callers can catch the whole family
at once, while the concrete classes also inherit from the matching builtin
(``ValueError``, ``LookupError``) for callers that only know the stdlib types.
"""

from __future__ import annotations

from typing import Any


class TDDPrimerError(Exception):
    """Base exception for all tdd-primer errors."""


class InvalidArgumentError(TDDPrimerError, ValueError):
    """
    Raised when a caller-supplied value violates a precondition.

    The shape factories raise it for negative or non-finite dimensions.

    Attributes:
        argument: Name of the offending parameter
        value: The rejected value

    Example:
        >>> raise InvalidArgumentError("diameter", -1.0)
        Traceback (most recent call last):
        ...
        tddprimer.exceptions.InvalidArgumentError: diameter must be a finite, non-negative number (got -1.0)
    """

    def __init__(self, argument: str, value: Any, reason: str | None = None):
        self.argument = argument
        self.value = value
        message = reason or f"{argument} must be a finite, non-negative number"
        super().__init__(f"{message} (got {value!r})")


class UnknownShapeKindError(TDDPrimerError, LookupError):
    """Raised when no factory is registered for the requested shape kind."""

    def __init__(self, kind: Any, available: list[str] | None = None):
        self.kind = kind
        self.available = list(available or [])
        message = f"Unknown shape kind: {kind!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ConfigError(TDDPrimerError):
    """Raised when configuration cannot be loaded or validated."""


__all__ = [
    "TDDPrimerError",
    "InvalidArgumentError",
    "UnknownShapeKindError",
    "ConfigError",
]
