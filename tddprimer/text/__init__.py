"""Text utilities."""

from tddprimer.text.joiner import DelimitedJoiner

__all__ = ["DelimitedJoiner"]
