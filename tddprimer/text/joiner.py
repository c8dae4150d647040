"""Delimiter joining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tddprimer.config import JoinerConfig


@dataclass(frozen=True)
class DelimitedJoiner:
    """
    Concatenate strings with a fixed delimiter between them.

    The delimiter is placed only between elements: never before the first
    or after the last, so ``n`` items produce exactly ``n - 1`` delimiters.
    Build one joiner per delimiter and reuse it; it holds no other state.

    Example:
        >>> DelimitedJoiner(",").join(["a", "b", "c"])
        'a,b,c'
        >>> DelimitedJoiner(",").join(["A"])
        'A'
        >>> DelimitedJoiner(",").join([])
        ''
    """

    delimiter: str = ","

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str):
            raise TypeError(
                f"delimiter must be a str, got {type(self.delimiter).__name__}"
            )

    @classmethod
    def from_config(cls, config: JoinerConfig) -> "DelimitedJoiner":
        return cls(config.delimiter)

    def join(self, items: Iterable[str]) -> str:
        """Join ``items`` in order, the delimiter only between neighbours."""

        return self.delimiter.join(items)


__all__ = ["DelimitedJoiner"]
