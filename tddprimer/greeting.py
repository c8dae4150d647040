"""
Greeting printer with an injectable output sink.

``GreetingPrinter`` never writes to a hard-coded stream: the writer is
passed in, so a test can hand it an ``io.StringIO`` or a fake and inspect
what was written.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, Protocol

from tddprimer.text.joiner import DelimitedJoiner


class TextWriter(Protocol):
    """Anything with a file-like ``write`` method."""

    def write(self, text: str) -> Any:  # pragma: no cover - interface
        ...


class GreetingPrinter:
    """
    Write greetings to an injected writer.

    Args:
        writer: Output sink; ``sys.stdout`` at call time when omitted
        joiner: Joiner used by ``greet_all``; defaults to ", "

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> GreetingPrinter(buffer).greet("Ada")
        'Hello, Ada!'
        >>> buffer.getvalue()
        'Hello, Ada!\\n'
    """

    DEFAULT_NAME = "World"

    def __init__(
        self,
        writer: Optional[TextWriter] = None,
        joiner: Optional[DelimitedJoiner] = None,
    ):
        self._writer = writer
        self._joiner = joiner or DelimitedJoiner(", ")

    @property
    def writer(self) -> TextWriter:
        # Resolved lazily so pytest's capsys sees the default stream
        return self._writer if self._writer is not None else sys.stdout

    def greet(self, name: str = DEFAULT_NAME) -> str:
        message = f"Hello, {name}!"
        self.writer.write(message + "\n")
        return message

    def greet_all(self, names: Iterable[str]) -> str:
        """Greet several names at once; an empty sequence greets the world."""

        names = list(names)
        if not names:
            return self.greet()
        return self.greet(self._joiner.join(names))


__all__ = ["TextWriter", "GreetingPrinter"]
