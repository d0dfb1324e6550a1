"""Output sink for rendered tables.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal`` that
writes to ``sys.stdout`` and reports its column count.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

DEFAULT_WIDTH = 120


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for line-oriented table output."""

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by a text stream, ``sys.stdout`` by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self.stream.fileno()).columns
        except (ValueError, OSError, AttributeError):
            return DEFAULT_WIDTH

    def write(self, data: str) -> None:
        self.stream.write(data)
        self.stream.flush()
