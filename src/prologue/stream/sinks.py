# topmark:header:start
#
#   project      : Prologue
#   file         : sinks.py
#   file_relpath : src/prologue/stream/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write targets for streams.

A stream only needs ``write_line(text)`` from its sink. ``text`` may contain
embedded newlines (a whole rendered diagnostic); the sink terminates it with
one more newline. Sinks report failures by raising `OSError`.

Provided sinks:
    * `ConsoleSink`: writes through `click.echo`, to stderr by default.
    * `BufferSink`: collects lines in memory (tests, deferred output).
    * `CallbackSink`: forwards to any ``fn(text)``, e.g. a progress library's
      "print above the bar" function.
"""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, Protocol, TextIO

import click

if TYPE_CHECKING:
    from collections.abc import Callable


class LineSink(Protocol):
    """Minimal interface of a stream's output target."""

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a newline.

        Raises:
            OSError: If the underlying target cannot be written.
        """
        ...


class ConsoleSink:
    """Sink writing to a text stream via Click.

    Attributes:
        enable_color: Whether ANSI codes are passed through; Click strips them otherwise.
        file: Target stream; ``sys.stderr`` at write time when None.
    """

    def __init__(self, *, enable_color: bool | None = None, file: TextIO | None = None) -> None:
        self.enable_color = enable_color
        self.file = file

    def write_line(self, text: str) -> None:
        click.echo(text, file=self.file or sys.stderr, color=self.enable_color)


class BufferSink:
    """Sink that keeps written lines in memory."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def write_line(self, text: str) -> None:
        with self._lock:
            self._lines.append(text)

    @property
    def lines(self) -> list[str]:
        """Return a copy of the written lines, in write order."""
        with self._lock:
            return list(self._lines)

    def getvalue(self) -> str:
        """Return everything written, newline-terminated as a terminal would show it."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        """Forget everything written so far."""
        with self._lock:
            self._lines.clear()


class CallbackSink:
    """Sink forwarding each line to a callable."""

    def __init__(self, callback: Callable[[str], object]) -> None:
        self.callback = callback

    def write_line(self, text: str) -> None:
        self.callback(text)
