# topmark:header:start
#
#   project      : Prologue
#   file         : stream.py
#   file_relpath : src/prologue/stream/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named, counted output streams.

A `Stream` renders what it is given, counts warnings and errors, and writes
the text to its sink. One stream object may be shared by any number of
threads: the counter update and the sink write happen under the stream's lock,
so a later `if_warnings` / `if_errors` sees every submission that completed
before it. The order in which concurrent submissions reach the sink is not
specified.

Counters only grow. If the sink fails, the counters keep the update and the
failure surfaces as [`SinkIOError`][prologue.core.errors.SinkIOError].
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol, TypeVar

from prologue.config.logging import get_logger
from prologue.core.severity import Severity
from prologue.core.errors import SinkIOError
from prologue.rendering.styles import NO_STYLER
from prologue.stream.sinks import ConsoleSink

if TYPE_CHECKING:
    from collections.abc import Callable

    from prologue.config.logging import PrologueLogger
    from prologue.diagnostic.entry import Entry, Task
    from prologue.diagnostic.group import EntryGroup
    from prologue.rendering.styles import Styler
    from prologue.stream.sinks import LineSink

logger: PrologueLogger = get_logger(__name__)

_T = TypeVar("_T")


class Submittable(Protocol):
    """Something a stream can render and count."""

    @property
    def counted_severity(self) -> Severity | None:
        """Severity used for the stream counters; None for uncounted output."""
        ...

    def render(self, *, styler: Styler) -> str:
        """Render the item for the stream."""
        ...


class Stream:
    """A named output destination that counts warnings and errors.

    Attributes:
        name: Stream name; the empty string conventionally names the global stream.
        sink: Output target.
        styler: Styling backend used to render submissions.
    """

    def __init__(
        self,
        name: str = "",
        *,
        sink: LineSink | None = None,
        styler: Styler = NO_STYLER,
    ) -> None:
        self.name = name
        self.sink: LineSink = sink if sink is not None else ConsoleSink()
        self.styler = styler
        self._warnings = 0
        self._errors = 0
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"Stream(name={self.name!r}, warnings={self.warning_count}, errors={self.error_count})"
        )

    @property
    def warning_count(self) -> int:
        """Return the number of warnings submitted so far."""
        with self._lock:
            return self._warnings

    @property
    def error_count(self) -> int:
        """Return the number of errors submitted so far."""
        with self._lock:
            return self._errors

    def submit(self, item: Submittable) -> None:
        """Render, count and write any submittable item.

        Raises:
            SinkIOError: If the sink write fails (the count is kept).
        """
        severity = item.counted_severity
        text = item.render(styler=self.styler)
        self._emit(
            text,
            errors=severity is Severity.ERROR,
            warnings=severity is Severity.WARNING,
        )

    def submit_entry(self, entry: Entry) -> None:
        """Count and write a single entry.

        Raises:
            SinkIOError: If the sink write fails (the count is kept).
        """
        self.submit(entry)

    def submit_group(self, group: EntryGroup) -> None:
        """Count a group once, by its worst member, and write it in one piece.

        Raises:
            SinkIOError: If the sink write fails (the count is kept).
        """
        self.submit(group)

    def submit_task(self, task: Task) -> None:
        """Write a status line; counters are not affected.

        Raises:
            SinkIOError: If the sink write fails.
        """
        self.submit(task)

    def submit_record(self, level: int, message: str) -> None:
        """Count and write a plain message by stdlib logging level.

        ``ERROR`` and above count as errors, ``WARNING`` as warnings.

        Raises:
            SinkIOError: If the sink write fails (the count is kept).
        """
        self._emit(
            message,
            errors=level >= logging.ERROR,
            warnings=logging.WARNING <= level < logging.ERROR,
        )

    def if_warnings(self, callback: Callable[[int], _T]) -> _T | None:
        """Call ``callback(count)`` if any warning was submitted; return its result."""
        count = self.warning_count
        if count > 0:
            return callback(count)
        return None

    def if_errors(self, callback: Callable[[int], _T]) -> _T | None:
        """Call ``callback(count)`` if any error was submitted; return its result."""
        count = self.error_count
        if count > 0:
            return callback(count)
        return None

    def _emit(self, text: str, *, errors: bool, warnings: bool) -> None:
        with self._lock:
            if errors:
                self._errors += 1
            elif warnings:
                self._warnings += 1
            logger.trace(
                "Stream %r: errors=%d warnings=%d", self.name, self._errors, self._warnings
            )
            try:
                self.sink.write_line(text.removesuffix("\n"))
            except OSError as exc:
                logger.debug("Sink write failed on stream %r: %s", self.name, exc)
                raise SinkIOError(self.name, exc) from exc
