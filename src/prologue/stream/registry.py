# topmark:header:start
#
#   project      : Prologue
#   file         : registry.py
#   file_relpath : src/prologue/stream/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Name-keyed registry of streams.

Names are unique: creating or adding a stream whose name is already present
raises [`StreamAlreadyExistsError`][prologue.core.errors.StreamAlreadyExistsError]
instead of replacing the existing stream. The registry hands out the stream
objects themselves, so counts observed through `find()` are always the live
counts.

Notes:
    Thread safe via RLock. Registries are plain objects; the process-wide
    default lives in [`prologue.stream.logging_bridge`][prologue.stream.logging_bridge].
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from prologue.config.logging import get_logger
from prologue.core.errors import StreamAlreadyExistsError
from prologue.rendering.styles import NO_STYLER
from prologue.stream.stream import Stream

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prologue.config.logging import PrologueLogger
    from prologue.rendering.styles import Styler
    from prologue.stream.sinks import LineSink

logger: PrologueLogger = get_logger(__name__)


class StreamRegistry:
    """A set of uniquely named streams sharing default sink and styler settings.

    Attributes:
        sink: Sink given to streams created by `create()`; each stream gets a
            console sink when None.
        styler: Styler given to streams created by `create()`.
    """

    def __init__(self, *, sink: LineSink | None = None, styler: Styler = NO_STYLER) -> None:
        self.sink = sink
        self.styler = styler
        self._streams: dict[str, Stream] = {}
        self._lock = RLock()

    def create(self, name: str) -> Stream:
        """Create, register and return a stream named ``name``.

        Raises:
            StreamAlreadyExistsError: If ``name`` is already registered.
        """
        stream = Stream(name, sink=self.sink, styler=self.styler)
        self.add(stream)
        return stream

    def add(self, stream: Stream) -> None:
        """Register an existing stream.

        Raises:
            StreamAlreadyExistsError: If a stream with the same name is registered.
        """
        with self._lock:
            if stream.name in self._streams:
                raise StreamAlreadyExistsError(stream.name)
            self._streams[stream.name] = stream
        logger.debug("Registered stream %r", stream.name)

    def get_or_create(self, name: str) -> Stream:
        """Return the stream named ``name``, creating it if it is not registered."""
        with self._lock:
            stream = self._streams.get(name)
            if stream is None:
                stream = self.create(name)
            return stream

    def find(self, name: str) -> Stream | None:
        """Return the stream named ``name``, or None."""
        with self._lock:
            return self._streams.get(name)

    def names(self) -> tuple[str, ...]:
        """Return the registered names in registration order."""
        with self._lock:
            return tuple(self._streams)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._streams

    def __iter__(self) -> Iterator[Stream]:
        with self._lock:
            return iter(tuple(self._streams.values()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._streams)

    def __repr__(self) -> str:
        return f"StreamRegistry(names={self.names()!r})"
