# topmark:header:start
#
#   project      : Prologue
#   file         : errors.py
#   file_relpath : src/prologue/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while building or emitting diagnostics.

Every error is recoverable. Builder failures carry the value that was being
built (``partial``) in the state it had *before* the failing call, so callers
can inspect it, retry, or salvage the work:

```python
try:
    builder = builder.annotate_warning(18, 5)
except OverlappingAnnotationError as err:
    entry = err.partial.finish()
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from prologue.diagnostic.annotation import Annotation


class PrologueError(Exception):
    """Base class for all Prologue errors.

    Attributes:
        partial: The value under construction when the error happened, if any.
    """

    def __init__(self, message: str, *, partial: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.partial = partial


class OverlappingAnnotationError(PrologueError):
    """An annotation intersects an existing annotation on the same source line."""

    def __init__(
        self,
        attempted: Annotation,
        existing: Annotation,
        *,
        partial: Any = None,
    ) -> None:
        super().__init__(
            "annotation overlaps with previous annotation "
            f"(attempted {attempted.span}, existing {existing.span})",
            partial=partial,
        )
        self.attempted = attempted
        self.existing = existing


class AnnotationOnEmptyLineError(PrologueError):
    """An annotation was added before any source line was opened."""

    def __init__(self, *, partial: Any = None) -> None:
        super().__init__("tried to annotate an empty line", partial=partial)


class StreamAlreadyExistsError(PrologueError):
    """A stream with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"stream `{name}` already exists")
        self.name = name


class SinkIOError(PrologueError):
    """Writing rendered text to a stream's sink failed.

    Counters were already updated when this is raised; they are not rolled back.
    """

    def __init__(self, stream_name: str, cause: OSError) -> None:
        super().__init__(f"cannot write to stream `{stream_name}`: {cause}")
        self.stream_name = stream_name
        self.cause = cause


class LoggerAlreadyInstalledError(PrologueError):
    """The process-wide logging bridge was installed more than once."""

    def __init__(self) -> None:
        super().__init__("the Prologue logging bridge is already installed")
