# topmark:header:start
#
#   project      : Prologue
#   file         : __init__.py
#   file_relpath : src/prologue/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prologue package.

Prologue renders compiler-style diagnostics: a severity line, a source
excerpt with a line-number gutter, underlined and labelled spans, and trailing
notes. Rendered entries are written to named streams that count warnings and
errors and may be fed from the standard `logging` module.

```python
from prologue import Entry, Stream

entry = (
    Entry.warning("unused variable: `x`")
    .attach_named_source("src/main.rs", 2, 9)
    .add_line(2, "    let x = 42;")
    .annotate_warning(9, 1, "help: prefix it with an underscore: `_x`")
    .finish()
)
Stream("build").submit_entry(entry)
```
"""

from __future__ import annotations

from prologue.core.errors import (
    AnnotationOnEmptyLineError,
    LoggerAlreadyInstalledError,
    OverlappingAnnotationError,
    PrologueError,
    SinkIOError,
    StreamAlreadyExistsError,
)
from prologue.core.severity import NoteKind, Severity
from prologue.diagnostic import Entry, EntryGroup, EntrySourceBuilder, SourceBlock, SourceLine, Task
from prologue.rendering.styles import CHALK_STYLER, NO_STYLER, Style, Styler
from prologue.stream import BufferSink, ConsoleSink, Stream, StreamRegistry, init_logging

__all__ = [
    "AnnotationOnEmptyLineError",
    "BufferSink",
    "CHALK_STYLER",
    "ConsoleSink",
    "Entry",
    "EntryGroup",
    "EntrySourceBuilder",
    "LoggerAlreadyInstalledError",
    "NO_STYLER",
    "NoteKind",
    "OverlappingAnnotationError",
    "PrologueError",
    "Severity",
    "SinkIOError",
    "SourceBlock",
    "SourceLine",
    "Stream",
    "StreamAlreadyExistsError",
    "StreamRegistry",
    "Style",
    "Styler",
    "Task",
    "init_logging",
]
