# topmark:header:start
#
#   project      : Prologue
#   file         : entry.py
#   file_relpath : src/prologue/diagnostic/entry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic entries and the source builder.

An `Entry` is one diagnostic: a severity, a message and an optional
[`SourceBlock`][prologue.diagnostic.source.SourceBlock]. Entries are built in a
chain that never mutates a value in place; every builder step returns a new
builder, and `finish()` / `discard()` turn it back into an `Entry`:

```python
entry = (
    Entry.warning("variable does not need to be mutable")
    .attach_named_source("src/main.rs", 3, 9)
    .add_line(3, "    let mut x = 42;")
    .annotate_help(9, 4, "help: remove this `mut`")
    .annotate_warning(13, 1)
    .note("`#[warn(unused_mut)]` on by default")
    .finish()
)
```

Rendered:

```text
warning: variable does not need to be mutable
 --> src/main.rs:3:9
  |
3 |     let mut x = 42;
  |         ----^
  |         |
  |         help: remove this `mut`
  |
  = note: `#[warn(unused_mut)]` on by default

```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from prologue.config.logging import get_logger
from prologue.core.errors import AnnotationOnEmptyLineError, OverlappingAnnotationError
from prologue.core.severity import NoteKind, Severity
from prologue.diagnostic.annotation import AnnotationSpan, SourceLine
from prologue.diagnostic.source import Note, SourceBlock
from prologue.rendering.margin import colon
from prologue.rendering.styles import NO_STYLER, Style, Styler
from prologue.stream.logging_bridge import log_to_stream

if TYPE_CHECKING:
    from prologue.config.logging import PrologueLogger

logger: PrologueLogger = get_logger(__name__)

TASK_ACTION_WIDTH = 12


@dataclass(frozen=True)
class Entry:
    """An immutable diagnostic entry.

    Attributes:
        severity: Drives the headline label and the stream counters.
        message: Headline text.
        emphasize_message: Render the message in the title style. Set
            automatically once a source block is attached.
        source: Optional location, annotated lines and notes.
    """

    severity: Severity
    message: str
    emphasize_message: bool = False
    source: SourceBlock | None = None

    @classmethod
    def error(cls, message: str) -> Entry:
        """Create an error entry."""
        return cls(Severity.ERROR, message)

    @classmethod
    def warning(cls, message: str) -> Entry:
        """Create a warning entry."""
        return cls(Severity.WARNING, message)

    @classmethod
    def note(cls, message: str) -> Entry:
        """Create a note entry."""
        return cls(Severity.NOTE, message)

    @classmethod
    def help(cls, message: str) -> Entry:
        """Create a help entry."""
        return cls(Severity.HELP, message)

    new_error = error
    new_warning = warning
    new_note = note
    new_help = help

    @property
    def counted_severity(self) -> Severity:
        """Return the severity a stream counts this entry under."""
        return self.severity

    def attach_source(self, anchor_line: int, anchor_column: int) -> EntrySourceBuilder:
        """Start building an anonymous source block for this entry.

        Any source already attached is replaced when the builder finishes.
        """
        return EntrySourceBuilder(entry=self, source=SourceBlock(anchor_line, anchor_column))

    def attach_named_source(
        self,
        filename: str | os.PathLike[str],
        anchor_line: int,
        anchor_column: int,
    ) -> EntrySourceBuilder:
        """Start building a source block located in ``filename``."""
        block = SourceBlock(anchor_line, anchor_column, filename=filename)
        return EntrySourceBuilder(entry=self, source=block)

    def render(self, column_width: int | None = None, *, styler: Styler = NO_STYLER) -> str:
        """Render the headline and the source block.

        Args:
            column_width: Gutter width shared by an enclosing group. When
                given, the trailing blank line of a standalone entry is left
                to the group.
            styler: Styling backend.

        Returns:
            The rendered entry.
        """
        label = styler.render(self.severity.style, self.severity.value)
        message = self.message
        if self.emphasize_message:
            message = styler.render(Style.TITLE, message)
        parts = [f"{label}{colon(styler=styler)} {message}\n"]
        if self.source is not None:
            parts.append(self.source.render(column_width, styler=styler))
            if column_width is None:
                parts.append("\n")
        return "".join(parts)

    def log(self, stream_name: str) -> None:
        """Emit this entry through the logging bridge to the stream ``stream_name``.

        See [`prologue.stream.logging_bridge`][prologue.stream.logging_bridge].
        """
        log_to_stream(stream_name, self.severity.log_level, self)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class EntrySourceBuilder:
    """Builder for the source block of an entry.

    Exactly one line is open at a time: annotations go to the most recently
    added line, which is flushed into the block when the next line starts or
    when the builder finishes. Every method returns a new builder; a failing
    method raises and leaves the builder it was called on untouched (it is
    also available as the error's ``partial``).
    """

    entry: Entry
    source: SourceBlock
    current_line: SourceLine | None = field(default=None)

    def add_line(self, line_number: int, text: str) -> EntrySourceBuilder:
        """Open a new source line, flushing the current one into the block."""
        line = SourceLine(line_number, text)
        source = self.source
        if self.current_line is not None:
            source = replace(source, lines=(*source.lines, self.current_line))
        return replace(self, source=source, current_line=line)

    new_line = add_line

    def annotate(
        self,
        severity: Severity,
        position: int,
        length: int,
        label: str = "",
    ) -> EntrySourceBuilder:
        """Annotate the current line.

        Raises:
            AnnotationOnEmptyLineError: If no line was added yet.
            OverlappingAnnotationError: If the span intersects an existing
                annotation on the current line.
        """
        if self.current_line is None:
            raise AnnotationOnEmptyLineError(partial=self)
        try:
            line = self.current_line.add_annotation(
                severity, AnnotationSpan(position, length), label
            )
        except OverlappingAnnotationError as err:
            err.partial = self
            raise
        return replace(self, current_line=line)

    def annotate_error(self, position: int, length: int, label: str = "") -> EntrySourceBuilder:
        """Annotate the current line with an error underline."""
        return self.annotate(Severity.ERROR, position, length, label)

    def annotate_warning(self, position: int, length: int, label: str = "") -> EntrySourceBuilder:
        """Annotate the current line with a warning underline."""
        return self.annotate(Severity.WARNING, position, length, label)

    def annotate_note(self, position: int, length: int, label: str = "") -> EntrySourceBuilder:
        """Annotate the current line with a note underline."""
        return self.annotate(Severity.NOTE, position, length, label)

    def annotate_help(self, position: int, length: int, label: str = "") -> EntrySourceBuilder:
        """Annotate the current line with a help (dashed) underline."""
        return self.annotate(Severity.HELP, position, length, label)

    def note(self, text: str) -> EntrySourceBuilder:
        """Append a trailing ``note:``."""
        return self._with_note(Note(NoteKind.NOTE, text))

    def help(self, text: str) -> EntrySourceBuilder:
        """Append a trailing ``help:``."""
        return self._with_note(Note(NoteKind.HELP, text))

    def _with_note(self, note: Note) -> EntrySourceBuilder:
        return replace(self, source=replace(self.source, notes=(*self.source.notes, note)))

    def finish(self) -> Entry:
        """Flush the current line and return the entry with its source block."""
        source = self.source
        if self.current_line is not None:
            source = replace(source, lines=(*source.lines, self.current_line))
        logger.trace(
            "Finished source for %s entry: %d line(s), %d note(s)",
            self.entry.severity.value,
            len(source.lines),
            len(source.notes),
        )
        return replace(self.entry, emphasize_message=True, source=source)

    def discard(self) -> Entry:
        """Drop the source work and return the original entry unchanged."""
        return self.entry


@dataclass(frozen=True)
class Task:
    """A one-line progress/status message such as ``   Compiling foo v0.1.0``.

    Tasks are informational: they never touch a stream's counters.
    """

    action: str
    description: str

    @property
    def counted_severity(self) -> None:
        """Tasks are never counted."""
        return None

    def render(self, *, styler: Styler = NO_STYLER) -> str:
        """Render the action right-aligned in a fixed column, then the description."""
        pad = " " * max(TASK_ACTION_WIDTH - len(self.action), 0)
        return f"{pad}{styler.render(Style.NOTE, self.action)} {self.description}\n"

    def log(self, stream_name: str) -> None:
        """Emit this task through the logging bridge at INFO level."""
        log_to_stream(stream_name, Severity.NOTE.log_level, self)

    def __str__(self) -> str:
        return self.render()
