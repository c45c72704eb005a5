# topmark:header:start
#
#   project      : Prologue
#   file         : source.py
#   file_relpath : src/prologue/diagnostic/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source blocks: location header, annotated lines and trailing notes.

A `SourceBlock` is the part of a diagnostic below its one-line headline:

```text
 --> src/main.rs:3:9
  |
3 |     let mut x = 42;
  |         ----^ unused
  |
  = note: `#[warn(unused_mut)]` on by default
```

Blocks are immutable. They are assembled line by line through
[`EntrySourceBuilder`][prologue.diagnostic.entry.EntrySourceBuilder].
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from prologue.core.severity import NoteKind
from prologue.rendering.margin import MarginKind, arrow, digit_width, margin
from prologue.rendering.styles import NO_STYLER, Style, Styler

if TYPE_CHECKING:
    from prologue.diagnostic.annotation import SourceLine

ANONYMOUS_SOURCE = "<anonymous>"


@dataclass(frozen=True)
class Note:
    """A trailing ``note:`` or ``help:`` message; may span several lines."""

    kind: NoteKind
    text: str

    def render(self, column_width: int, *, styler: Styler = NO_STYLER) -> str:
        """Render the note under a gutter of ``column_width`` columns.

        Lines are split on newline characters only. Continuation lines are
        aligned under the text of the first line, past a blank margin. An empty
        note renders as an empty string.
        """
        lines = self.text.split("\n")
        if not lines[-1]:
            lines.pop()
        if not lines:
            return ""
        prefix = margin(column_width, kind=MarginKind.BULLET, styler=styler)
        kind = styler.render(Style.TITLE, self.kind.value)
        rows = [f"{prefix} {kind}: {lines[0]}".rstrip(" ")]
        indent = margin(column_width, kind=MarginKind.BLANK, styler=styler)
        indent += " " * (1 + len(f"{self.kind.value}: "))
        for line in lines[1:]:
            rows.append(f"{indent}{line}".rstrip(" ") if line.strip(" ") else "")
        return "".join(f"{row}\n" for row in rows)


@dataclass(frozen=True)
class SourceBlock:
    """Location header plus annotated source lines plus trailing notes.

    Attributes:
        anchor_line: Line shown in the ``-->`` header.
        anchor_column: Column shown in the ``-->`` header.
        filename: Optional file name; ``<anonymous>`` is shown when unset.
        lines: Source lines in the order they were added.
        notes: Trailing notes in the order they were added.
    """

    anchor_line: int
    anchor_column: int
    filename: str | os.PathLike[str] | None = None
    lines: tuple[SourceLine, ...] = field(default=())
    notes: tuple[Note, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.anchor_line < 1 or self.anchor_column < 1:
            raise ValueError(
                f"Source anchors are 1-based, got {self.anchor_line}:{self.anchor_column}"
            )

    @property
    def location(self) -> str:
        """Return ``file:line:column`` for the header."""
        name = os.fspath(self.filename) if self.filename is not None else ANONYMOUS_SOURCE
        return f"{name}:{self.anchor_line}:{self.anchor_column}"

    def max_line_number(self) -> int:
        """Return the largest line number among the lines, or the anchor if there are none."""
        return max((line.line_number for line in self.lines), default=self.anchor_line)

    def column_width(self) -> int:
        """Return the gutter width needed for the anchor and every line."""
        return digit_width(max(self.anchor_line, self.max_line_number()))

    def render(self, column_width: int | None = None, *, styler: Styler = NO_STYLER) -> str:
        """Render the header, lines and notes.

        Args:
            column_width: Gutter width imposed by an enclosing group; computed
                from this block when None.
            styler: Styling backend.

        Returns:
            The rendered block, each row terminated by a newline.
        """
        width = self.column_width() if column_width is None else column_width
        blank = margin(width, styler=styler) + "\n"

        parts = [f"{arrow(width, styler=styler)} {self.location}\n", blank]
        parts.extend(line.render(width, styler=styler) for line in self.lines)
        if not self.lines or not self.lines[-1].is_annotated:
            parts.append(blank)
        notes = "".join(note.render(width, styler=styler) for note in self.notes)
        if notes:
            parts.append(blank)
            parts.append(notes)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()
