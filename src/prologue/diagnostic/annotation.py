# topmark:header:start
#
#   project      : Prologue
#   file         : annotation.py
#   file_relpath : src/prologue/diagnostic/annotation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Annotated source lines: the underline and call-out layout engine.

A `SourceLine` holds one line of caller-supplied source text and a set of
`Annotation`s, each underlining a span of that line. Annotations are kept
sorted by position and may never overlap (touching spans are fine).

Columns:
    A span's ``position`` is counted from the gutter bar: position ``1`` is
    the first character of the source text, because the text is printed one
    space after the bar. Position ``0`` is accepted and draws flush against
    the bar.

Layout:
    The source row is followed by an underline row that draws every
    annotation left to right. The rightmost label sits on the underline row.
    Every other label gets its own pair of rows, processed right to left: a
    row of vertical stems, then a row where the stems of the annotations to
    its left are repeated and its label is written at its own column. This is
    what keeps call-outs from crossing:

    ```text
    8 |     let entry = Entry::new_warning("this is a warning line")
      |         -----   ------------------ ^^^^^^^^^^^^^^^^^^^^^^^^ this is the text
      |         |       |
      |         |       this is the invoking function
      |         |
      |         this is the variable
    ```
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from prologue.config.logging import get_logger
from prologue.core.errors import OverlappingAnnotationError
from prologue.rendering.margin import MarginKind, digit_width, margin
from prologue.rendering.styles import NO_STYLER, Styler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prologue.config.logging import PrologueLogger
    from prologue.core.severity import Severity

logger: PrologueLogger = get_logger(__name__)


@dataclass(frozen=True)
class AnnotationSpan:
    """Half-open column range ``[position, position + length)`` on one line."""

    position: int
    length: int

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError(f"Annotation position must be non-negative, got {self.position}")
        if self.length < 1:
            raise ValueError(f"Annotation length must be positive, got {self.length}")

    @property
    def end(self) -> int:
        """Return the first column after the span."""
        return self.position + self.length

    def overlaps(self, other: AnnotationSpan) -> bool:
        """Return True if the spans share at least one column."""
        return not (self.end <= other.position or other.end <= self.position)

    def __str__(self) -> str:
        return f"({self.position}, {self.length})"


@dataclass(frozen=True)
class Annotation:
    """A labeled underline over a span of one source line."""

    severity: Severity
    span: AnnotationSpan
    label: str = ""


@dataclass(frozen=True)
class SourceLine:
    """One immutable line of source text with its sorted, non-overlapping annotations.

    Attributes:
        line_number: 1-based line number shown in the gutter.
        text: The source text, without its line terminator.
        annotations: Annotations sorted by ``span.position``.
    """

    line_number: int
    text: str
    annotations: tuple[Annotation, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"Line numbers start at 1, got {self.line_number}")

    def add_annotation(
        self,
        severity: Severity,
        span: AnnotationSpan,
        label: str = "",
    ) -> SourceLine:
        """Return a copy of this line carrying one more annotation.

        The existing annotations are scanned in position order; the scan stops
        at the first annotation that starts at or after the new span's end,
        since no later one can intersect it.

        Args:
            severity: Severity driving the underline glyph and style.
            span: Columns to underline.
            label: Text drawn next to the underline; may be empty.

        Returns:
            A new line with the annotation inserted in position order.

        Raises:
            OverlappingAnnotationError: If ``span`` intersects an existing
                annotation.
        """
        annotation = Annotation(severity=severity, span=span, label=label)
        for existing in self.annotations:
            if existing.span.end <= span.position:
                continue
            if span.end <= existing.span.position:
                break
            logger.debug(
                "Rejecting annotation %s on line %d: overlaps %s",
                span,
                self.line_number,
                existing.span,
            )
            raise OverlappingAnnotationError(annotation, existing)

        annotations = list(self.annotations)
        bisect.insort_right(annotations, annotation, key=lambda a: a.span.position)
        logger.trace("Annotated line %d at %s (%s)", self.line_number, span, severity.value)
        return replace(self, annotations=tuple(annotations))

    @property
    def is_annotated(self) -> bool:
        """Return True if the line carries at least one annotation."""
        return bool(self.annotations)

    def render(self, column_width: int | None = None, *, styler: Styler = NO_STYLER) -> str:
        """Render the numbered source row and its decoration rows.

        Args:
            column_width: Gutter width; defaults to the digit count of the line number.
            styler: Styling backend.

        Returns:
            The rendered rows, each terminated by a newline.
        """
        width = digit_width(self.line_number) if column_width is None else column_width
        source_row = margin(width, line_number=self.line_number, styler=styler)
        if self.text:
            source_row = f"{source_row} {self.text}"
        rows = [source_row]
        if self.annotations:
            bar = margin(width, kind=MarginKind.BAR, styler=styler)
            rows.extend(bar + row for row in _decoration_rows(self.annotations, styler))
        return "".join(f"{row}\n" for row in rows)

    def __str__(self) -> str:
        return self.render()


def _pad(offset: int, annotation: Annotation) -> str:
    return " " * (annotation.span.position - offset)


def _underline_row(annotations: Sequence[Annotation], styler: Styler) -> str:
    parts: list[str] = []
    offset = 0
    for ann in annotations:
        parts.append(_pad(offset, ann))
        parts.append(styler.render(ann.severity.style, ann.severity.glyph * ann.span.length))
        offset = ann.span.end
    return "".join(parts)


def _stems(annotations: Sequence[Annotation], styler: Styler) -> tuple[str, int]:
    """Draw a stem at the start of each labeled annotation; return text and cursor."""
    parts: list[str] = []
    offset = 0
    for ann in annotations:
        parts.append(_pad(offset, ann))
        if ann.label:
            parts.append(styler.render(ann.severity.style, "|"))
            parts.append(" " * (ann.span.length - 1))
        else:
            parts.append(" " * ann.span.length)
        offset = ann.span.end
    return "".join(parts), offset


def _decoration_rows(annotations: Sequence[Annotation], styler: Styler) -> list[str]:
    """Return the rows drawn under the source row, without the leading margin."""
    last = annotations[-1]
    first_row = _underline_row(annotations, styler)
    if last.label:
        first_row += " " + styler.render(last.severity.style, last.label)
    rows = [first_row]

    if any(ann.label for ann in annotations):
        for index in range(len(annotations) - 2, -1, -1):
            current = annotations[index]
            stem_row, _ = _stems(annotations[: index + 1], styler)
            rows.append(stem_row)
            before, offset = _stems(annotations[:index], styler)
            label = styler.render(current.severity.style, current.label) if current.label else ""
            rows.append(before + _pad(offset, current) + label)

    return [row.rstrip(" ") for row in rows]
