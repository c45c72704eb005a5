# topmark:header:start
#
#   project      : Prologue
#   file         : margin.py
#   file_relpath : src/prologue/rendering/margin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gutter primitives shared by the diagnostic renderers.

A rendered source block has a left gutter ``column_width`` characters wide
that holds line numbers, followed by a margin character:

```text
  --> src/main.rs:3:9
   |
3  |     let mut x = 42;
   |         ^^^^
   |
   = note: `#[warn(unused_mut)]` on by default
```

All helpers pad with plain spaces *outside* the styled fragment so widths are
measured on visible characters only.
"""

from __future__ import annotations

from enum import Enum

from prologue.rendering.styles import NO_STYLER, Style, Styler


class MarginKind(Enum):
    """Margin character and style following the gutter."""

    BAR = ("|", Style.HELP)
    BULLET = ("=", Style.HELP)
    BLANK = (" ", Style.NORMAL)
    DIFF_ADD = ("+", Style.ADD)
    DIFF_SUB = ("-", Style.SUB)

    @property
    def char(self) -> str:
        """Return the margin character."""
        return self.value[0]

    @property
    def style(self) -> Style:
        """Return the margin style."""
        return self.value[1]


def digit_width(number: int) -> int:
    """Return the number of decimal digits needed to print ``number``."""
    return len(str(number))


def margin(
    column_width: int,
    *,
    line_number: int | None = None,
    kind: MarginKind = MarginKind.BAR,
    styler: Styler = NO_STYLER,
) -> str:
    """Return a gutter followed by a margin character.

    The line number, when given, is left-aligned in ``column_width`` columns.
    There is no trailing space after the margin character.
    """
    if line_number is None:
        gutter = " " * column_width
    else:
        number = str(line_number)
        gutter = styler.render(Style.HELP, number) + " " * (column_width - len(number))
    return f"{gutter} {styler.render(kind.style, kind.char)}"


def arrow(column_width: int, *, styler: Styler = NO_STYLER) -> str:
    """Return the ``-->`` location marker, indented past the gutter."""
    return " " * column_width + styler.render(Style.HELP, "-->")


def colon(*, styler: Styler = NO_STYLER) -> str:
    """Return the separator between a severity label and its message."""
    return styler.render(Style.TITLE, ":")
