# topmark:header:start
#
#   project      : Prologue
#   file         : severity.py
#   file_relpath : src/prologue/core/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity levels and trailing-note kinds.

`Severity` is a closed, totally ordered category: HELP < NOTE < WARNING < ERROR.
It drives three fixed mappings, kept here as small tables rather than spread
over the renderers:

* the semantic `Style` used for labels and underlines,
* the underline glyph (``^`` to point at code, ``-`` for help call-outs),
* the stdlib logging level used when a diagnostic is routed through `logging`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Final

from prologue.rendering.styles import Style

if TYPE_CHECKING:
    from collections.abc import Iterable


class Severity(str, Enum):
    """Diagnostic severity, ordered by importance (ERROR is the worst).

    Comparisons follow the rank, not the string value, so ``max()`` over a
    collection of severities returns the worst one.
    """

    HELP = "help"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return the position of this severity in the HELP..ERROR order."""
        return _RANK[self]

    @property
    def style(self) -> Style:
        """Return the semantic style for labels and underlines of this severity."""
        return _STYLE[self]

    @property
    def glyph(self) -> str:
        """Return the underline character for annotations of this severity."""
        return "-" if self is Severity.HELP else "^"

    @property
    def log_level(self) -> int:
        """Return the stdlib logging level a diagnostic of this severity is logged at."""
        return _LOG_LEVEL[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_RANK: Final[dict[Severity, int]] = {
    Severity.HELP: 0,
    Severity.NOTE: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
}

_STYLE: Final[dict[Severity, Style]] = {
    Severity.HELP: Style.HELP,
    Severity.NOTE: Style.NOTE,
    Severity.WARNING: Style.WARNING,
    Severity.ERROR: Style.ERROR,
}

_LOG_LEVEL: Final[dict[Severity, int]] = {
    Severity.HELP: logging.DEBUG,
    Severity.NOTE: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


def worst(severities: Iterable[Severity]) -> Severity:
    """Return the worst severity in an iterable, HELP when it is empty."""
    return max(severities, default=Severity.HELP)


class NoteKind(str, Enum):
    """Kind of a trailing note attached to a source block."""

    NOTE = "note"
    HELP = "help"
