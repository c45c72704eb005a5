# topmark:header:start
#
#   project      : Prologue
#   file         : group.py
#   file_relpath : src/prologue/diagnostic/group.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Groups of entries rendered back to back with a shared gutter width.

```text
warning: missing documentation for a struct
   --> sixth:577:1
    |
577 | pub struct PrologueStderrLogger {
    | ^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^
note: the lint level is defined here
   --> sixth:1:9
    |
1   | #![warn(missing_docs)]
    |         ^^^^^^^^^^^^

```

Members keep their own file names and anchors; only the gutter width is
shared. A stream counts a group once, by its worst member.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from prologue.core.severity import Severity, worst
from prologue.rendering.margin import digit_width
from prologue.rendering.styles import NO_STYLER, Styler
from prologue.stream.logging_bridge import log_to_stream

if TYPE_CHECKING:
    from prologue.diagnostic.entry import Entry


@dataclass(frozen=True)
class EntryGroup:
    """An ordered, immutable collection of entries rendered as one unit."""

    entries: tuple[Entry, ...] = field(default=())

    @classmethod
    def of(cls, *entries: Entry) -> EntryGroup:
        """Create a group from the given entries."""
        return cls(entries=entries)

    def add(self, entry: Entry) -> EntryGroup:
        """Return a new group with ``entry`` appended."""
        return replace(self, entries=(*self.entries, entry))

    def column_width(self) -> int:
        """Return the digit count of the largest line number shown by any member."""
        largest = max(
            (entry.source.max_line_number() for entry in self.entries if entry.source is not None),
            default=1,
        )
        return digit_width(largest)

    def worst_severity(self) -> Severity:
        """Return the most severe member severity, HELP for an empty group."""
        return worst(entry.severity for entry in self.entries)

    @property
    def counted_severity(self) -> Severity:
        """Return the severity a stream counts this group under."""
        return self.worst_severity()

    def render(self, *, styler: Styler = NO_STYLER) -> str:
        """Render every member with the shared width, then one blank line."""
        width = self.column_width()
        body = "".join(entry.render(width, styler=styler) for entry in self.entries)
        return body + "\n"

    def log(self, stream_name: str) -> None:
        """Emit this group through the logging bridge at its worst member's level."""
        log_to_stream(stream_name, self.worst_severity().log_level, self)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return self.render()
