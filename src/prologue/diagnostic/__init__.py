# topmark:header:start
#
#   project      : Prologue
#   file         : __init__.py
#   file_relpath : src/prologue/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic model and text layout.

Design:
    - `SourceLine` holds one line of source and its non-overlapping annotations.
    - `SourceBlock` frames lines with a location header and trailing notes.
    - `Entry` is one diagnostic; `EntrySourceBuilder` builds its source excerpt.
    - `EntryGroup` renders related entries with one shared gutter width.

All values are immutable once built; rendering never changes them.
"""

from __future__ import annotations

from prologue.diagnostic.annotation import Annotation, AnnotationSpan, SourceLine
from prologue.diagnostic.entry import Entry, EntrySourceBuilder, Task
from prologue.diagnostic.group import EntryGroup
from prologue.diagnostic.source import Note, SourceBlock

__all__ = [
    "Annotation",
    "AnnotationSpan",
    "Entry",
    "EntryGroup",
    "EntrySourceBuilder",
    "Note",
    "SourceBlock",
    "SourceLine",
    "Task",
]
