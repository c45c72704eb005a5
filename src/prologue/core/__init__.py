# topmark:header:start
#
#   project      : Prologue
#   file         : __init__.py
#   file_relpath : src/prologue/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core types shared across Prologue.

This package holds the severity scale and the error hierarchy. It has no
dependency on the diagnostic or stream layers.
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
from prologue.core.severity import NoteKind, Severity, worst

__all__ = [
    "AnnotationOnEmptyLineError",
    "LoggerAlreadyInstalledError",
    "NoteKind",
    "OverlappingAnnotationError",
    "PrologueError",
    "Severity",
    "SinkIOError",
    "StreamAlreadyExistsError",
    "worst",
]
