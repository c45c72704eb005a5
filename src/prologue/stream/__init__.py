# topmark:header:start
#
#   project      : Prologue
#   file         : __init__.py
#   file_relpath : src/prologue/stream/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output streams, their registry and the stdlib logging bridge."""

from __future__ import annotations

from prologue.stream.logging_bridge import (
    StreamLogHandler,
    default_registry,
    init_logging,
    log_to_stream,
    uninstall_logging,
)
from prologue.stream.registry import StreamRegistry
from prologue.stream.sinks import BufferSink, CallbackSink, ConsoleSink, LineSink
from prologue.stream.stream import Stream, Submittable

__all__ = [
    "BufferSink",
    "CallbackSink",
    "ConsoleSink",
    "LineSink",
    "Stream",
    "StreamLogHandler",
    "StreamRegistry",
    "Submittable",
    "default_registry",
    "init_logging",
    "log_to_stream",
    "uninstall_logging",
]
