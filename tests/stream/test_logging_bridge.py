# topmark:header:start
#
#   project      : Prologue
#   file         : test_logging_bridge.py
#   file_relpath : tests/stream/test_logging_bridge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the bridge between stdlib logging and streams."""

from __future__ import annotations

import logging

import pytest

from prologue.core.errors import LoggerAlreadyInstalledError
from prologue.diagnostic.entry import Entry, Task
from prologue.diagnostic.group import EntryGroup
from prologue.stream.logging_bridge import (
    STREAM_ATTR,
    STREAMS_LOGGER_NAME,
    StreamLogHandler,
    default_registry,
    init_logging,
    uninstall_logging,
)
from prologue.stream.registry import StreamRegistry
from prologue.stream.sinks import BufferSink
from prologue.stream.stream import Stream


@pytest.fixture
def registry(buffer_sink: BufferSink) -> StreamRegistry:
    """Return an installed registry with one ``build`` stream.

    Args:
        buffer_sink (BufferSink): Sink shared by the registry's streams.

    Returns:
        StreamRegistry: The registry records are routed to.
    """
    reg = init_logging(StreamRegistry(sink=buffer_sink))
    reg.create("build")
    return reg


def _build(registry: StreamRegistry) -> Stream:
    stream = registry.find("build")
    assert stream is not None
    return stream


def test_entries_are_logged_to_their_stream(
    registry: StreamRegistry, buffer_sink: BufferSink
) -> None:
    """Entry.log renders the entry on the named stream and counts it."""
    Entry.warning("unused import").log("build")
    Entry.error("mismatched types").log("build")

    stream = _build(registry)
    assert (stream.warning_count, stream.error_count) == (1, 1)
    assert buffer_sink.lines == ["warning: unused import", "error: mismatched types"]


def test_groups_and_tasks_are_routed(registry: StreamRegistry, buffer_sink: BufferSink) -> None:
    """Groups count once by their worst member; tasks are written uncounted."""
    EntryGroup.of(Entry.note("n"), Entry.warning("w")).log("build")
    Task("Finished", "release").log("build")

    stream = _build(registry)
    assert (stream.warning_count, stream.error_count) == (1, 0)
    assert buffer_sink.lines == ["note: n\nwarning: w\n", "    Finished release"]


def test_help_entries_are_below_the_handler_level(
    registry: StreamRegistry, buffer_sink: BufferSink
) -> None:
    """HELP maps to DEBUG, which the bridge does not forward."""
    Entry.help("consider this").log("build")

    assert buffer_sink.lines == []


def test_unknown_stream_drops_record(registry: StreamRegistry, buffer_sink: BufferSink) -> None:
    """Records for streams that do not exist are ignored."""
    Entry.error("lost").log("nowhere")

    assert buffer_sink.lines == []
    assert _build(registry).error_count == 0


def test_plain_records_use_logging_levels(
    registry: StreamRegistry, buffer_sink: BufferSink
) -> None:
    """Ordinary log calls are formatted and counted by level."""
    log = logging.getLogger(STREAMS_LOGGER_NAME)
    log.warning("%d files skipped", 3, extra={STREAM_ATTR: "build"})
    log.error("fatal", extra={STREAM_ATTR: "build"})
    log.info("just so you know", extra={STREAM_ATTR: "build"})

    stream = _build(registry)
    assert (stream.warning_count, stream.error_count) == (1, 1)
    assert buffer_sink.lines == ["3 files skipped", "fatal", "just so you know"]


def test_handler_falls_back_to_logger_name(buffer_sink: BufferSink) -> None:
    """A handler attached by hand selects the stream by logger name."""
    registry = StreamRegistry(sink=buffer_sink)
    stream = registry.create("myapp.compile")
    log = logging.getLogger("myapp.compile")
    handler = StreamLogHandler(registry)
    log.addHandler(handler)
    log.propagate = False
    try:
        log.error("failed")
    finally:
        log.removeHandler(handler)
        log.propagate = True

    assert stream.error_count == 1
    assert buffer_sink.lines == ["failed"]


def test_second_install_fails(registry: StreamRegistry) -> None:
    """The bridge can only be installed once per process."""
    with pytest.raises(LoggerAlreadyInstalledError):
        init_logging()


def test_default_registry_is_created_lazily_once() -> None:
    """The default registry is a single shared instance used by init_logging()."""
    first = default_registry()

    assert default_registry() is first
    assert init_logging() is first


def test_named_logger_reaches_stream_after_init(buffer_sink: BufferSink) -> None:
    """An ordinary application logger is routed by its name through the root logger."""
    registry = init_logging(StreamRegistry(sink=buffer_sink))
    stream = registry.create("build")

    logging.getLogger("build").error("boom")

    assert stream.error_count == 1
    assert buffer_sink.lines == ["boom"]


def test_other_named_loggers_are_ignored(buffer_sink: BufferSink) -> None:
    """Records from loggers without a matching stream are dropped."""
    registry = init_logging(StreamRegistry(sink=buffer_sink))
    stream = registry.create("build")

    logging.getLogger("unrelated").error("not ours")

    assert stream.error_count == 0
    assert buffer_sink.lines == []


def test_init_logging_accepts_a_target_logger(buffer_sink: BufferSink) -> None:
    """A custom target limits the bridge to that logger's subtree."""
    app = logging.getLogger("myapp")
    registry = init_logging(StreamRegistry(sink=buffer_sink), target=app)
    stream = registry.create("myapp.link")

    logging.getLogger("myapp.link").warning("slow")
    logging.getLogger("elsewhere").warning("outside")

    assert stream.warning_count == 1
    assert buffer_sink.lines == ["slow"]


def test_uninstall_detaches_from_every_logger(buffer_sink: BufferSink) -> None:
    """After uninstalling, neither the root nor the streams logger forwards records."""
    registry = init_logging(StreamRegistry(sink=buffer_sink))
    stream = registry.create("build")
    uninstall_logging()

    logging.getLogger("build").error("late")
    Entry.error("late").log("build")

    assert stream.error_count == 0
    assert not any(isinstance(h, StreamLogHandler) for h in logging.getLogger().handlers)
    assert not any(
        isinstance(h, StreamLogHandler) for h in logging.getLogger(STREAMS_LOGGER_NAME).handlers
    )
