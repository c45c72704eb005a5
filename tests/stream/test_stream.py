# topmark:header:start
#
#   project      : Prologue
#   file         : test_stream.py
#   file_relpath : tests/stream/test_stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for counted streams."""

from __future__ import annotations

import logging
import threading

import pytest

from prologue.core.errors import SinkIOError
from prologue.diagnostic.entry import Entry, Task
from prologue.diagnostic.group import EntryGroup
from prologue.stream.sinks import BufferSink, CallbackSink
from prologue.stream.stream import Stream
from tests.conftest import TagStyler, parametrize


class FailingSink:
    """Sink whose every write fails."""

    def __init__(self) -> None:
        self.calls = 0

    def write_line(self, text: str) -> None:
        self.calls += 1
        raise OSError("broken pipe")


def test_conditional_summary_with_zero_errors(buffer_sink: BufferSink) -> None:
    """One warning and no errors: only the warning callback runs, once, with 1."""
    stream = Stream("build", sink=buffer_sink)
    stream.submit_entry(Entry.warning("unused import"))
    seen_warnings: list[int] = []
    seen_errors: list[int] = []

    assert stream.if_errors(seen_errors.append) is None
    stream.if_warnings(seen_warnings.append)

    assert seen_errors == []
    assert seen_warnings == [1]


def test_callback_result_is_returned(buffer_sink: BufferSink) -> None:
    """The callback's return value is passed through."""
    stream = Stream(sink=buffer_sink)
    stream.submit_entry(Entry.error("e"))
    stream.submit_entry(Entry.error("e"))

    assert stream.if_errors(lambda n: f"{n} errors emitted") == "2 errors emitted"
    assert stream.if_warnings(lambda n: n) is None


def test_entries_are_written_once_without_final_newline(buffer_sink: BufferSink) -> None:
    """Each submission is one sink write; the sink adds the final newline."""
    stream = Stream("s", sink=buffer_sink)
    stream.submit_entry(Entry.note("hello"))
    stream.submit_entry(Entry.help("try again"))

    assert buffer_sink.lines == ["note: hello", "help: try again"]
    assert buffer_sink.getvalue() == "note: hello\nhelp: try again\n"
    assert (stream.warning_count, stream.error_count) == (0, 0)


def test_group_is_counted_once_by_worst_member(buffer_sink: BufferSink) -> None:
    """A group with an error and a warning counts as one error."""
    stream = Stream("s", sink=buffer_sink)
    stream.submit_group(EntryGroup.of(Entry.warning("w"), Entry.error("e"), Entry.note("n")))

    assert stream.error_count == 1
    assert stream.warning_count == 0
    assert buffer_sink.lines == ["warning: w\nerror: e\nnote: n\n"]


def test_tasks_are_not_counted(buffer_sink: BufferSink) -> None:
    """Status lines never touch the counters."""
    stream = Stream("s", sink=buffer_sink)
    stream.submit_task(Task("Compiling", "foo v0.1.0"))

    assert buffer_sink.lines == ["   Compiling foo v0.1.0"]
    assert (stream.warning_count, stream.error_count) == (0, 0)


@parametrize(
    ("level", "warnings", "errors"),
    [
        (logging.DEBUG, 0, 0),
        (logging.INFO, 0, 0),
        (logging.WARNING, 1, 0),
        (logging.ERROR, 0, 1),
        (logging.CRITICAL, 0, 1),
    ],
)
def test_records_are_counted_by_level(
    buffer_sink: BufferSink, level: int, warnings: int, errors: int
) -> None:
    """ERROR and above count as errors, WARNING as warnings."""
    stream = Stream("s", sink=buffer_sink)
    stream.submit_record(level, "message")

    assert (stream.warning_count, stream.error_count) == (warnings, errors)
    assert buffer_sink.lines == ["message"]


def test_sink_failure_keeps_the_count() -> None:
    """A failed write surfaces as SinkIOError after the counter was updated."""
    sink = FailingSink()
    stream = Stream("broken", sink=sink)

    with pytest.raises(SinkIOError) as excinfo:
        stream.submit_entry(Entry.error("e"))

    assert stream.error_count == 1
    assert sink.calls == 1
    assert excinfo.value.stream_name == "broken"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_stream_styler_is_applied() -> None:
    """Submissions are rendered with the stream's own styler."""
    lines: list[str] = []
    stream = Stream("s", sink=CallbackSink(lines.append), styler=TagStyler())
    stream.submit_entry(Entry.error("boom"))

    assert lines == ["[error]error[/][title]:[/] boom"]


def test_counters_are_exact_under_concurrency(buffer_sink: BufferSink) -> None:
    """Concurrent submissions from many threads are all counted and written."""
    stream = Stream("mt", sink=buffer_sink)
    threads_n, per_thread = 8, 50
    barrier = threading.Barrier(threads_n)

    def worker(index: int) -> None:
        barrier.wait()
        for _ in range(per_thread):
            if index % 2:
                stream.submit_entry(Entry.warning("w"))
            else:
                stream.submit_entry(Entry.error("e"))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert stream.warning_count == threads_n // 2 * per_thread
    assert stream.error_count == threads_n // 2 * per_thread
    assert len(buffer_sink.lines) == threads_n * per_thread


def test_counts_never_decrease(buffer_sink: BufferSink) -> None:
    """Observed counts only grow as submissions proceed."""
    stream = Stream("m", sink=buffer_sink)
    observed: list[int] = []
    for _ in range(5):
        stream.submit_entry(Entry.warning("w"))
        observed.append(stream.warning_count)

    assert observed == [1, 2, 3, 4, 5]
    assert "warnings=5" in repr(stream)
