# topmark:header:start
#
#   project      : Prologue
#   file         : logging_bridge.py
#   file_relpath : src/prologue/stream/logging_bridge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bridge between stdlib `logging` and Prologue streams.

Two directions are supported:

* **Inbound**: `StreamLogHandler` is a `logging.Handler` that routes records
  to the stream named by the record's ``prologue_stream`` attribute (falling
  back to the logger name). ``ERROR`` and above count as errors, ``WARNING``
  as warnings. Records for unknown streams are dropped. Records carrying an
  entry, group or task as their message are rendered with the stream's own
  styler and counted by their severity.
* **Outbound**: `log_to_stream()` (used by `Entry.log`, `EntryGroup.log` and
  `Task.log`) emits through the ``prologue.streams`` logger.

The process-wide registry is an explicit, lazily created handle
(`default_registry()`); `init_logging()` installs the handler on the root
logger (and on ``prologue.streams``) and may only succeed once:

```python
registry = init_logging()
registry.create("build")
Entry.warning("unused import").log("build")
logging.getLogger("build").error("linker failed")
registry.find("build").warning_count  # 1
registry.find("build").error_count  # 1
```
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Final

from prologue.config.logging import get_logger
from prologue.core.errors import LoggerAlreadyInstalledError, PrologueError
from prologue.stream.registry import StreamRegistry

if TYPE_CHECKING:
    from prologue.config.logging import PrologueLogger
    from prologue.stream.stream import Submittable

logger: PrologueLogger = get_logger(__name__)

STREAMS_LOGGER_NAME: Final[str] = "prologue.streams"
STREAM_ATTR: Final[str] = "prologue_stream"

_lock = threading.RLock()
_default_registry: StreamRegistry | None = None
_installed_handler: StreamLogHandler | None = None
_installed_loggers: tuple[logging.Logger, ...] = ()


class StreamLogHandler(logging.Handler):
    """Logging handler forwarding records to the matching stream of a registry.

    Args:
        registry: Registry used to look streams up by name.
        level: Records below this level are ignored. Defaults to INFO, so
            DEBUG-level output (help entries) is not forwarded.
    """

    def __init__(self, registry: StreamRegistry, level: int = logging.INFO) -> None:
        super().__init__(level)
        self.registry = registry

    def emit(self, record: logging.LogRecord) -> None:
        name: str = getattr(record, STREAM_ATTR, record.name)
        stream = self.registry.find(name)
        if stream is None:
            return
        try:
            payload = record.msg
            if not record.args and hasattr(payload, "counted_severity"):
                stream.submit(payload)  # type: ignore[arg-type]
            else:
                stream.submit_record(record.levelno, self.format(record))
        except PrologueError:
            self.handleError(record)


def default_registry() -> StreamRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _lock:
        if _default_registry is None:
            _default_registry = StreamRegistry()
            logger.debug("Created the default stream registry")
        return _default_registry


def init_logging(
    registry: StreamRegistry | None = None,
    *,
    target: logging.Logger | None = None,
) -> StreamRegistry:
    """Install a `StreamLogHandler` so that logged records reach their streams.

    The handler is attached to ``target`` (the root logger by default), so a
    record from any named logger, e.g. ``logging.getLogger("build").error(...)``,
    reaches the stream of the same name. It is also attached to the
    ``prologue.streams`` logger, which stops propagation so that entries sent
    with `log_to_stream()` are written once.

    Records still pass through ``target``'s own level first; with the root
    logger left at its default ``WARNING``, plain ``INFO`` records from other
    loggers are filtered before they reach the handler.

    Args:
        registry: Registry to route records to; the default registry when None.
        target: Logger to attach the handler to; the root logger when None.

    Returns:
        The registry records are routed to.

    Raises:
        LoggerAlreadyInstalledError: If the bridge is already installed.
    """
    global _installed_handler, _installed_loggers
    with _lock:
        if _installed_handler is not None:
            raise LoggerAlreadyInstalledError()
        routed = registry if registry is not None else default_registry()
        handler = StreamLogHandler(routed)
        streams_logger = logging.getLogger(STREAMS_LOGGER_NAME)
        streams_logger.setLevel(logging.DEBUG)
        streams_logger.propagate = False
        loggers = [streams_logger]
        attach_to = target if target is not None else logging.getLogger()
        if attach_to is not streams_logger:
            loggers.append(attach_to)
        for log in loggers:
            log.addHandler(handler)
        _installed_handler = handler
        _installed_loggers = tuple(loggers)
    logger.debug("Installed the logging bridge on %s", [log.name for log in loggers])
    return routed


def uninstall_logging() -> None:
    """Remove the installed bridge handler, if any, and forget the default registry."""
    global _installed_handler, _installed_loggers, _default_registry
    with _lock:
        if _installed_handler is not None:
            for log in _installed_loggers:
                log.removeHandler(_installed_handler)
        _installed_handler = None
        _installed_loggers = ()
        _default_registry = None


def log_to_stream(stream_name: str, level: int, payload: Submittable | str) -> None:
    """Emit ``payload`` at ``level`` through the ``prologue.streams`` logger."""
    logging.getLogger(STREAMS_LOGGER_NAME).log(level, payload, extra={STREAM_ATTR: stream_name})
