# topmark:header:start
#
#   project      : Prologue
#   file         : logging.py
#   file_relpath : src/prologue/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal Prologue logging with a TRACE level.

This module configures the *internal* logger used by Prologue itself (builder
activity, stream bookkeeping, registry changes). It is unrelated to the
diagnostics Prologue renders for its callers: those go through streams and
sinks, see [`prologue.stream`][prologue.stream].

Features:
    * a custom TRACE level below DEBUG,
    * a `PrologueLogger` class exposing `trace()`,
    * a chalk-colored formatter keyed on the record level,
    * `PROLOGUE_LOG_LEVEL` environment override.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "PROLOGUE_LOG_LEVEL"


class PrologueLogger(logging.Logger):
    """Logger class for Prologue with support for a TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(PrologueLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the whole formatted record by its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and color it according to its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | int | None) -> int | None:
    """Return a logging level for a level name or number, or None if unknown.

    Accepts names such as ``"TRACE"`` or ``"warn"`` (case-insensitive), numeric
    strings such as ``"10"``, and plain integers.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level requested via ``PROLOGUE_LOG_LEVEL``, or None if unset."""
    val = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    return parse_log_level(val)


def setup_logging(level: int | None = None) -> None:
    """Configure the ``prologue`` logger with a level and colored output.

    Only the package logger is touched so that applications embedding Prologue
    keep control of the root logger. Any handler previously installed by this
    function is replaced.

    Args:
        level (int | None): Level to apply. When None the environment is
            consulted, and the default is CRITICAL (effectively silent).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger = logging.getLogger("prologue")
    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        if getattr(handler, "_prologue_internal", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._prologue_internal = True  # type: ignore[attr-defined]
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)


def get_logger(name: str) -> PrologueLogger:
    """Retrieve a PrologueLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        PrologueLogger: The logger.
    """
    logger = logging.getLogger(name)
    return cast("PrologueLogger", logger)
