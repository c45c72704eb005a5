# topmark:header:start
#
#   project      : Prologue
#   file         : settings.py
#   file_relpath : src/prologue/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime settings for Prologue.

Settings are resolved in layers, later layers winning:

1. built-in defaults (`Settings()`),
2. a TOML file: ``[tool.prologue]`` in ``pyproject.toml`` or the top-level
   table of a ``prologue.toml``,
3. environment variables (``PROLOGUE_COLOR``, ``PROLOGUE_LOG_LEVEL``).

Color resolution follows the usual conventions: ``FORCE_COLOR`` and
``NO_COLOR`` are honoured when the mode is ``auto``, and the final fallback is
whether stderr is a TTY.

Example:
    ```python
    settings = load_settings(Path("pyproject.toml")).with_env()
    stream = Stream("build", styler=settings.styler())
    ```
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from prologue.config.logging import (
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from prologue.rendering.styles import resolve_styler

if TYPE_CHECKING:
    from pathlib import Path

    from prologue.config.logging import PrologueLogger
    from prologue.rendering.styles import Styler
    from prologue.stream.registry import StreamRegistry
    from prologue.stream.stream import Stream

logger: PrologueLogger = get_logger(__name__)

COLOR_ENV: Final[str] = "PROLOGUE_COLOR"
PYPROJECT_SECTION: Final[tuple[str, str]] = ("tool", "prologue")


class ColorMode(str, Enum):
    """User intent for colorized diagnostics.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stderr is a TTY).
        ALWAYS: Force-enable color.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Explicit mode**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. **Auto**: ``stream_isatty``, or ``sys.stderr.isatty()`` when not given.

    Args:
        color_mode: Requested mode; ``None`` behaves like ``AUTO``.
        stream_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled.
    """
    if color_mode == ColorMode.ALWAYS:
        return True
    if color_mode == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (OSError, ValueError):
            stream_isatty = False
    return bool(stream_isatty)


@dataclass(frozen=True)
class Settings:
    """Resolved Prologue settings.

    Attributes:
        color: Color intent for console sinks.
        log_level: Level for Prologue's internal logger, or None to leave it unset.
        default_stream: Name of the stream `summary_stream()` returns; the
            unnamed global stream by default.
    """

    color: ColorMode = ColorMode.AUTO
    log_level: int | None = None
    default_stream: str = ""

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Settings:
        """Build settings from a parsed TOML table, ignoring unknown keys.

        Raises:
            ValueError: If ``color`` or ``log_level`` hold unsupported values.
        """
        settings = cls()
        if "color" in data:
            settings = replace(settings, color=ColorMode(str(data["color"]).lower()))
        if "log_level" in data:
            level = parse_log_level(data["log_level"])
            if level is None:
                raise ValueError(f"Unknown log level: {data['log_level']!r}")
            settings = replace(settings, log_level=level)
        if "default_stream" in data:
            settings = replace(settings, default_stream=str(data["default_stream"]))
        unknown = set(data) - {"color", "log_level", "default_stream"}
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
        return settings

    @classmethod
    def from_env(cls) -> Settings:
        """Return the defaults with the environment overrides applied."""
        return cls().with_env()

    def with_env(self) -> Settings:
        """Return a copy with ``PROLOGUE_COLOR`` / ``PROLOGUE_LOG_LEVEL`` applied."""
        settings = self
        color = os.environ.get(COLOR_ENV)
        if color:
            try:
                settings = replace(settings, color=ColorMode(color.strip().lower()))
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", COLOR_ENV, color)
        level = resolve_env_log_level()
        if level is not None:
            settings = replace(settings, log_level=level)
        return settings

    def configure_logging(self) -> None:
        """Apply ``log_level`` to Prologue's internal logger."""
        setup_logging(self.log_level)

    def use_color(self, *, stream_isatty: bool | None = None) -> bool:
        """Return True if console output should be colorized."""
        return resolve_color_mode(color_mode=self.color, stream_isatty=stream_isatty)

    def styler(self, *, stream_isatty: bool | None = None) -> Styler:
        """Return the styler matching the resolved color decision."""
        return resolve_styler(self.use_color(stream_isatty=stream_isatty))

    def summary_stream(self, registry: StreamRegistry) -> Stream:
        """Return the ``default_stream`` of ``registry``, creating it on first use."""
        return registry.get_or_create(self.default_stream)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Errors are logged and an empty dict is returned on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def load_settings(path: Path) -> Settings:
    """Load settings from ``pyproject.toml`` (``[tool.prologue]``) or ``prologue.toml``.

    A missing or unreadable file yields the defaults.
    """
    data: dict[str, Any] = load_toml_dict(path)
    if path.name == "pyproject.toml":
        section: Any = data
        for key in PYPROJECT_SECTION:
            section = section.get(key, {}) if isinstance(section, dict) else {}
        data = cast("dict[str, Any]", section) if isinstance(section, dict) else {}
    logger.debug("Loaded settings from %s: %r", path, data)
    return Settings.from_mapping(data)
