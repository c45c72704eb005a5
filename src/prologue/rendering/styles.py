# topmark:header:start
#
#   project      : Prologue
#   file         : styles.py
#   file_relpath : src/prologue/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic styles and the styler capability.

Every renderer in Prologue describes *what* a piece of text is (an error
glyph, a title, a gutter bar) with a `Style`, and hands `(style, text)` to a
`Styler`. The styler decides how that looks:

* `NoStyler` returns text unchanged and is the default everywhere, so the core
  renders plain text with no presentation dependency.
* `ChalkStyler` maps each style to its `yachalk` colorizer.

Styles must only ever wrap text; they never change its visible width. The
layout engine pads *outside* styled segments so alignment holds with or
without ANSI escapes.
"""

from __future__ import annotations

from typing import Final, Protocol

from yachalk import chalk

from prologue.rendering.colored_enum import ColoredStrEnum


class Style(ColoredStrEnum):
    """Semantic category of a rendered text fragment."""

    NORMAL = ("normal", chalk.white)
    TITLE = ("title", chalk.white_bright.bold)
    ERROR = ("error", chalk.red_bright)
    WARNING = ("warning", chalk.yellow_bright)
    NOTE = ("note", chalk.green_bright)
    HELP = ("help", chalk.cyan_bright)
    ADD = ("add", chalk.green_bright)
    SUB = ("sub", chalk.red_bright)


class Styler(Protocol):
    """Turns a semantic style and a text into presentation."""

    def render(self, style: Style, text: str) -> str:
        """Return ``text`` decorated for ``style``."""
        ...


class NoStyler:
    """Passthrough styler: every style renders as the plain text."""

    def render(self, style: Style, text: str) -> str:
        return text

    def __repr__(self) -> str:
        return "NoStyler()"


class ChalkStyler:
    """Styler backed by the `yachalk` colorizers attached to each `Style`."""

    def render(self, style: Style, text: str) -> str:
        if style is Style.NORMAL:
            return text
        return style.paint(text)

    def __repr__(self) -> str:
        return "ChalkStyler()"


NO_STYLER: Final[NoStyler] = NoStyler()
CHALK_STYLER: Final[ChalkStyler] = ChalkStyler()


def resolve_styler(use_color: bool) -> Styler:
    """Return the shared chalk styler when color is wanted, else the passthrough."""
    return CHALK_STYLER if use_color else NO_STYLER
