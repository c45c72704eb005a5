# topmark:header:start
#
#   project      : Prologue
#   file         : colored_enum.py
#   file_relpath : src/prologue/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` stores a textual value and, separately, a colorizer (a
callable that decorates strings). The layout engine never calls colorizers
directly: it asks a [`Styler`][prologue.rendering.styles.Styler] to render a
semantic category, and only the chalk-backed styler reaches for `.color`.

Example:
    ```python
    from yachalk import chalk

    class Signal(ColoredStrEnum):
        GO   = ("go", chalk.green)
        STOP = ("stop", chalk.red_bright)

    Signal.GO.value           # 'go'
    Signal.GO.color("hello")  # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword. Prologue always calls colorizers
    with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join the provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def paint(self, text: str) -> str:
        """Colorize ``text``, leaving empty text unchanged."""
        return self._color(text) if text else text
