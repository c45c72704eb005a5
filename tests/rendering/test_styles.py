# topmark:header:start
#
#   project      : Prologue
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for styles and stylers."""

from __future__ import annotations

from prologue.rendering.styles import (
    CHALK_STYLER,
    NO_STYLER,
    ChalkStyler,
    NoStyler,
    Style,
    resolve_styler,
)
from tests.conftest import TagStyler, parametrize, strip_tags


@parametrize("style", list(Style))
def test_no_styler_is_passthrough(style: Style) -> None:
    """The default styler never changes the text."""
    assert NoStyler().render(style, "text") == "text"


def test_chalk_styler_uses_style_colorizer() -> None:
    """Colored styles delegate to the colorizer attached to the style."""
    styler = ChalkStyler()

    assert styler.render(Style.ERROR, "boom") == Style.ERROR.color("boom")
    assert "boom" in styler.render(Style.ERROR, "boom")


def test_chalk_styler_leaves_normal_and_empty_text_alone() -> None:
    """NORMAL text and empty fragments are returned unchanged."""
    styler = ChalkStyler()

    assert styler.render(Style.NORMAL, "plain") == "plain"
    assert styler.render(Style.WARNING, "") == ""


def test_resolve_styler() -> None:
    """Color selects the shared chalk styler, no color the passthrough."""
    assert resolve_styler(True) is CHALK_STYLER
    assert resolve_styler(False) is NO_STYLER


def test_style_values_are_semantic_names() -> None:
    """Styles behave as strings carrying their semantic name."""
    assert Style.HELP == "help"
    assert Style("title") is Style.TITLE


def test_strip_tags_only_removes_style_markers() -> None:
    """Bracketed source text such as indexing survives marker removal."""
    styled = TagStyler().render(Style.ERROR, "arr[i]") + " [x] [] [warn]"

    assert strip_tags(styled) == "arr[i] [x] [] [warn]"
