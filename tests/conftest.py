# topmark:header:start
#
#   project      : Prologue
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Prologue test suite.

This file sets up global fixtures and turns Prologue's internal logging up to
TRACE so that builder and stream bookkeeping shows in failing test output.

Notes:
    The logging bridge is process-wide. Tests that call `init_logging()` do
    not need to clean up: the autouse `reset_logging_bridge` fixture removes the
    handler and forgets the default registry after every test.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from prologue.config import logging
from prologue.rendering.styles import Style
from prologue.stream.logging_bridge import uninstall_logging
from prologue.stream.sinks import BufferSink

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

ENV_VARS: tuple[str, ...] = ("PROLOGUE_LOG_LEVEL", "PROLOGUE_COLOR", "FORCE_COLOR", "NO_COLOR")

_TAG = re.compile(r"\[(?:/|" + "|".join(re.escape(style.value) for style in Style) + r")\]")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class TagStyler:
    """Test styler wrapping every fragment in ``[style]...[/]`` markers.

    Used to check that styling never shifts columns: removing the markers must
    give back the plain rendering.
    """

    def render(self, style: Style, text: str) -> str:
        return f"[{style.value}]{text}[/]"


def strip_tags(text: str) -> str:
    """Remove the markers added by `TagStyler`."""
    return _TAG.sub("", text)


@pytest.fixture(autouse=True)
def clean_prologue_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging_bridge() -> Iterator[None]:
    """Uninstall the logging bridge after each test."""
    yield
    uninstall_logging()


@pytest.fixture
def buffer_sink() -> BufferSink:
    """Return a fresh in-memory sink.

    Returns:
        BufferSink: A sink collecting written lines.
    """
    return BufferSink()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set Prologue's internal logging to TRACE for the test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
