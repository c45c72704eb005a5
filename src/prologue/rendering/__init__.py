# topmark:header:start
#
#   project      : Prologue
#   file         : __init__.py
#   file_relpath : src/prologue/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers: styles, stylers and gutter margins."""

from __future__ import annotations
