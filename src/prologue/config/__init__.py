# topmark:header:start
#
#   project      : Prologue
#   file         : __init__.py
#   file_relpath : src/prologue/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Prologue.

Internal logging lives in [`prologue.config.logging`][prologue.config.logging];
user settings (``[tool.prologue]`` tables, environment overrides) live in
[`prologue.config.settings`][prologue.config.settings].
"""

from __future__ import annotations
