# topmark:header:start
#
#   project      : ErrProc
#   file         : keys.py
#   file_relpath : src/errproc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for ErrProc configuration.

Keys appear at the top level of ``errproc.toml`` and under ``[tool.errproc]``
in ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ErrProc configuration."""

    # pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_ERRPROC: Final[str] = "errproc"

    # Array of "module:attribute" references.
    KEY_PROCESSORS: Final[str] = "processors"

    # Level name ("DEBUG") or number.
    KEY_LOG_LEVEL: Final[str] = "log_level"
