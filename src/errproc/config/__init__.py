# topmark:header:start
#
#   project      : ErrProc
#   file         : __init__.py
#   file_relpath : src/errproc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ErrProc configuration: TOML sources and logging setup."""

from __future__ import annotations

from .model import ErrprocConfig, resolve_reference

__all__ = [
    "ErrprocConfig",
    "resolve_reference",
]
