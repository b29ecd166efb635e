# topmark:header:start
#
#   project      : ErrProc
#   file         : __init__.py
#   file_relpath : src/errproc/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utility helpers for ErrProc."""
