# topmark:header:start
#
#   project      : ErrProc
#   file         : constants.py
#   file_relpath : src/errproc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ErrProc Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ERRPROC_VERSION: str = get_version("errproc")
except PackageNotFoundError:  # running from a source checkout
    ERRPROC_VERSION = "0.0.0"

# Environment variable holding the log level (name or number).
ENV_LOG_LEVEL: str = "ERRPROC_LOG_LEVEL"

# Configuration sources, in discovery order.
ERRPROC_TOML_NAME: str = "errproc.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.errproc"
