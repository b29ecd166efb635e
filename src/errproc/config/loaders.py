# topmark:header:start
#
#   project      : ErrProc
#   file         : loaders.py
#   file_relpath : src/errproc/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads ErrProc configuration from ``errproc.toml`` or from the
``[tool.errproc]`` table of ``pyproject.toml``. Parsing is done with `tomlkit`
and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from errproc.config.keys import Toml
from errproc.config.logging import get_logger
from errproc.constants import ERRPROC_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from errproc.config.logging import ErrprocLogger

TomlTable = dict[str, Any]

logger: ErrprocLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``errproc.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_errproc_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the ErrProc table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.errproc]`` (None when absent); any
    other file is an ErrProc document whose top level is the table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table: Any = cast("dict[str, Any]", tool).get(Toml.SECTION_ERRPROC)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def find_config_file(directory: Path) -> Path | None:
    """Return the first ErrProc config source in ``directory``.

    ``errproc.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only counts
    when it has a ``[tool.errproc]`` table.
    """
    candidate: Path = directory / ERRPROC_TOML_NAME
    if candidate.is_file():
        return candidate
    candidate = directory / PYPROJECT_TOML_NAME
    if (
        candidate.is_file()
        and extract_errproc_table(candidate, load_toml_dict(candidate)) is not None
    ):
        return candidate
    logger.debug("No ErrProc configuration in %s", directory)
    return None
