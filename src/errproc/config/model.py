# topmark:header:start
#
#   project      : ErrProc
#   file         : model.py
#   file_relpath : src/errproc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable ErrProc configuration.

[`ErrprocConfig`][errproc.config.model.ErrprocConfig] describes which
processors a dispatcher starts with. Processors are given as import
references, either ``"package.module:attribute"`` or
``"package.module.attribute"``; the attribute part may be dotted
(``"pkg.mod:Hooks.on_error"``).

Example ``errproc.toml``:

```toml
processors = ["errproc.builtins:log_error", "myapp.alerts:page_oncall"]
log_level = "INFO"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import import_module
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from errproc.config.keys import Toml
from errproc.config.loaders import extract_errproc_table, find_config_file, load_toml_dict
from errproc.config.logging import ErrprocLogger, get_logger, parse_log_level
from errproc.errors import ErrprocConfigError, ProcessorImportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from errproc.registry.handles import Processor

logger: ErrprocLogger = get_logger(__name__)


def resolve_reference(ref: str) -> Processor:
    """Import and return the callable named by ``ref``.

    Args:
        ref (str): ``"module:attr"`` or ``"module.attr"`` reference.

    Returns:
        Processor: The referenced callable.

    Raises:
        ErrprocConfigError: If the reference is malformed or the target is not callable.
        ProcessorImportError: If the module or attribute cannot be found.
    """
    ref = ref.strip()
    if ":" in ref:
        module_name, _, attr_path = ref.partition(":")
    else:
        module_name, _, attr_path = ref.rpartition(".")
    if not module_name or not attr_path:
        raise ErrprocConfigError(f"Invalid processor reference: {ref!r}")

    try:
        target: Any = import_module(module_name)
    except ImportError as e:
        raise ProcessorImportError(f"Cannot import module {module_name!r} for {ref!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ProcessorImportError(f"{module_name!r} has no attribute {attr_path!r}") from e

    if not callable(target):
        raise ErrprocConfigError(f"Processor reference {ref!r} is not callable")
    logger.debug("Resolved processor reference %s", ref)
    return cast("Processor", target)


@dataclass(frozen=True)
class ErrprocConfig:
    """Processor configuration for a dispatcher.

    Attributes:
        processors: Import references of the initial processors, in file order.
        log_level: Optional log level name or number, as written in the file.
        config_files: Files this configuration was read from.
    """

    processors: tuple[str, ...] = ()
    log_level: str | None = None
    config_files: tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_defaults(cls) -> ErrprocConfig:
        """Return the empty configuration (no processors)."""
        return cls()

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_files: tuple[Path, ...] = (),
    ) -> ErrprocConfig:
        """Build a configuration from a parsed ErrProc TOML table.

        Args:
            data (Mapping[str, Any]): The ErrProc table (top level of ``errproc.toml``
                or ``[tool.errproc]``).
            config_files (tuple[Path, ...]): Source files, for diagnostics.

        Returns:
            ErrprocConfig: The frozen configuration.

        Raises:
            ErrprocConfigError: If a known key holds a value of the wrong type.
        """
        raw_procs: Any = data.get(Toml.KEY_PROCESSORS, [])
        if not isinstance(raw_procs, list) or not all(
            isinstance(p, str) for p in cast("list[Any]", raw_procs)
        ):
            raise ErrprocConfigError(f"'{Toml.KEY_PROCESSORS}' must be an array of strings")

        raw_level: Any = data.get(Toml.KEY_LOG_LEVEL)
        if raw_level is not None and (
            isinstance(raw_level, bool) or not isinstance(raw_level, (str, int))
        ):
            raise ErrprocConfigError(f"'{Toml.KEY_LOG_LEVEL}' must be a string or integer")
        log_level: str | None = None if raw_level is None else str(raw_level)

        for key in data:
            if key not in (Toml.KEY_PROCESSORS, Toml.KEY_LOG_LEVEL):
                logger.warning("Ignoring unknown ErrProc config key: %s", key)

        return cls(
            processors=tuple(cast("list[str]", raw_procs)),
            log_level=log_level,
            config_files=config_files,
        )

    @classmethod
    def load(cls, path: Path | str) -> ErrprocConfig:
        """Load a configuration file.

        A ``pyproject.toml`` without a ``[tool.errproc]`` table yields the empty
        configuration; unreadable files are logged and also yield it.
        """
        path = Path(path)
        table = extract_errproc_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [tool.errproc] table in %s", path)
            return cls(config_files=(path,))
        return cls.from_toml_dict(table, config_files=(path,))

    @classmethod
    def discover(cls, directory: Path | str = ".") -> ErrprocConfig:
        """Load the first configuration source found in ``directory``.

        Returns:
            ErrprocConfig: The loaded configuration, or the defaults when
                ``directory`` holds no ErrProc configuration.
        """
        found: Path | None = find_config_file(Path(directory))
        if found is None:
            return cls.from_defaults()
        return cls.load(found)

    def resolve_log_level(self) -> int | None:
        """Return the numeric log level, or None when unset.

        Raises:
            ErrprocConfigError: If the configured level name is unknown.
        """
        if self.log_level is None:
            return None
        level = parse_log_level(self.log_level)
        if level is None:
            raise ErrprocConfigError(f"Unknown log level: {self.log_level!r}")
        return level

    def resolve_processors(self) -> tuple[Processor, ...]:
        """Import every configured processor reference, in order."""
        return tuple(resolve_reference(ref) for ref in self.processors)
