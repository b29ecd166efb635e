# topmark:header:start
#
#   project      : ErrProc
#   file         : builtins.py
#   file_relpath : src/errproc/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ready-made processors.

* [`log_error`][errproc.builtins.log_error] logs every error at ERROR level and
  can be referenced from configuration as ``"errproc.builtins:log_error"``.
* [`make_log_processor`][errproc.builtins.make_log_processor] builds a logging
  processor for a specific logger and level.
* [`ErrorCollector`][errproc.builtins.ErrorCollector] stores errors in memory.
"""

from __future__ import annotations

import logging
from threading import Lock

from errproc.config.logging import ErrprocLogger, get_logger
from errproc.errors import format_error
from errproc.registry.handles import Processor

logger: ErrprocLogger = get_logger(__name__)


def make_log_processor(
    target: logging.Logger | None = None,
    level: int = logging.ERROR,
    *,
    verbose: bool = False,
) -> Processor:
    """Return a processor that logs each error.

    Args:
        target (logging.Logger | None): Logger to write to; defaults to this module's logger.
        level (int): Log level of the emitted records.
        verbose (bool): Log the full wrapper chain with call stacks
            (see [`format_error`][errproc.errors.format_error]).

    Returns:
        Processor: The logging processor.
    """
    out: logging.Logger = target if target is not None else logger

    def _log(err: BaseException) -> None:
        out.log(level, "%s", format_error(err, verbose))

    _log.__qualname__ = f"log_processor[{logging.getLevelName(level)}]"
    return _log


def log_error(err: BaseException) -> None:
    """Log ``err`` at ERROR level on the ``errproc.builtins`` logger."""
    logger.error("%s", format_error(err))


class ErrorCollector:
    """Processor that records every error it receives (thread-safe)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._errors: list[BaseException] = []

    def __call__(self, err: BaseException) -> None:
        with self._lock:
            self._errors.append(err)

    @property
    def errors(self) -> tuple[BaseException, ...]:
        """Errors received so far, oldest first."""
        with self._lock:
            return tuple(self._errors)

    def clear(self) -> None:
        """Forget all recorded errors."""
        with self._lock:
            self._errors.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)
