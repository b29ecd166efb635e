# topmark:header:start
#
#   project      : ErrProc
#   file         : default.py
#   file_relpath : src/errproc/default.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide default dispatcher.

The default [`Errors`][errproc.dispatcher.Errors] instance is created on first
use with no processors and lives for the rest of the process. Every dispatcher
method is mirrored here as a function acting on it; the same functions are
re-exported from the `errproc` package.

Warning:
    The default instance is global state. Tests that register processors on it
    should restore it afterwards, e.g. with `set_default()`:

    ```python
    previous = set_default(Errors())
    try:
        ...
    finally:
        set_default(previous)
    ```
"""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, TypeVar

from errproc import errors as _errors
from errproc.config.logging import ErrprocLogger, get_logger
from errproc.dispatcher import Errors

if TYPE_CHECKING:
    from errproc.dispatcher import Revocation
    from errproc.registry.handles import Processor

logger: ErrprocLogger = get_logger(__name__)

E = TypeVar("E", bound=BaseException)

_lock = Lock()
_default: Errors | None = None


def get_default() -> Errors:
    """Return the process-wide dispatcher, creating it on first use."""
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = Errors()
                logger.debug("Created default dispatcher")
    return _default


def set_default(errors: Errors) -> Errors:
    """Install ``errors`` as the default dispatcher.

    Args:
        errors (Errors): The new default instance.

    Returns:
        Errors: The previous default instance (created if there was none).
    """
    global _default
    with _lock:
        previous = _default if _default is not None else Errors()
        _default = errors
    return previous


def reset_default() -> None:
    """Remove every processor from the default dispatcher."""
    get_default().with_processors()


def debug() -> str:
    """Mirror of [`Errors.debug`][errproc.dispatcher.Errors.debug] on the default instance."""
    return get_default().debug()


def with_processors(*processors: Processor) -> None:
    """Mirror of `Errors.with_processors` on the default instance."""
    get_default().with_processors(*processors)


def use(*processors: Processor) -> Revocation:
    """Mirror of `Errors.use` on the default instance."""
    return get_default().use(*processors)


def process(err: E | None) -> E | None:
    """Mirror of `Errors.process` on the default instance."""
    return get_default().process(err)


def process_with(err: E | None, *processors: Processor) -> E | None:
    """Mirror of `Errors.process_with` on the default instance."""
    return get_default().process_with(err, *processors)


# Error-value helpers carry no dispatcher state.
new = _errors.new
errorf = _errors.errorf
with_message = _errors.with_message
with_stack = _errors.with_stack
wrap = _errors.wrap
wrapf = _errors.wrapf
cause = _errors.cause
format_error = _errors.format_error
