# topmark:header:start
#
#   project      : ErrProc
#   file         : dispatcher.py
#   file_relpath : src/errproc/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error dispatcher.

[`Errors`][errproc.dispatcher.Errors] owns one
[`ProcessorRegistry`][errproc.registry.ProcessorRegistry] and runs the
registered processors whenever an error is passed to `process()`:

```python
from errproc import Errors

errors = Errors()
revoke = errors.use(log_error, send_alert)
try:
    ...
except OSError as exc:
    raise errors.process(errors.wrap(exc, "loading settings")) from exc
finally:
    revoke()
```

Processors run synchronously on the calling thread, one after the other, in
registry order (which is not meaningful). Exceptions raised by a processor are
not caught: they propagate out of `process()` and the remaining processors of
that call do not run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from errproc import errors as _errors
from errproc.config.logging import ErrprocLogger, get_logger
from errproc.registry.handles import make_handles
from errproc.registry.processors import ProcessorRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from errproc.config.model import ErrprocConfig
    from errproc.registry.handles import Processor, ProcessorHandle

logger: ErrprocLogger = get_logger(__name__)

E = TypeVar("E", bound=BaseException)


class Revocation:
    """Removes exactly the handles added by one `Errors.use()` call.

    Revoking twice is a no-op, as is revoking after `Errors.with_processors()`
    has replaced the set. Instances are callable and can be used as context
    managers:

    ```python
    with errors.use(collector):
        do_work()
    ```
    """

    __slots__ = ("_registry", "_handles")

    def __init__(self, registry: ProcessorRegistry, handles: tuple[ProcessorHandle, ...]) -> None:
        self._registry = registry
        self._handles = handles

    @property
    def handles(self) -> tuple[ProcessorHandle, ...]:
        """The handles this revocation removes."""
        return self._handles

    def revoke(self) -> None:
        """Remove the handles from the registry; absent handles are ignored."""
        self._registry.remove(*self._handles)

    def __call__(self) -> None:
        self.revoke()

    def __enter__(self) -> Revocation:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.revoke()

    def __repr__(self) -> str:
        return f"Revocation(handles={list(self._handles)!r})"


class Errors:
    """Dispatcher combining a processor registry with error helpers.

    Args:
        *processors (Processor): Initial processors. Their order has no effect
            on the order in which they run.
    """

    def __init__(self, *processors: Processor) -> None:
        self._registry = ProcessorRegistry()
        self._registry.replace_all(*processors)

    @classmethod
    def from_config(cls, config: ErrprocConfig) -> Errors:
        """Create a dispatcher whose processors are imported from ``config``.

        When ``config.log_level`` is set, it becomes the level of the `errproc`
        package logger.

        Raises:
            ErrprocConfigError: If a processor reference or the log level is invalid.
        """
        level = config.resolve_log_level()
        if level is not None:
            get_logger("errproc").setLevel(level)
        processors = config.resolve_processors()
        logger.debug("Creating dispatcher with %d configured processor(s)", len(processors))
        return cls(*processors)

    @property
    def registry(self) -> ProcessorRegistry:
        """The registry owned by this dispatcher."""
        return self._registry

    def debug(self) -> str:
        """Return one line per registered processor with its display name."""
        return "".join(f"{h.name}\n" for h in self._registry.snapshot())

    def with_processors(self, *processors: Processor) -> None:
        """Replace the current set of processors with a new set."""
        self._registry.replace_all(*processors)

    def use(self, *processors: Processor) -> Revocation:
        """Add processors to the current set.

        Returns:
            Revocation: Removes exactly the processors added by this call.
        """
        handles = make_handles(processors)
        self._registry.add(*handles)
        return Revocation(self._registry, handles)

    def process(self, err: E | None) -> E | None:
        """Pass ``err`` through every registered processor.

        Args:
            err (E | None): The error; None is returned immediately without
                consulting the registry.

        Returns:
            E | None: ``err``, unchanged.
        """
        if err is None:
            return None
        return self._run(err, self._registry.get())

    def process_with(self, err: E | None, *processors: Processor) -> E | None:
        """Pass ``err`` through ``processors`` only, ignoring the registry.

        Returns:
            E | None: ``err``, unchanged (None if ``err`` is None).
        """
        if err is None:
            return None
        return self._run(err, processors)

    @staticmethod
    def _run(err: E, processors: Sequence[Processor]) -> E:
        logger.trace("dispatching %s to %d processor(s)", type(err).__name__, len(processors))
        for p in processors:
            p(err)
        return err

    # Error-value helpers (delegate to errproc.errors).

    new = staticmethod(_errors.new)
    errorf = staticmethod(_errors.errorf)
    with_message = staticmethod(_errors.with_message)
    with_stack = staticmethod(_errors.with_stack)
    wrap = staticmethod(_errors.wrap)
    wrapf = staticmethod(_errors.wrapf)
    cause = staticmethod(_errors.cause)
    format_error = staticmethod(_errors.format_error)

    def __repr__(self) -> str:
        return f"Errors(processors={len(self._registry)})"
