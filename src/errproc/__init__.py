# topmark:header:start
#
#   project      : ErrProc
#   file         : __init__.py
#   file_relpath : src/errproc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ErrProc package.

ErrProc decouples "an error occurred" from "what happens when an error
occurs". Processors (logging, alerting, metrics hooks) are registered on a
dispatcher and run whenever an error passes through `process()`:

```python
import errproc

revoke = errproc.use(errproc.builtins.log_error)
err = errproc.process(errproc.wrap(exc, "syncing inventory"))
revoke()
```

Module-level functions act on a process-wide default
[`Errors`][errproc.dispatcher.Errors] instance; create your own `Errors` for an
isolated set of processors.
"""

from __future__ import annotations

from . import builtins, errors
from .config import ErrprocConfig
from .constants import ERRPROC_VERSION
from .default import (
    cause,
    debug,
    errorf,
    format_error,
    get_default,
    new,
    process,
    process_with,
    reset_default,
    set_default,
    use,
    with_message,
    with_processors,
    with_stack,
    wrap,
    wrapf,
)
from .dispatcher import Errors, Revocation
from .errors import (
    ErrprocConfigError,
    ErrprocError,
    FundamentalError,
    MessageError,
    ProcessorImportError,
    StackError,
)
from .registry import Processor, ProcessorHandle, ProcessorRegistry

__version__: str = ERRPROC_VERSION

__all__ = [
    # Dispatcher
    "Errors",
    "Revocation",
    "Processor",
    "ProcessorHandle",
    "ProcessorRegistry",
    "ErrprocConfig",
    # Default instance
    "get_default",
    "set_default",
    "reset_default",
    "debug",
    "with_processors",
    "use",
    "process",
    "process_with",
    # Error values
    "new",
    "errorf",
    "with_message",
    "with_stack",
    "wrap",
    "wrapf",
    "cause",
    "format_error",
    "ErrprocError",
    "FundamentalError",
    "MessageError",
    "StackError",
    "ErrprocConfigError",
    "ProcessorImportError",
    # Submodules
    "builtins",
    "errors",
]
