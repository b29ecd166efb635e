# topmark:header:start
#
#   project      : ErrProc
#   file         : __init__.py
#   file_relpath : src/errproc/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processor registry and registration handles.

Most users register processors through [`errproc.Errors`][errproc.Errors]
(`use()` / `with_processors()`). The registry is exposed for plugins and tests
that need direct handle management:

```python
from errproc.registry import ProcessorHandle, ProcessorRegistry

reg = ProcessorRegistry()
handle = ProcessorHandle(print)
reg.add(handle)
try:
    ...
finally:
    reg.remove(handle)
```
"""

from __future__ import annotations

from .handles import Processor, ProcessorHandle, make_handles
from .processors import ProcessorRegistry

__all__ = [
    "Processor",
    "ProcessorHandle",
    "ProcessorRegistry",
    "make_handles",
]
