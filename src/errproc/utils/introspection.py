# topmark:header:start
#
#   project      : ErrProc
#   file         : introspection.py
#   file_relpath : src/errproc/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display names for callables."""

from __future__ import annotations

from functools import partial
from inspect import getmodule
from typing import Any


def callable_name(obj: Any) -> str:
    """Return a ``module.qualname`` name for any callable.

    Handles functions, bound methods, callable instances, and partials. Falls
    back to the callable's class name when needed, and uses ``inspect.getmodule``
    as a last resort to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"package.module.QualifiedName"`` or ``"QualifiedName"``
        if the module cannot be resolved.
    """
    if isinstance(obj, partial):
        return f"partial({callable_name(obj.func)})"

    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        # Callable instance: describe its class.
        cls = type(obj)
        call_name = cls.__qualname__
        mod_name = cls.__module__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"{mod_name}.{call_name}" if mod_name else call_name
