# topmark:header:start
#
#   project      : ErrProc
#   file         : test_introspection.py
#   file_relpath : tests/utils/test_introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for callable display names."""

from __future__ import annotations

from functools import partial

from errproc.builtins import ErrorCollector
from errproc.utils.introspection import callable_name


def _hook(err: BaseException) -> None:
    """Module-level processor."""


class _Hooks:
    def on_error(self, err: BaseException) -> None:
        """Bound-method processor."""


def test_function_name() -> None:
    """Functions resolve to module.qualname."""
    assert callable_name(_hook) == f"{__name__}._hook"


def test_bound_method_and_instance() -> None:
    """Bound methods use their qualname; callable instances use their class."""
    assert callable_name(_Hooks().on_error) == f"{__name__}._Hooks.on_error"
    assert callable_name(ErrorCollector()) == "errproc.builtins.ErrorCollector"


def test_partial_and_lambda() -> None:
    """Partials describe the wrapped function; lambdas keep their local qualname."""
    assert callable_name(partial(_hook)) == f"partial({__name__}._hook)"
    name = callable_name(lambda err: None)
    assert name.startswith(f"{__name__}.test_partial_and_lambda.")
    assert name.endswith("<lambda>")
