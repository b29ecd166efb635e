# topmark:header:start
#
#   project      : ErrProc
#   file         : errors.py
#   file_relpath : src/errproc/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error values with call-stack annotation, message wrapping and cause unwrapping.

Errors are plain exception instances; they are *returned*, not raised, by the
constructors in this module, so they can be passed to
[`Errors.process`][errproc.dispatcher.Errors.process] or raised by the caller.
``None`` is the "no error" value: every wrapping helper returns ``None`` when
given ``None``.

Wrapping builds a chain::

    base = new("disk full")                 # FundamentalError (message + stack)
    err = wrap(base, "saving report")       # StackError(MessageError(base))
    str(err)                                # "saving report: disk full"
    cause(err) is base                      # True

Each wrapper also sets ``__cause__`` so a raised wrapper prints the full chain
in a standard Python traceback.
"""

from __future__ import annotations

import sys
import traceback
from traceback import StackSummary
from typing import TYPE_CHECKING, Final, overload

if TYPE_CHECKING:
    from types import FrameType

__all__: list[str] = [
    "ErrprocError",
    "FundamentalError",
    "MessageError",
    "StackError",
    "ErrprocConfigError",
    "ProcessorImportError",
    "new",
    "errorf",
    "with_message",
    "with_stack",
    "wrap",
    "wrapf",
    "cause",
    "format_error",
]

# Frames from these modules are never part of a captured stack: the stack
# starts at the first frame outside the package facade.
_FACADE_MODULES: Final[frozenset[str]] = frozenset(
    {"errproc", "errproc.errors", "errproc.dispatcher", "errproc.default"}
)


class ErrprocError(Exception):
    """Base class for all errors created or raised by ErrProc.

    Attributes:
        stack: Call stack recorded when the error was created, or ``None``.
    """

    stack: StackSummary | None = None


class FundamentalError(ErrprocError):
    """An error with a message and the call stack of its creation."""

    def __init__(self, message: str, stack: StackSummary | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.stack = stack

    def __str__(self) -> str:
        return self.message


class MessageError(ErrprocError):
    """Annotates an existing error with a message prefix (no stack)."""

    def __init__(self, cause: BaseException, message: str) -> None:
        super().__init__(message)
        self.message: str = message
        self.cause: BaseException = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}"


class StackError(ErrprocError):
    """Annotates an existing error with the call stack at the wrapping site."""

    def __init__(self, cause: BaseException, stack: StackSummary | None = None) -> None:
        super().__init__(str(cause))
        self.cause: BaseException = cause
        self.stack = stack
        self.__cause__ = cause

    def __str__(self) -> str:
        return str(self.cause)


class ErrprocConfigError(ErrprocError, ValueError):
    """Invalid ErrProc configuration (bad processor reference or value type)."""


class ProcessorImportError(ErrprocConfigError):
    """A configured processor reference could not be imported."""


def _callers() -> StackSummary:
    """Return the call stack starting at the first frame outside the facade modules."""
    start: FrameType = sys._getframe(1)  # pyright: ignore[reportPrivateUsage]
    frame: FrameType | None = start
    while frame is not None and frame.f_globals.get("__name__") in _FACADE_MODULES:
        frame = frame.f_back
    # Only facade frames on the stack: keep them rather than recording this function.
    return traceback.extract_stack(frame if frame is not None else start)


def _sprintf(format: str, args: tuple[object, ...]) -> str:
    return format % args if args else format


def new(message: str) -> FundamentalError:
    """Return an error with the given message and the caller's stack.

    Args:
        message (str): The error message.

    Returns:
        FundamentalError: The new error.
    """
    return FundamentalError(message, _callers())


def errorf(format: str, *args: object) -> FundamentalError:
    """Return an error whose message is ``format % args``, with the caller's stack.

    Args:
        format (str): ``%``-style format string. Used verbatim when no args are given.
        *args (object): Format arguments.

    Returns:
        FundamentalError: The new error.
    """
    return FundamentalError(_sprintf(format, args), _callers())


@overload
def with_message(err: None, message: str) -> None: ...
@overload
def with_message(err: BaseException, message: str) -> MessageError: ...
def with_message(err: BaseException | None, message: str) -> MessageError | None:
    """Annotate ``err`` with ``message``; returns None if ``err`` is None."""
    if err is None:
        return None
    return MessageError(err, message)


@overload
def with_stack(err: None) -> None: ...
@overload
def with_stack(err: BaseException) -> StackError: ...
def with_stack(err: BaseException | None) -> StackError | None:
    """Annotate ``err`` with the caller's stack; returns None if ``err`` is None."""
    if err is None:
        return None
    return StackError(err, _callers())


@overload
def wrap(err: None, message: str) -> None: ...
@overload
def wrap(err: BaseException, message: str) -> StackError: ...
def wrap(err: BaseException | None, message: str) -> StackError | None:
    """Annotate ``err`` with a message and the caller's stack.

    Args:
        err (BaseException | None): The error to wrap.
        message (str): Message prefix.

    Returns:
        StackError | None: The wrapped error, or None if ``err`` is None.
    """
    if err is None:
        return None
    return StackError(MessageError(err, message), _callers())


@overload
def wrapf(err: None, format: str, *args: object) -> None: ...
@overload
def wrapf(err: BaseException, format: str, *args: object) -> StackError: ...
def wrapf(err: BaseException | None, format: str, *args: object) -> StackError | None:
    """Like [`wrap`][errproc.errors.wrap] with a ``%``-formatted message."""
    if err is None:
        return None
    return StackError(MessageError(err, _sprintf(format, args)), _callers())


@overload
def cause(err: None) -> None: ...
@overload
def cause(err: BaseException) -> BaseException: ...
def cause(err: BaseException | None) -> BaseException | None:
    """Return the underlying cause of ``err``.

    Unwraps [`MessageError`][errproc.errors.MessageError] and
    [`StackError`][errproc.errors.StackError] layers until reaching an error that
    is not a wrapper. An error that is not a wrapper is returned unchanged.

    Args:
        err (BaseException | None): The error to unwrap.

    Returns:
        BaseException | None: The root cause, or None if ``err`` is None.
    """
    while isinstance(err, (MessageError, StackError)):
        err = err.cause
    return err


def _format_stack(stack: StackSummary) -> list[str]:
    return "".join(stack.format()).rstrip("\n").splitlines()


def _render(err: BaseException, lines: list[str]) -> None:
    if isinstance(err, MessageError):
        _render(err.cause, lines)
        lines.append(err.message)
    elif isinstance(err, StackError):
        _render(err.cause, lines)
        if err.stack is not None:
            lines.extend(_format_stack(err.stack))
    elif isinstance(err, FundamentalError):
        lines.append(err.message)
        if err.stack is not None:
            lines.extend(_format_stack(err.stack))
    else:
        lines.extend(traceback.format_exception_only(type(err), err)[-1].rstrip("\n").splitlines())
        if err.__traceback__ is not None:
            lines.extend("".join(traceback.format_tb(err.__traceback__)).rstrip("\n").splitlines())


def format_error(err: BaseException | None, verbose: bool = False) -> str:
    """Render an error for logs.

    Args:
        err (BaseException | None): The error to render.
        verbose (bool): If True, include every message and call stack along the
            wrapper chain, innermost first.

    Returns:
        str: ``str(err)`` when not verbose, the detailed rendering otherwise, and an
            empty string for None.
    """
    if err is None:
        return ""
    if not verbose:
        return str(err)
    lines: list[str] = []
    _render(err, lines)
    return "\n".join(lines)
