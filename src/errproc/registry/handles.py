# topmark:header:start
#
#   project      : ErrProc
#   file         : handles.py
#   file_relpath : src/errproc/registry/handles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registration handles for processors.

A [`ProcessorHandle`][errproc.registry.handles.ProcessorHandle] is the token a
registry stores for each registration. Handles compare and hash by identity, so
registering the same callable twice yields two independent entries, each of
which can be removed on its own.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from errproc.utils.introspection import callable_name

if TYPE_CHECKING:
    from collections.abc import Iterable

Processor = Callable[[BaseException], None]
"""A side-effecting callback invoked with an error value."""

_ids = itertools.count(1)


@dataclass(frozen=True, eq=False)
class ProcessorHandle:
    """Identity-compared registration token wrapping a processor.

    Attributes:
        processor: The registered callable.
        name: Display name used by diagnostics only.
        id: Process-unique registration number.
    """

    processor: Processor
    name: str = ""
    id: int = field(default_factory=lambda: next(_ids))

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", callable_name(self.processor))

    def __repr__(self) -> str:
        return f"ProcessorHandle(id={self.id}, name={self.name!r})"


def make_handles(processors: Iterable[Processor]) -> tuple[ProcessorHandle, ...]:
    """Wrap each processor in a fresh handle (no de-duplication)."""
    return tuple(ProcessorHandle(p) for p in processors)
