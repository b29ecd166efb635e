# topmark:header:start
#
#   project      : ErrProc
#   file         : processors.py
#   file_relpath : src/errproc/registry/processors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Thread-safe processor registry.

The registry holds an unordered collection of
[`ProcessorHandle`][errproc.registry.handles.ProcessorHandle] objects.

Notes:
    * All mutations (`replace_all()`, `add()`, `remove()`) run under one `RLock`.
    * Readers (`get()`, `snapshot()`) hold the lock only while copying the handle
      list; callers iterate the returned copy without any lock, so processors
      never run while the registry is locked.
    * `replace_all()` builds the new list before taking the lock and swaps it in
      with a single assignment: a reader sees either the old or the new set.
    * Registration order carries no meaning. `remove()` swaps the removed entry
      with the last one, so order changes after removals.
"""

from __future__ import annotations

from bisect import insort
from threading import RLock
from typing import TYPE_CHECKING

from errproc.config.logging import ErrprocLogger, get_logger
from errproc.registry.handles import ProcessorHandle, make_handles

if TYPE_CHECKING:
    from errproc.registry.handles import Processor

logger: ErrprocLogger = get_logger(__name__)


class ProcessorRegistry:
    """Concurrent-safe set of processor handles."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._handles: list[ProcessorHandle] = []

    def replace_all(self, *processors: Processor) -> tuple[ProcessorHandle, ...]:
        """Discard the current set and install one fresh handle per processor.

        Args:
            *processors (Processor): The new processors. Duplicates are kept as
                independent entries.

        Returns:
            tuple[ProcessorHandle, ...]: The handles created for ``processors``.
        """
        handles = make_handles(processors)
        new_set = list(handles)
        with self._lock:
            self._handles = new_set
        logger.trace("registry %#x: replaced with %d processor(s)", id(self), len(handles))
        return handles

    def add(self, *handles: ProcessorHandle) -> None:
        """Append handles to the live set.

        Args:
            *handles (ProcessorHandle): Handles to register. Not de-duplicated.
        """
        if not handles:
            return
        with self._lock:
            self._handles.extend(handles)
            size = len(self._handles)
        logger.trace("registry %#x: added %d handle(s), size=%d", id(self), len(handles), size)

    def remove(self, *handles: ProcessorHandle) -> int:
        """Remove handles from the live set.

        Handles that are not registered are ignored. Each removal swaps the
        entry with the last element and truncates the list. A handle mentioned
        n times removes up to n of its occurrences.

        Args:
            *handles (ProcessorHandle): Handles to remove (compared by identity).

        Returns:
            int: Number of entries actually removed.
        """
        if not handles:
            return 0
        removed = 0
        with self._lock:
            entries = self._handles
            # Ascending positions per handle; the last item is the highest index.
            positions: dict[ProcessorHandle, list[int]] = {}
            for i, h in enumerate(entries):
                positions.setdefault(h, []).append(i)
            for handle in handles:
                slots = positions.get(handle)
                if not slots:
                    continue
                index = slots.pop()
                last_index = len(entries) - 1
                if index != last_index:
                    moved = entries[last_index]
                    entries[index] = moved
                    moved_slots = positions[moved]
                    moved_slots.pop()
                    insort(moved_slots, index)
                entries.pop()
                removed += 1
            size = len(entries)
        logger.trace("registry %#x: removed %d handle(s), size=%d", id(self), removed, size)
        return removed

    def get(self) -> list[Processor]:
        """Return an independent list of the registered processors.

        Returns:
            list[Processor]: Processors in current registry order; mutating the
                registry afterwards does not affect the returned list.
        """
        with self._lock:
            return [h.processor for h in self._handles]

    def snapshot(self) -> tuple[ProcessorHandle, ...]:
        """Return the registered handles, in the same order `get()` uses."""
        with self._lock:
            return tuple(self._handles)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def __repr__(self) -> str:
        return f"ProcessorRegistry(size={len(self)})"
