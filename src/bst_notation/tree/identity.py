"""Node identity allocation.

Ids are opaque strings issued from a monotonic counter. They identify a
node's structural position across edits, independently of its value, so
renderers can track "the same node" between snapshots.
"""

from __future__ import annotations

import itertools

__all__ = ["IdAllocator", "new_id"]


class IdAllocator:
    """Issues process-unique node ids of the form ``"<prefix>-<n>"``.

    Example::

        alloc = IdAllocator(prefix="n")
        alloc.new_id()   # "n-1"
        alloc.new_id()   # "n-2"
    """

    def __init__(self, prefix: str = "node") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def new_id(self) -> str:
        """Return an id never returned before by this allocator."""
        return f"{self._prefix}-{next(self._counter)}"


_default_allocator = IdAllocator()


def new_id() -> str:
    """Return a fresh id from the process-wide default allocator."""
    return _default_allocator.new_id()
