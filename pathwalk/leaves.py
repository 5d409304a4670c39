"""
Leaf Traversal Engine
=====================

Yields only the walks whose end vertex has no outgoing edges. Internally
this drives a pre-order traversal and filters out every walk whose
frontier still has edges to follow, so leaves come out in pre-order.

To answer ``has_next()`` the engine must find the next leaf before it is
asked for; it buffers at most one such walk.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .errors import ExhaustedError, UnsupportedOperationError
from .pre_order import PreOrderIterator
from .walk import Walk


class LeafIterator:
    """Resumable iterator over the walks to reachable leaves."""

    def __init__(self, start: Any, adjacency: Callable[[Any], Iterable[Walk]]):
        self._delegate = PreOrderIterator(start, adjacency)
        self._pending: Optional[Walk] = None

    def __iter__(self) -> "LeafIterator":
        return self

    def has_next(self) -> bool:
        if self._pending is not None:
            return True
        while self._delegate.has_next():
            walk = next(self._delegate)
            if not self._delegate.frontier_has_edges():
                self._pending = walk
                return True
        return False

    def __next__(self) -> Walk:
        if not self.has_next():
            raise ExhaustedError("Leaf traversal exhausted")
        walk, self._pending = self._pending, None
        return walk

    def prune(self) -> None:
        raise UnsupportedOperationError("Leaf traversal does not support prune()")

    def remove(self) -> None:
        raise UnsupportedOperationError("Leaf traversal does not support remove()")
