"""
Breadth-First Traversal Engine
==============================

Level-by-level traversal: walks are produced in non-decreasing length,
ties broken by adjacency enumeration order. A deque holds the pending
walks, so memory grows with the width of the current frontier.

Pruning and removal are not supported.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Deque, Iterable

from .errors import ExhaustedError, UnsupportedOperationError
from .walk import Walk

logger = logging.getLogger(__name__)


class BreadthFirstIterator:
    """Resumable breadth-first iterator over the walks reachable from a start vertex."""

    def __init__(self, start: Any, adjacency: Callable[[Any], Iterable[Walk]]):
        self._adjacency = adjacency
        self._queue: Deque[Walk] = deque([Walk.empty(start)])

    def __iter__(self) -> "BreadthFirstIterator":
        return self

    def has_next(self) -> bool:
        return bool(self._queue)

    def __next__(self) -> Walk:
        if not self._queue:
            logger.debug("Breadth-first traversal exhausted")
            raise ExhaustedError("Breadth-first traversal exhausted")
        walk = self._queue[0]
        children = [walk.then(hop) for hop in self._adjacency(walk.to)]
        self._queue.popleft()
        self._queue.extend(children)
        return walk

    def prune(self) -> None:
        raise UnsupportedOperationError("Breadth-first traversal does not support prune()")

    def remove(self) -> None:
        raise UnsupportedOperationError("Breadth-first traversal does not support remove()")
