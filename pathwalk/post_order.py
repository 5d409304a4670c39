"""
Post-Order Traversal Engine
===========================

Depth-first, children-before-parent traversal. Unlike pre-order, only one
path is ever open at a time, so a single shared WalkBuilder replaces the
per-frame Walk snapshots; walks are materialized only when returned.

Pruning and removal are not supported: every descendant must be visited
before its parent is yielded, so skipping a subtree has no meaning here.

There is NO cycle detection: over a cyclic relation some call to next()
never returns.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List

from .adjacency import EdgeIterator, edges, singleton
from .errors import ExhaustedError, UnsupportedOperationError
from .walk import Walk

logger = logging.getLogger(__name__)


class PostOrderIterator:
    """Resumable post-order iterator over the walks reachable from a start vertex."""

    def __init__(self, start: Any, adjacency: Callable[[Any], Iterable[Walk]]):
        self._adjacency = adjacency
        # One pending edge sequence per open ancestor; the last is the top.
        self._pending: List[EdgeIterator] = [singleton(Walk.empty(start))]
        self._builder = Walk.builder(start)

    def __iter__(self) -> "PostOrderIterator":
        return self

    def has_next(self) -> bool:
        return not self._builder.is_empty() or self._pending[-1].has_next()

    def __next__(self) -> Walk:
        top = self._pending[-1]

        if not top.has_next():
            if self._builder.is_empty():
                logger.debug("Post-order traversal exhausted")
                raise ExhaustedError("Post-order traversal exhausted")
            # Every child of the builder's frontier has been yielded.
            self._pending.pop()
            result = self._builder.build()
            self._builder.pop()
            return result

        while True:
            hop = next(top)
            self._builder.push(hop)
            top = edges(self._adjacency(hop.to))
            if not top.has_next():
                result = self._builder.build()
                self._builder.pop()
                return result
            self._pending.append(top)

    def prune(self) -> None:
        raise UnsupportedOperationError("Post-order traversal does not support prune()")

    def remove(self) -> None:
        raise UnsupportedOperationError("Post-order traversal does not support remove()")
