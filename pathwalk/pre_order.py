"""
Pre-Order Traversal Engine
==========================

Depth-first, parent-before-children traversal that yields one Walk per
root-to-vertex path, with two control operations:

- prune(): skip the subtree below the walk just returned
- remove(): delete the edge that led to the walk just returned

Both are legal exactly once, immediately after a successful ``next()``.

STATE
-----
A PersistentStack of frames. Each frame pairs a pending EdgeIterator with
the immutable Walk leading to the vertex those edges leave. The stack is
seeded with a frame whose edges yield only the empty walk at the start
vertex, so the first walk produced is the zero-hop walk to the root.

Because the stack is persistent, pruning is a single O(1) pop and
``remove()`` can compute the popped stack first and commit it only after
the underlying edge deletion has succeeded.

There is NO cycle detection: over a cyclic relation the frame stack grows
without bound.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, NamedTuple

from .adjacency import EdgeIterator, edges, singleton
from .errors import ExhaustedError, IllegalStateError
from .stack import PersistentStack
from .walk import Walk

logger = logging.getLogger(__name__)


class Frame(NamedTuple):
    """Pending edges at a vertex plus the walk that reached it."""
    edges: EdgeIterator
    walk: Walk


class PreOrderIterator:
    """Resumable pre-order iterator over the walks reachable from a start vertex."""

    def __init__(self, start: Any, adjacency: Callable[[Any], Iterable[Walk]]):
        self._adjacency = adjacency
        root = Walk.empty(start)
        self._frames: PersistentStack[Frame] = PersistentStack.of(Frame(singleton(root), root))
        self._can_mutate = False

    def __iter__(self) -> "PreOrderIterator":
        return self

    def has_next(self) -> bool:
        for frame in self._frames:
            if frame.edges.has_next():
                return True
        return False

    def __next__(self) -> Walk:
        self._can_mutate = False
        frames = self._frames
        while frames and not frames.peek().edges.has_next():
            frames = frames.pop()
        self._frames = frames
        if not frames:
            logger.debug("Pre-order traversal exhausted")
            raise ExhaustedError("Pre-order traversal exhausted")

        top = frames.peek()
        walk = top.walk.then(next(top.edges))
        self._frames = frames.push(Frame(edges(self._adjacency(walk.to)), walk))
        self._can_mutate = True
        return walk

    def prune(self) -> None:
        """
        Skip descent below the walk most recently returned.

        Raises:
            IllegalStateError: If not called directly after next()
        """
        self._check_can_mutate("prune")
        pruned = self._frames.peek().walk
        self._frames = self._frames.pop()
        self._can_mutate = False
        logger.debug("Pruned subtree below %r", pruned.to)

    def remove(self) -> None:
        """
        Delete the edge that produced the walk most recently returned.

        The subtree below it is skipped, as with prune(). If the backing
        edge sequence refuses the deletion, the traversal state is left
        exactly as it was and remove() or prune() may still be called.

        Raises:
            IllegalStateError: If not called directly after next(), or if
                the edge sequence does not support removal
        """
        self._check_can_mutate("remove")
        popped = self._frames.pop()
        popped.peek().edges.remove()
        removed = self._frames.peek().walk
        self._frames = popped
        self._can_mutate = False
        logger.debug("Removed edge %r -> %r", removed.steps[-1].over, removed.to)

    def _check_can_mutate(self, operation: str) -> None:
        if not self._can_mutate:
            raise IllegalStateError(
                f"{operation}() is only legal directly after next()",
                operation=operation
            )

    def frontier_has_edges(self) -> bool:
        """
        True if the vertex reached by the walk most recently returned has
        pending outgoing edges.

        Raises:
            IllegalStateError: If not called directly after next()
        """
        self._check_can_mutate("frontier_has_edges")
        return self._frames.peek().edges.has_next()
