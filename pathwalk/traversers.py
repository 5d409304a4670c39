"""
Traversal Entry Points
======================

Factory functions returning lazy, re-iterable views over the walks
reachable from a start vertex. Each call to ``iter()`` on a view starts a
fresh traversal with its own engine; the engines themselves are
single-pass iterators.

All four traversals have NO cycle detection. Over a cyclic relation the
depth-first orders never finish, and breadth-first yields forever.

USAGE
-----
    >>> graph = GraphAdjacency.from_pairs(
    ...     [("R", 0, "A"), ("R", 1, "B"), ("A", 0, "C")])
    >>> [walk.to for walk in pre_order("R", graph)]
    ['R', 'A', 'C', 'B']
    >>> [walk.to for walk in post_order("R", graph)]
    ['C', 'A', 'B', 'R']
    >>> [walk.to for walk in breadth_first("R", graph)]
    ['R', 'A', 'B', 'C']
    >>> [walk.to for walk in leaves("R", graph)]
    ['C', 'B']

Pruning while iterating pre-order:
    >>> it = iter(pre_order("R", graph))
    >>> for walk in it:
    ...     if walk.to == "A":
    ...         it.prune()
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from .breadth_first import BreadthFirstIterator
from .leaves import LeafIterator
from .post_order import PostOrderIterator
from .pre_order import PreOrderIterator
from .walk import Walk


IteratorT = TypeVar("IteratorT")


class Traversal(Generic[IteratorT]):
    """Re-iterable view creating a fresh engine per iteration."""

    def __init__(
        self,
        engine: Callable[[Any, Callable[[Any], Iterable[Walk]]], IteratorT],
        start: Any,
        adjacency: Callable[[Any], Iterable[Walk]]
    ):
        if adjacency is None:
            raise TypeError("adjacency must not be None")
        self._engine = engine
        self._start = start
        self._adjacency = adjacency

    @property
    def start(self) -> Any:
        return self._start

    def __iter__(self) -> IteratorT:
        return self._engine(self._start, self._adjacency)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._engine.__name__}, start={self._start!r})"


def pre_order(start: Any, adjacency: Callable[[Any], Iterable[Walk]]) -> Traversal[PreOrderIterator]:
    """
    Return a pre-order traversal with NO cycle detection.

    Iterators support ``prune()`` and ``remove()`` directly after each
    ``next()``.

    Args:
        start: Root vertex
        adjacency: Callable returning the one-hop walks leaving a vertex

    Returns:
        Re-iterable view of walks from start, parents before children
    """
    return Traversal(PreOrderIterator, start, adjacency)


def post_order(start: Any, adjacency: Callable[[Any], Iterable[Walk]]) -> Traversal[PostOrderIterator]:
    """
    Return a post-order traversal with NO cycle detection.

    If a cycle is present, some call to ``next()`` will loop until memory
    runs out.
    """
    return Traversal(PostOrderIterator, start, adjacency)


def breadth_first(start: Any, adjacency: Callable[[Any], Iterable[Walk]]) -> Traversal[BreadthFirstIterator]:
    """Return a breadth-first traversal with NO cycle detection."""
    return Traversal(BreadthFirstIterator, start, adjacency)


def leaves(start: Any, adjacency: Callable[[Any], Iterable[Walk]]) -> Traversal[LeafIterator]:
    """
    Return a traversal of the walks to reachable leaves with NO cycle detection.

    A leaf is a vertex whose adjacency yields nothing. If the start vertex
    is itself a leaf, its zero-hop walk is the only result.
    """
    return Traversal(LeafIterator, start, adjacency)
