"""
Adjacency Abstraction
=====================

The single extension point of pathwalk: a callable mapping a vertex to a
lazy sequence of one-hop Walks leaving it. Any callable with that shape is
an adjacency; nothing needs to be subclassed.

EDGE ITERATORS
--------------
Traversal engines need to ask "is there another edge?" before consuming
it, and pre-order removal needs to delete the edge it just consumed.
``edges()`` normalizes whatever an adjacency returns into an EdgeIterator:

- an EdgeIterator is used as-is;
- any other iterable is wrapped in a PeekingEdgeIterator, which answers
  ``has_next()`` with one element of lookahead and has no removal
  capability.

SequenceEdgeIterator walks a mutable sequence of Steps by index, so
lookahead never disturbs which element ``remove()`` deletes.

PROVIDED ADJACENCIES
--------------------
- GraphAdjacency: dictionary of vertex -> list of Steps, supports removal.
- from_children(): adapts a plain vertex -> children function.

Example:
    >>> graph = GraphAdjacency.from_pairs([("R", "left", "A"), ("R", "right", "B")])
    >>> [hop.to for hop in edges(graph("R"))]
    ['A', 'B']
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    MutableSequence,
    Optional,
    Protocol,
)

from .errors import ExhaustedError, IllegalStateError
from .walk import Step, Walk


class Adjacency(Protocol):
    """Callable returning the one-hop walks leaving a vertex."""

    def __call__(self, vertex: Any) -> Iterable[Walk]:
        ...


class EdgeIterator:
    """
    Lazy sequence of one-hop walks with lookahead and optional removal.

    Subclasses implement ``has_next`` and ``__next__``; ``remove`` defaults
    to reporting that the backing store cannot delete edges.
    """

    def has_next(self) -> bool:
        raise NotImplementedError

    def __next__(self) -> Walk:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Walk]:
        return self

    def remove(self) -> None:
        """
        Delete the last walk returned by ``__next__`` from the backing store.

        Raises:
            IllegalStateError: If the backing store does not support removal
        """
        raise IllegalStateError(
            "Edge sequence does not support removal",
            sequence=type(self).__name__
        )


class PeekingEdgeIterator(EdgeIterator):
    """Wraps an arbitrary iterable, looking ahead one element."""

    _MISSING = object()

    def __init__(self, iterable: Iterable[Walk]):
        self._source = iter(iterable)
        self._peeked: Any = self._MISSING

    def has_next(self) -> bool:
        if self._peeked is self._MISSING:
            try:
                self._peeked = next(self._source)
            except StopIteration:
                return False
        return True

    def __next__(self) -> Walk:
        if not self.has_next():
            raise ExhaustedError("No more edges")
        walk = self._peeked
        self._peeked = self._MISSING
        return walk


class SequenceEdgeIterator(EdgeIterator):
    """
    Index-based iterator over a live, mutable sequence of Steps.

    Steps appended to the sequence during iteration are picked up;
    ``remove`` deletes the step most recently returned.
    """

    def __init__(self, from_: Any, steps: MutableSequence[Step]):
        self._from = from_
        self._steps = steps
        self._index = 0
        self._can_remove = False

    def has_next(self) -> bool:
        return self._index < len(self._steps)

    def __next__(self) -> Walk:
        if not self.has_next():
            self._can_remove = False
            raise ExhaustedError("No more edges", vertex=self._from)
        step = self._steps[self._index]
        self._index += 1
        self._can_remove = True
        return Walk(self._from, (step,))

    def remove(self) -> None:
        if not self._can_remove:
            raise IllegalStateError(
                "remove() requires a preceding call to next()",
                vertex=self._from
            )
        del self._steps[self._index - 1]
        self._index -= 1
        self._can_remove = False


class _SingletonEdgeIterator(EdgeIterator):
    """Yields one fixed walk; used to seed the depth-first engines."""

    def __init__(self, walk: Walk):
        self._walk: Optional[Walk] = walk

    def has_next(self) -> bool:
        return self._walk is not None

    def __next__(self) -> Walk:
        if self._walk is None:
            raise ExhaustedError("No more edges")
        walk, self._walk = self._walk, None
        return walk


def edges(iterable: Iterable[Walk]) -> EdgeIterator:
    """
    Normalize an adjacency result into an EdgeIterator.

    Args:
        iterable: Whatever the adjacency returned for a vertex

    Returns:
        The iterable itself if it is already an EdgeIterator, otherwise a
        PeekingEdgeIterator over it
    """
    if isinstance(iterable, EdgeIterator):
        return iterable
    return PeekingEdgeIterator(iterable)


def singleton(walk: Walk) -> EdgeIterator:
    """Return an EdgeIterator yielding exactly walk."""
    return _SingletonEdgeIterator(walk)


class GraphAdjacency:
    """
    Mutable adjacency backed by a dictionary of edge lists.

    Each vertex maps to a list of Steps in insertion order. Calling the
    adjacency returns a SequenceEdgeIterator over the live list, so
    ``remove()`` during a pre-order traversal deletes the edge here.

    Vertices must be hashable.
    """

    def __init__(self, edges: Optional[Dict[Any, List[Step]]] = None):
        """
        Initialize adjacency.

        Args:
            edges: Optional initial mapping of vertex -> list of Steps.
                The lists are used directly, not copied.
        """
        self._edges: Dict[Any, List[Step]] = edges if edges is not None else {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple]) -> "GraphAdjacency":
        """
        Build an adjacency from (from, over, to) triples.

        Example:
            >>> graph = GraphAdjacency.from_pairs([("R", 0, "A"), ("A", 0, "C")])
            >>> graph.edges_from("A")
            [Step(over=0, to='C')]
        """
        graph = cls()
        for from_, over, to in pairs:
            graph.add_edge(from_, over, to)
        return graph

    def add_edge(self, from_: Any, over: Any, to: Any) -> "GraphAdjacency":
        """
        Append an edge leaving from_.

        Returns:
            Self for chaining
        """
        self._edges.setdefault(from_, []).append(Step(over, to))
        return self

    def remove_edge(self, from_: Any, over: Any, to: Any) -> bool:
        """
        Remove the first matching edge.

        Returns:
            True if an edge was removed, False if none matched
        """
        steps = self._edges.get(from_)
        if not steps:
            return False
        try:
            steps.remove(Step(over, to))
        except ValueError:
            return False
        return True

    def edges_from(self, vertex: Any) -> List[Step]:
        """Return a copy of the Steps leaving vertex."""
        return list(self._edges.get(vertex, ()))

    def vertices(self) -> List[Any]:
        """Return every vertex that has been given outgoing edges."""
        return list(self._edges)

    def __call__(self, vertex: Any) -> SequenceEdgeIterator:
        steps = self._edges.get(vertex)
        return SequenceEdgeIterator(vertex, steps if steps is not None else [])


def from_children(
    children: Callable[[Any], Iterable[Any]],
    label: Optional[Callable[[Any, Any, int], Any]] = None
) -> Callable[[Any], Iterator[Walk]]:
    """
    Adapt a vertex -> children function into an adjacency.

    Args:
        children: Function returning the child vertices of a vertex
        label: Optional function (parent, child, index) -> edge label.
            Defaults to the child's position index.

    Returns:
        Adjacency yielding one-hop walks to each child, lazily
    """
    def adjacency(vertex: Any) -> Iterator[Walk]:
        for index, child in enumerate(children(vertex)):
            over = index if label is None else label(vertex, child, index)
            yield Walk.single(vertex, over, child)

    return adjacency
