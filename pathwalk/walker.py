"""
Fluent Walker
=============

A fluent facade over the four traversal engines, with the visitor pattern
for folding results and an ``explain()`` plan for introspection.

TRAVERSAL STRATEGIES
--------------------
- PRE_ORDER: parents before children. The only strategy whose iterators
  support prune() and remove().
- POST_ORDER: children before parents.
- BREADTH_FIRST: level by level, shortest walks first.
- LEAVES: only walks to vertices without outgoing edges.

VISITOR PATTERN
---------------
The visitor receives (walk, accumulator) and returns the updated
accumulator, so traversal results can be collected without external
mutable state.

USAGE EXAMPLES
--------------

Collect every reachable vertex, depth-first:
    >>> Walker(graph).starting_from("R").pre_order() \\
    ...     .visit(lambda walk, acc: acc + [walk.to], initial=[]).run()
    ['R', 'A', 'C', 'B']

Count leaves deeper than one hop:
    >>> Walker(graph).starting_from("R").leaves() \\
    ...     .filter(lambda walk: len(walk) > 1) \\
    ...     .visit(lambda walk, acc: acc + 1, initial=0).run()
    1

There is NO cycle detection in any strategy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)

from .breadth_first import BreadthFirstIterator
from .errors import IllegalStateError
from .leaves import LeafIterator
from .post_order import PostOrderIterator
from .pre_order import PreOrderIterator
from .walk import Walk


T = TypeVar("T")


class TraversalStrategy(Enum):
    """Order in which a Walker enumerates walks."""
    PRE_ORDER = auto()
    POST_ORDER = auto()
    BREADTH_FIRST = auto()
    LEAVES = auto()


_ENGINES = {
    TraversalStrategy.PRE_ORDER: PreOrderIterator,
    TraversalStrategy.POST_ORDER: PostOrderIterator,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstIterator,
    TraversalStrategy.LEAVES: LeafIterator,
}


@dataclass
class WalkerPlan:
    """
    Description of what a Walker will do, without running it.

    Attributes:
        strategy: Name of the traversal strategy
        start: Start vertex (None if not configured)
        has_start: Whether a start vertex was configured
        has_filter: Whether a walk filter is configured
        has_visitor: Whether a visitor function is configured
        supports_pruning: Whether iterators support prune() and remove()
    """
    strategy: str
    start: Any = None
    has_start: bool = False
    has_filter: bool = False
    has_visitor: bool = False
    supports_pruning: bool = False

    def __str__(self) -> str:
        """Human-readable visualization of the walker plan."""
        lines = ["Walker Plan", "=" * 40]
        lines.append(f"Strategy: {self.strategy}")
        if self.has_start:
            lines.append(f"Start: {self.start!r}")
        else:
            lines.append("Start: Not configured")
        lines.append(f"Has filter: {self.has_filter}")
        lines.append(f"Has visitor: {self.has_visitor}")
        lines.append(f"Supports pruning: {self.supports_pruning}")
        lines.append("Cycle detection: None")
        return "\n".join(lines)


class Walker:
    """
    Fluent traversal builder over an adjacency callable.

    Defaults to pre-order.
    """

    def __init__(self, adjacency: Callable[[Any], Iterable[Walk]]):
        """Initialize walker with an adjacency callable."""
        if adjacency is None:
            raise TypeError("adjacency must not be None")
        self._adjacency = adjacency
        self._start: Any = None
        self._has_start = False
        self._strategy = TraversalStrategy.PRE_ORDER
        self._filter_fn: Optional[Callable[[Walk], bool]] = None
        self._visitor: Optional[Callable[[Walk, T], T]] = None
        self._initial: Any = None

    def starting_from(self, vertex: Any) -> "Walker":
        """
        Set the start vertex.

        Args:
            vertex: Root of the traversal

        Returns:
            Self for chaining
        """
        self._start = vertex
        self._has_start = True
        return self

    def strategy(self, strategy: TraversalStrategy) -> "Walker":
        """Use the given traversal strategy. Returns self for chaining."""
        self._strategy = strategy
        return self

    def pre_order(self) -> "Walker":
        return self.strategy(TraversalStrategy.PRE_ORDER)

    def post_order(self) -> "Walker":
        return self.strategy(TraversalStrategy.POST_ORDER)

    def breadth_first(self) -> "Walker":
        return self.strategy(TraversalStrategy.BREADTH_FIRST)

    def leaves(self) -> "Walker":
        return self.strategy(TraversalStrategy.LEAVES)

    def filter(self, predicate: Callable[[Walk], bool]) -> "Walker":
        """
        Only yield walks matching predicate.

        Filtering does not stop descent: children of a rejected walk are
        still visited.

        Args:
            predicate: Function returning True for walks to include

        Returns:
            Self for chaining
        """
        self._filter_fn = predicate
        return self

    def visit(self, visitor: Callable[[Walk, T], T], initial: T = None) -> "Walker":
        """
        Set visitor function to fold over the yielded walks.

        Args:
            visitor: Function (walk, acc) -> new acc
            initial: Initial accumulator value

        Returns:
            Self for chaining
        """
        self._visitor = visitor
        self._initial = initial
        return self

    def explain(self) -> WalkerPlan:
        """Return a WalkerPlan for the current configuration."""
        return WalkerPlan(
            strategy=self._strategy.name,
            start=self._start,
            has_start=self._has_start,
            has_filter=self._filter_fn is not None,
            has_visitor=self._visitor is not None,
            supports_pruning=self._strategy is TraversalStrategy.PRE_ORDER,
        )

    def iter(self) -> Iterator[Walk]:
        """
        Start a fresh traversal.

        Without a filter the engine itself is returned, so pre-order
        callers keep access to prune() and remove().

        Raises:
            IllegalStateError: If no start vertex was configured
        """
        if not self._has_start:
            raise IllegalStateError("Walker has no start vertex; call starting_from() first")
        engine = _ENGINES[self._strategy](self._start, self._adjacency)
        if self._filter_fn is None:
            return engine
        return self._filtered(engine, self._filter_fn)

    def run(self) -> Any:
        """
        Execute the traversal and return the final accumulator.

        Without a visitor the accumulator is returned unchanged.
        """
        acc = self._initial
        if self._visitor is None:
            return acc
        for walk in self.iter():
            acc = self._visitor(walk, acc)
        return acc

    def __iter__(self) -> Iterator[Walk]:
        return self.iter()

    @staticmethod
    def _filtered(engine: Iterator[Walk], predicate: Callable[[Walk], bool]) -> Iterator[Walk]:
        for walk in engine:
            if predicate(walk):
                yield walk
