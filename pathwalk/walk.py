"""
Walk Model
==========

Immutable path records produced by every traversal strategy.

A Walk starts at a vertex (``from_``) and follows zero or more Steps, each
an edge label paired with the vertex that edge leads to. The end vertex
(``to``) is derived from the steps, so the invariant "``to`` is the target
of the last step, or ``from_`` when there are none" cannot be broken.

WalkBuilder is the mutable counterpart used by the post-order engine: it
grows and shrinks one hop at a time and snapshots into Walks on demand.

Example:
    >>> hop = Walk.single("R", "left", "A")
    >>> walk = Walk.empty("R").then(hop)
    >>> walk.to, len(walk)
    ('A', 1)
    >>> list(walk.vertices())
    ['R', 'A']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple


@dataclass(frozen=True)
class Step:
    """
    A single hop of a walk.

    Attributes:
        over: Edge label describing the hop
        to: Vertex reached by the hop
    """
    over: Any
    to: Any


def _same_vertex(a: Any, b: Any) -> bool:
    return a is b or a == b


@dataclass(frozen=True)
class Walk:
    """
    An immutable, possibly empty, path between two vertices.

    Walks compare by value and are hashable whenever their vertices and
    edge labels are.

    Attributes:
        from_: Start vertex
        steps: Hops taken from the start vertex, in order
    """
    from_: Any
    steps: Tuple[Step, ...] = ()

    @classmethod
    def empty(cls, vertex: Any) -> "Walk":
        """Return the zero-hop walk at vertex."""
        return cls(vertex)

    @classmethod
    def single(cls, from_: Any, over: Any, to: Any) -> "Walk":
        """
        Return a one-hop walk.

        Args:
            from_: Start vertex
            over: Edge label
            to: End vertex

        Returns:
            Walk with exactly one step
        """
        return cls(from_, (Step(over, to),))

    @classmethod
    def builder(cls, start: Any) -> "WalkBuilder":
        """Return a WalkBuilder rooted at start."""
        return WalkBuilder(start)

    @property
    def to(self) -> Any:
        """End vertex of the walk."""
        if self.steps:
            return self.steps[-1].to
        return self.from_

    def is_empty(self) -> bool:
        """True if the walk has no steps."""
        return not self.steps

    def then(self, other: "Walk") -> "Walk":
        """
        Return this walk followed by other.

        Args:
            other: Walk starting where this one ends

        Returns:
            Composed walk

        Raises:
            ValueError: If other does not start at this walk's end vertex
        """
        if not _same_vertex(other.from_, self.to):
            raise ValueError(
                f"Cannot append a walk from {other.from_!r} to a walk ending at {self.to!r}"
            )
        if not other.steps:
            return self
        if not self.steps:
            return Walk(self.from_, other.steps)
        return Walk(self.from_, self.steps + other.steps)

    def __add__(self, other: "Walk") -> "Walk":
        if not isinstance(other, Walk):
            return NotImplemented
        return self.then(other)

    def vertices(self) -> Iterator[Any]:
        """Yield the start vertex followed by every step's target."""
        yield self.from_
        for step in self.steps:
            yield step.to

    def labels(self) -> Iterator[Any]:
        """Yield every step's edge label."""
        for step in self.steps:
            yield step.over

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __repr__(self) -> str:
        if not self.steps:
            return f"Walk({self.from_!r})"
        hops = "".join(f" -{step.over!r}-> {step.to!r}" for step in self.steps)
        return f"Walk({self.from_!r}{hops})"


class WalkBuilder:
    """
    Mutable walk accumulator.

    ``push`` appends a walk starting at the current end, ``pop`` retracts
    the most recently pushed one, and ``build`` snapshots the current path.
    Snapshots never share mutable state with the builder.

    A pushed zero-hop walk still counts as a push, so ``is_empty`` reports
    whether anything is on the builder rather than whether it has steps.
    """

    def __init__(self, start: Any):
        self._start = start
        self._steps: List[Step] = []
        self._sizes: List[int] = []

    @property
    def to(self) -> Any:
        """Current end vertex."""
        if self._steps:
            return self._steps[-1].to
        return self._start

    def push(self, walk: Walk) -> "WalkBuilder":
        """
        Append walk to the current path.

        Args:
            walk: Walk starting at the builder's current end vertex

        Returns:
            Self for chaining

        Raises:
            ValueError: If walk does not start at the current end vertex
        """
        if not _same_vertex(walk.from_, self.to):
            raise ValueError(
                f"Cannot push a walk from {walk.from_!r} onto a path ending at {self.to!r}"
            )
        self._steps.extend(walk.steps)
        self._sizes.append(len(walk.steps))
        return self

    def pop(self) -> "WalkBuilder":
        """
        Retract the most recently pushed walk.

        Raises:
            IndexError: If nothing has been pushed
        """
        if not self._sizes:
            raise IndexError("pop from empty builder")
        size = self._sizes.pop()
        if size:
            del self._steps[-size:]
        return self

    def is_empty(self) -> bool:
        return not self._sizes

    def build(self) -> Walk:
        """Snapshot the current path as an immutable Walk."""
        return Walk(self._start, tuple(self._steps))
