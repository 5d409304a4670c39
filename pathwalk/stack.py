"""
Persistent Stack
================

An immutable, structurally shared stack. ``push`` and ``pop`` return new
stacks and leave the receiver untouched, so a stack value that is still
referenced elsewhere can never be corrupted by later operations.

This is what lets the pre-order engine discard its top frame in O(1)
while sibling frames below remain live, and compute a popped stack as a
plain value before deciding whether to commit it.

Example:
    >>> base = PersistentStack.of("a", "b")
    >>> top = base.push("c")
    >>> top.peek(), base.peek()
    ('c', 'b')
    >>> list(top.pop()) == list(base)
    True
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar


T = TypeVar("T")


class _Node(Generic[T]):
    """Cons cell shared between stacks."""

    __slots__ = ("value", "below", "size")

    def __init__(self, value: T, below: Optional["_Node[T]"]):
        self.value = value
        self.below = below
        self.size = 1 if below is None else below.size + 1


class PersistentStack(Generic[T]):
    """Immutable stack with O(1) push, pop and peek."""

    __slots__ = ("_head",)

    def __init__(self, _head: Optional[_Node[T]] = None):
        self._head = _head

    @classmethod
    def empty(cls) -> "PersistentStack[T]":
        """Return the empty stack."""
        return _EMPTY

    @classmethod
    def of(cls, *values: T) -> "PersistentStack[T]":
        """
        Build a stack from values given bottom to top.

        Args:
            *values: Elements, the last one ends up on top

        Returns:
            New stack holding the values
        """
        stack = cls.empty()
        for value in values:
            stack = stack.push(value)
        return stack

    def push(self, value: T) -> "PersistentStack[T]":
        """Return a new stack with value on top of this one."""
        return PersistentStack(_Node(value, self._head))

    def pop(self) -> "PersistentStack[T]":
        """
        Return the stack below the top element.

        Raises:
            IndexError: If the stack is empty
        """
        if self._head is None:
            raise IndexError("pop from empty stack")
        below = self._head.below
        return _EMPTY if below is None else PersistentStack(below)

    def peek(self) -> T:
        """
        Return the top element.

        Raises:
            IndexError: If the stack is empty
        """
        if self._head is None:
            raise IndexError("peek at empty stack")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __bool__(self) -> bool:
        return self._head is not None

    def __len__(self) -> int:
        return 0 if self._head is None else self._head.size

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"PersistentStack({list(self)!r})"


_EMPTY: PersistentStack = PersistentStack()
