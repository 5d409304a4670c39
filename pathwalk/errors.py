"""
Exception classes for pathwalk traversals.

All exceptions carry a human-readable message plus optional keyword
context, so they can be logged or serialized without losing detail.
"""

from typing import Dict, Any


class TraversalError(Exception):
    """Base exception for all traversal errors."""

    def __init__(self, message: str, **context):
        """
        Initialize traversal error with message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context
        }


class ExhaustedError(TraversalError, StopIteration):
    """
    No further walks are available.

    Subclasses StopIteration so that ``for`` loops and ``list()`` over an
    engine end normally, while direct calls still see a traversal error.
    """
    pass


class IllegalStateError(TraversalError):
    """A control call (prune, remove) was made outside its legal window."""
    pass


class UnsupportedOperationError(TraversalError):
    """The traversal strategy does not implement the requested control call."""
    pass
