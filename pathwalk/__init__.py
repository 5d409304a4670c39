"""
pathwalk - Lazy traversal of implicit trees and graphs
======================================================

Walks a graph defined only by an adjacency callable (vertex -> one-hop
walks leaving it) and yields immutable Walk records, one per
root-to-vertex path, in pre-order, post-order, breadth-first or
leaves-only order.

Example:
    from pathwalk import GraphAdjacency, pre_order

    graph = GraphAdjacency.from_pairs([("R", 0, "A"), ("R", 1, "B"), ("A", 0, "C")])
    for walk in pre_order("R", graph):
        print(walk.to, list(walk.labels()))

None of the traversals detect cycles.
"""

from .errors import (
    TraversalError,
    ExhaustedError,
    IllegalStateError,
    UnsupportedOperationError,
)
from .stack import PersistentStack
from .walk import Step, Walk, WalkBuilder
from .adjacency import (
    Adjacency,
    EdgeIterator,
    PeekingEdgeIterator,
    SequenceEdgeIterator,
    GraphAdjacency,
    edges,
    from_children,
)
from .pre_order import PreOrderIterator
from .post_order import PostOrderIterator
from .breadth_first import BreadthFirstIterator
from .leaves import LeafIterator
from .traversers import (
    Traversal,
    pre_order,
    post_order,
    breadth_first,
    leaves,
)
from .elements import (
    element_adjacency,
    element_path,
    escape_key,
    leaf_elements,
)
from .walker import Walker, WalkerPlan, TraversalStrategy

__version__ = "1.0.0"
__all__ = [
    # Errors
    "TraversalError",
    "ExhaustedError",
    "IllegalStateError",
    "UnsupportedOperationError",
    # Walk model
    "PersistentStack",
    "Step",
    "Walk",
    "WalkBuilder",
    # Adjacency
    "Adjacency",
    "EdgeIterator",
    "PeekingEdgeIterator",
    "SequenceEdgeIterator",
    "GraphAdjacency",
    "edges",
    "from_children",
    # Engines
    "PreOrderIterator",
    "PostOrderIterator",
    "BreadthFirstIterator",
    "LeafIterator",
    # Traversals
    "Traversal",
    "pre_order",
    "post_order",
    "breadth_first",
    "leaves",
    # Nested values
    "element_adjacency",
    "element_path",
    "escape_key",
    "leaf_elements",
    # Fluent API
    "Walker",
    "WalkerPlan",
    "TraversalStrategy",
]
