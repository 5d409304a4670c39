"""
Tests for the post-order engine.
"""

from unittest.mock import MagicMock

import pytest

from pathwalk.adjacency import GraphAdjacency, from_children
from pathwalk.errors import ExhaustedError, UnsupportedOperationError
from pathwalk.post_order import PostOrderIterator
from pathwalk.walk import Step, Walk


def targets(walks):
    return [walk.to for walk in walks]


class TestPostOrderOrdering:
    """Children before parents, root last."""

    def test_small_tree(self, small_tree):
        assert targets(PostOrderIterator("R", small_tree)) == ["C", "A", "B", "R"]

    def test_last_walk_is_empty_walk_to_root(self, small_tree):
        walks = list(PostOrderIterator("R", small_tree))

        assert walks[-1] == Walk.empty("R")

    def test_walks_record_full_path(self, small_tree):
        walks = list(PostOrderIterator("R", small_tree))

        assert walks[0] == Walk("R", (Step(0, "A"), Step(0, "C")))
        assert walks[1] == Walk.single("R", 0, "A")

    def test_wide_tree(self, wide_tree):
        assert targets(PostOrderIterator("root", wide_tree)) == [
            "x1", "x2", "x", "y1", "y", "z", "root"
        ]

    def test_diamond_yields_each_path(self, diamond):
        assert targets(PostOrderIterator("S", diamond)) == ["D", "L", "D", "R", "S"]

    def test_leaf_root(self):
        assert list(PostOrderIterator("alone", GraphAdjacency())) == [Walk.empty("alone")]

    def test_deep_chain_without_recursion(self):
        adjacency = from_children(lambda n: [n + 1] if n < 2000 else [])
        it = PostOrderIterator(0, adjacency)

        first = next(it)
        assert first.to == 2000
        assert len(first) == 2000
        assert sum(1 for _ in it) == 2000

    def test_returned_walks_are_snapshots(self, wide_tree):
        """Later steps never alter walks already handed out."""
        it = PostOrderIterator("root", wide_tree)
        first = next(it)
        list(it)

        assert first == Walk("root", (Step("a", "x"), Step("a1", "x1")))

    def test_adjacency_called_once_per_path(self, small_tree):
        adjacency = MagicMock(side_effect=small_tree)
        list(PostOrderIterator("R", adjacency))

        called_with = [call.args[0] for call in adjacency.call_args_list]
        assert sorted(called_with) == ["A", "B", "C", "R"]


class TestPostOrderExhaustion:
    """has_next() and exhaustion behaviour."""

    def test_has_next(self, small_tree):
        it = PostOrderIterator("R", small_tree)

        for _ in range(4):
            assert it.has_next()
            next(it)
        assert not it.has_next()

    def test_exhausted_raises_every_time(self, small_tree):
        it = PostOrderIterator("R", small_tree)
        list(it)

        for _ in range(3):
            with pytest.raises(ExhaustedError):
                next(it)

    def test_cycle_never_yields(self):
        """On a cycle the engine descends forever before yielding."""
        seen = []

        def cycle(vertex):
            seen.append(vertex)
            if len(seen) > 50:
                raise RuntimeError("descended too far")
            return [Walk.single(vertex, 0, vertex)]

        with pytest.raises(RuntimeError):
            next(PostOrderIterator("a", cycle))


class TestPostOrderControl:
    """Pruning and removal are unsupported."""

    def test_prune_unsupported(self, small_tree):
        it = PostOrderIterator("R", small_tree)
        next(it)

        with pytest.raises(UnsupportedOperationError):
            it.prune()

    def test_remove_unsupported(self, small_tree):
        it = PostOrderIterator("R", small_tree)
        next(it)

        with pytest.raises(UnsupportedOperationError):
            it.remove()
        assert small_tree.edges_from("A") == [Step(0, "C")]
