"""
Tests for the Walk model: Step, Walk and WalkBuilder.
"""

import pytest

from pathwalk.walk import Step, Walk, WalkBuilder


class TestWalk:
    """Immutable walk records."""

    def test_empty_walk(self):
        walk = Walk.empty("R")

        assert walk.from_ == "R"
        assert walk.to == "R"
        assert len(walk) == 0
        assert walk.is_empty()
        assert list(walk.vertices()) == ["R"]

    def test_single_walk(self):
        walk = Walk.single("R", "left", "A")

        assert walk.from_ == "R"
        assert walk.to == "A"
        assert walk.steps == (Step("left", "A"),)
        assert not walk.is_empty()

    def test_to_follows_last_step(self):
        walk = Walk("R", (Step(0, "A"), Step(1, "C")))

        assert walk.to == "C"
        assert list(walk.vertices()) == ["R", "A", "C"]
        assert list(walk.labels()) == [0, 1]

    def test_then_composes(self):
        walk = Walk.single("R", 0, "A").then(Walk.single("A", 0, "C"))

        assert walk == Walk("R", (Step(0, "A"), Step(0, "C")))

    def test_add_operator(self):
        walk = Walk.empty("R") + Walk.single("R", 0, "A")

        assert walk == Walk.single("R", 0, "A")

    def test_then_with_empty_walks(self):
        hop = Walk.single("R", 0, "A")

        assert Walk.empty("R").then(hop) == hop
        assert hop.then(Walk.empty("A")) is hop

    def test_then_rejects_mismatched_start(self):
        with pytest.raises(ValueError):
            Walk.single("R", 0, "A").then(Walk.single("B", 0, "C"))

    def test_walks_are_immutable(self):
        walk = Walk.single("R", 0, "A")

        with pytest.raises(AttributeError):
            walk.from_ = "X"

    def test_walks_compare_and_hash_by_value(self):
        a = Walk.single("R", 0, "A")
        b = Walk.single("R", 0, "A")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_iterates_steps(self):
        walk = Walk("R", (Step(0, "A"), Step(1, "B")))

        assert [step.to for step in walk] == ["A", "B"]

    def test_repr(self):
        assert repr(Walk.empty("R")) == "Walk('R')"
        assert repr(Walk.single("R", 0, "A")) == "Walk('R' -0-> 'A')"


class TestWalkBuilder:
    """Mutable accumulator used by the post-order engine."""

    def test_new_builder_is_empty(self):
        builder = Walk.builder("R")

        assert isinstance(builder, WalkBuilder)
        assert builder.is_empty()
        assert builder.build() == Walk.empty("R")

    def test_push_and_pop(self):
        builder = Walk.builder("R")
        builder.push(Walk.single("R", 0, "A")).push(Walk.single("A", 0, "C"))

        assert builder.build() == Walk("R", (Step(0, "A"), Step(0, "C")))

        builder.pop()
        assert builder.build() == Walk.single("R", 0, "A")
        assert builder.to == "A"

    def test_empty_walk_push_counts(self):
        """A zero-hop push makes the builder non-empty."""
        builder = Walk.builder("R")
        builder.push(Walk.empty("R"))

        assert not builder.is_empty()
        assert builder.build() == Walk.empty("R")

        builder.pop()
        assert builder.is_empty()

    def test_pop_retracts_whole_walk(self):
        builder = Walk.builder("R")
        builder.push(Walk("R", (Step(0, "A"), Step(0, "C"))))
        builder.pop()

        assert builder.build() == Walk.empty("R")

    def test_pop_empty_raises(self):
        with pytest.raises(IndexError):
            Walk.builder("R").pop()

    def test_push_rejects_mismatched_start(self):
        with pytest.raises(ValueError):
            Walk.builder("R").push(Walk.single("A", 0, "C"))

    def test_snapshots_do_not_alias(self):
        """build() results are unaffected by later mutation."""
        builder = Walk.builder("R")
        builder.push(Walk.single("R", 0, "A"))
        snapshot = builder.build()

        builder.push(Walk.single("A", 0, "C"))
        builder.pop().pop()

        assert snapshot == Walk.single("R", 0, "A")
