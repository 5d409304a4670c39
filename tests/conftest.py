"""
Pytest Configuration and Shared Fixtures
========================================

This module configures pytest for the pathwalk test suite.
It provides:
- Path setup for importing pathwalk
- Custom markers for test categorization
- Shared graph fixtures available to all tests

Test Categories (markers):
- @pytest.mark.unit: Fast, isolated unit tests
- @pytest.mark.integration: Component interaction tests
- @pytest.mark.slow: Tests that take > 5 seconds

Usage:
    # Run only unit tests
    pytest -m unit

    # Run everything except slow tests
    pytest -m "not slow"
"""

import os
import sys

import pytest


# =============================================================================
# PATH SETUP
# =============================================================================

# Ensure the pathwalk package is importable from any test directory
_repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)


# =============================================================================
# PYTEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Fast, isolated unit tests (< 1s each)"
    )
    config.addinivalue_line(
        "markers", "integration: Component interaction tests"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take > 5 seconds"
    )


# =============================================================================
# TEST COLLECTION HOOKS
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    Tests in tests/unit/ get @pytest.mark.unit, etc.
    """
    for item in items:
        test_path = str(item.fspath)

        if '/unit/' in test_path or '\\unit\\' in test_path:
            item.add_marker(pytest.mark.unit)
        elif '/integration/' in test_path or '\\integration\\' in test_path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# GRAPH FIXTURES
# =============================================================================
# Every fixture returns a fresh GraphAdjacency, so tests that remove edges
# never leak state into each other.

@pytest.fixture
def small_tree():
    """
    R has children [A, B]; A has one child C; B and C are leaves.

        R -0-> A -0-> C
        R -1-> B
    """
    from pathwalk import GraphAdjacency
    return GraphAdjacency.from_pairs([
        ("R", 0, "A"),
        ("R", 1, "B"),
        ("A", 0, "C"),
    ])


@pytest.fixture
def wide_tree():
    """
    Two-level tree with labelled edges.

        root -a-> x -a1-> x1, x -a2-> x2
        root -b-> y -b1-> y1
        root -c-> z
    """
    from pathwalk import GraphAdjacency
    return GraphAdjacency.from_pairs([
        ("root", "a", "x"),
        ("root", "b", "y"),
        ("root", "c", "z"),
        ("x", "a1", "x1"),
        ("x", "a2", "x2"),
        ("y", "b1", "y1"),
    ])


@pytest.fixture
def diamond():
    """
    DAG where D is reachable along two paths.

        S -> L -> D
        S -> R -> D
    """
    from pathwalk import GraphAdjacency
    return GraphAdjacency.from_pairs([
        ("S", "left", "L"),
        ("S", "right", "R"),
        ("L", "down", "D"),
        ("R", "down", "D"),
    ])
