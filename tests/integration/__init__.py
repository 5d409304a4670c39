"""
Integration Tests
=================

Tests that verify components work together correctly.
These tests may:
- Combine several traversal strategies over one adjacency
- Mutate an adjacency through one traversal and observe it through another

Run with: python -m pytest tests/integration/ -v
"""
