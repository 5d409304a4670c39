"""
Unit Tests
==========

Fast, isolated tests that verify individual functions and classes work correctly.
These tests should:
- Run in < 1 second each
- Build their graphs in memory from fixtures
- Test one thing at a time

Run with: python -m pytest tests/unit/ -v
"""
