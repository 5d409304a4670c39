"""
Nested Value Elements
=====================

An adjacency over nested container values, plus helpers to enumerate the
leaf elements of such a value and render each as an idiomatic path string.

- Mappings: one hop per item, labelled by the escaped key.
- Sequences and sets (but not str or bytes): one hop per element,
  labelled "[i]".
- Anything else, and any empty container, is a leaf.

Because "." and "[" are path separators, backslash, ".", "[" and "]" are
backslash-escaped when they appear in mapping keys.

Example:
    >>> value = {"a": [1, {"b.c": 2}], "d": {}}
    >>> [element_path(walk) for walk in leaf_elements(value)]
    ['a[0]', 'a[1].b\\\\.c', 'd']
    >>> [walk.to for walk in leaf_elements(value)]
    [1, 2, {}]
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence, Set
from typing import Any, Iterator

from .traversers import Traversal, leaves
from .walk import Walk

_SPECIAL = re.compile(r"([\\.\[\]])")


def escape_key(key: Any) -> str:
    """Return str(key) with path separators backslash-escaped."""
    return _SPECIAL.sub(r"\\\1", str(key))


def _is_container(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Mapping, Sequence, Set))


def element_adjacency(value: Any) -> Iterator[Walk]:
    """
    Yield a one-hop walk to each immediate element of value.

    Args:
        value: Any value; only mappings, sequences and sets have elements

    Yields:
        Walks whose edge label is a path component string
    """
    if not _is_container(value):
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield Walk.single(value, escape_key(key), item)
    else:
        for index, item in enumerate(value):
            yield Walk.single(value, f"[{index}]", item)


def leaf_elements(value: Any) -> Traversal:
    """
    Return a traversal of the walks to every leaf element of value.

    Leaves come out in pre-order. A non-container value yields only its
    own zero-hop walk.
    """
    return leaves(value, element_adjacency)


def element_path(walk: Walk) -> str:
    """
    Render a walk produced by leaf_elements() as a path string.

    Index components are appended directly; key components are joined
    with "." (no leading dot).

    Args:
        walk: Walk whose edge labels are element path components

    Returns:
        Path such as "a[1].b" or "" for the zero-hop walk
    """
    parts = []
    for label in walk.labels():
        if label.startswith("[") or not parts:
            parts.append(label)
        else:
            parts.append("." + label)
    return "".join(parts)
