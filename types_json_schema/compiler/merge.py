"""
Helpers for combining compiled schema fragments.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def deep_merge(left: Mapping[str, Any], right: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge two fragments into a new one.

    Nested mappings merge key by key, sequences are unioned in first-seen
    order and any other value is taken from the right operand. Neither input
    is modified.

    Args:
        left: The fragment merged into
        right: The fragment merged on top

    Returns:
        The merged fragment
    """
    merged = dict(left)

    for key, value in right.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = unique(current + value)
        else:
            merged[key] = value

    return merged


def unique(items: Iterable[Any]) -> list[Any]:
    """Drop structurally equal duplicates, keeping the first occurrence."""
    # Fragments are dicts, so equality is checked pairwise rather than hashed
    result: list[Any] = []
    for item in items:
        if item not in result:
            result.append(item)
    return result
