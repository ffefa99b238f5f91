"""
Projection of node metadata onto compiled entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .tables import ANNOTATION_KEYS


def annotations(meta: Mapping[str, Any] | None, keys: tuple[str, ...] = ANNOTATION_KEYS) -> dict[str, Any]:
    """Return the allow-listed subset of a metadata mapping."""
    if not meta:
        return {}
    return {key: meta[key] for key in keys if key in meta}


def overlay(fragment: dict[str, Any], meta: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Copy allow-listed annotations from metadata into a compiled fragment.

    The ``type`` keyword is never part of the allow-list, so a type already
    established for the entry is left untouched.

    Args:
        fragment: The compiled entry
        meta: Metadata of the node the entry was compiled from

    Returns:
        A new fragment with the annotations applied
    """
    extra = annotations(meta)
    if not extra:
        return fragment
    return {**fragment, **extra}
