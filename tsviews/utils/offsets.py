"""
Bounds-checked cursor arithmetic for views.
"""

from __future__ import annotations


def add_offset(indexer: int, delta: int) -> int | None:
    """
    Apply a signed offset to a non-negative position.

    Args:
        indexer: Current position (>= 0).
        delta: Signed offset.

    Returns:
        The resulting position, or None when it would fall below zero.

    Examples:
        >>> add_offset(3, -2)
        1
        >>> add_offset(1, -2) is None
        True
    """
    position = indexer + delta
    if position < 0:
        return None
    return position
