"""Sequential, sentinel and binary search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sequential_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first ``key`` in ``items``, or -1."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return -1


def sentinel_search(items: Sequence[Any], key: Any) -> int:
    """Scan from the end and return the 1-based position of ``key``, or 0.

    Position 0 is where the sentinel sits, so it means "not found".
    """
    slots = [key, *items]
    position = len(slots) - 1
    while slots[position] != key:
        position -= 1
    return position


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the sorted ``items``, or -1."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if key > items[mid]:
            start = mid + 1
        elif key < items[mid]:
            end = mid - 1
        else:
            return mid
    return -1


def binary_search_recursive(items: Sequence[Any], key: Any) -> int:
    """Recursive binary search over the sorted ``items``; -1 when absent."""

    def search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = (start + end) // 2
        if items[mid] < key:
            return search(mid + 1, end)
        if items[mid] > key:
            return search(start, mid - 1)
        return mid

    return search(0, len(items) - 1)