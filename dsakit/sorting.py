"""Bubble, insertion and quick sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def bubble_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Bubble sort a copy of ``items``, yielding a snapshot after each pass."""
    values = list(items)
    n = len(values)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
        yield list(values)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` by bubble sort."""
    values = list(items)
    for snapshot in bubble_sort_passes(values):
        values = snapshot
    return values


def insertion_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Insertion sort a copy of ``items``, yielding a snapshot after each step."""
    values = list(items)
    for i in range(1, len(values)):
        current = values[i]
        target = next((j for j in range(i) if current < values[j]), i)
        if target < i:
            del values[i]
            values.insert(target, current)
        yield list(values)


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` by insertion sort."""
    values = list(items)
    for snapshot in insertion_sort_passes(values):
        values = snapshot
    return values


def partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around ``items[low]``.

    Returns the final index of the pivot.
    """
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i < j and items[j] >= pivot:
            j -= 1
        if i < j:
            items[i] = items[j]
            i += 1
        while i < j and items[i] <= pivot:
            i += 1
        if i < j:
            items[j] = items[i]
            j -= 1
    items[i] = pivot
    return i


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` by quick sort."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            index = partition(values, low, high)
            ranges.append((low, index - 1))
            ranges.append((index + 1, high))
    return values