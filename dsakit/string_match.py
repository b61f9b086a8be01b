"""Substring search by brute force and by Knuth-Morris-Pratt."""

from __future__ import annotations


def prefix_table(pattern: str) -> list[int]:
    """Return, for each prefix of ``pattern``, its longest proper border length."""
    table = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j > 0 and pattern[i] != pattern[j]:
            j = table[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        table[i] = j
    return table


def kmp_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    if not pattern:
        return 0
    table = prefix_table(pattern)
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = table[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            return i - j + 1
    return -1


def brute_force_search(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    i = j = 0
    while i < len(text) and j < len(pattern):
        if text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            i = i - j + 1
            j = 0
    return i - j if j >= len(pattern) else -1