"""Huffman tree built in a flat table of 2n - 1 entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class HuffmanEntry:
    """One slot of the table: a weight and the indices of its relatives."""

    weight: int
    parent: int | None = None
    left: int | None = None
    right: int | None = None


class HuffmanTree:
    """The first n entries are leaves; each later entry merges the two lightest roots.

    Among equal weights the entry with the lower index is chosen first, and
    the lighter of the pair becomes the left child.
    """

    def __init__(self, weights: Iterable[int]) -> None:
        self.entries = [HuffmanEntry(weight) for weight in weights]
        if not self.entries:
            raise ValueError("at least one weight is needed")
        for _ in range(len(self.entries) - 1):
            first = self._lightest_root(exclude=None)
            second = self._lightest_root(exclude=first)
            index = len(self.entries)
            self.entries.append(
                HuffmanEntry(
                    self.entries[first].weight + self.entries[second].weight,
                    left=first,
                    right=second,
                )
            )
            self.entries[first].parent = index
            self.entries[second].parent = index

    def _lightest_root(self, exclude: int | None) -> int:
        return min(
            (
                index
                for index, entry in enumerate(self.entries)
                if entry.parent is None and index != exclude
            ),
            key=lambda index: self.entries[index].weight,
        )

    def root(self) -> HuffmanEntry:
        """Return the entry at the top of the tree."""
        return self.entries[-1]

    def preorder(self) -> list[int]:
        """Return the weights in root, left, right order."""
        result: list[int] = []
        stack = [len(self.entries) - 1]
        while stack:
            entry = self.entries[stack.pop()]
            result.append(entry.weight)
            if entry.right is not None:
                stack.append(entry.right)
            if entry.left is not None:
                stack.append(entry.left)
        return result

    def __len__(self) -> int:
        return len(self.entries)