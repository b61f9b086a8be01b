"""A self-balancing AVL search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.height = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: _Node) -> _Node:
    """Single rotation for a left-left imbalance."""
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    """Single rotation for a right-right imbalance."""
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _insert(node: _Node | None, key: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, inserted = _insert(node.left, key)
        if _height(node.left) - _height(node.right) == 2:
            if key < node.left.key:
                node = _rotate_right(node)
            else:
                node.left = _rotate_left(node.left)
                node = _rotate_right(node)
    elif key > node.key:
        node.right, inserted = _insert(node.right, key)
        if _height(node.right) - _height(node.left) == 2:
            if key > node.right.key:
                node = _rotate_left(node)
            else:
                node.right = _rotate_right(node.right)
                node = _rotate_left(node)
    else:
        return node, False
    _refresh(node)
    return node, inserted


class AVLTree:
    """A binary search tree kept height-balanced by rotations on insert.

    Duplicate keys are ignored. A single leaf has height 1; an empty tree 0.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        self._root, inserted = _insert(self._root, value)
        if inserted:
            self._size += 1
        return inserted

    def preorder(self) -> list[Any]:
        """Return the keys in root, left, right order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def height(self) -> int:
        """Return the number of levels in the tree."""
        return _height(self._root)

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.key:
                node = node.left
            elif value > node.key:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                top = stack.pop()
                yield top.key
                node = top.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"