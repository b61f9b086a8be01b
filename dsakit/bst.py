"""An unbalanced binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Keys smaller than a node go left, larger go right; duplicates are dropped."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(key)
            self._size += 1
            return True
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def search(self, key: Any) -> Any:
        """Return the stored key equal to ``key``; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.key

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

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