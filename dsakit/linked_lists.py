"""Singly, doubly and circular linked lists built from explicit nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class _DNode:
    __slots__ = ("value", "prior", "next")

    def __init__(
        self,
        value: Any = None,
        prior: _DNode | None = None,
        next: _DNode | None = None,
    ) -> None:
        self.value = value
        self.prior = prior
        self.next = next


class SinglyLinkedList:
    """A singly linked list terminated by ``None``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, prev: _Node | None, node: _Node) -> None:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``; raise ValueError if absent."""
        prev: _Node | None = None
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(prev, node)
                return
            prev, node = node, node.next
        raise ValueError(f"{value!r} not in list")

    def remove_all(self, value: Any) -> int:
        """Remove every occurrence of ``value`` and return how many were removed."""
        removed = 0
        prev: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            if node.value == value:
                self._unlink(prev, node)
                removed += 1
            else:
                prev = node
            node = following
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list terminated by ``None`` at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prior = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _DNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _DNode) -> None:
        if node.prior is None:
            self._head = node.next
        else:
            node.prior.next = node.next
        if node.next is None:
            self._tail = node.prior
        else:
            node.next.prior = node.prior
        self._size -= 1

    def remove_all(self, value: Any) -> int:
        """Remove every occurrence of ``value`` and return how many were removed."""
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.value == value:
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prior

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularSinglyLinkedList:
    """A singly linked list whose last node links back to a sentinel head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._sentinel = _Node()
        self._sentinel.next = self._sentinel
        self._tail = self._sentinel
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, self._sentinel.next)
        self._sentinel.next = node
        if self._tail is self._sentinel:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value, self._sentinel)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_all(self, value: Any) -> int:
        """Remove every occurrence of ``value`` and return how many were removed."""
        removed = 0
        prev = self._sentinel
        node = self._sentinel.next
        while node is not self._sentinel:
            if node.value == value:
                prev.next = node.next
                if node is self._tail:
                    self._tail = prev
                self._size -= 1
                removed += 1
            else:
                prev = node
            node = node.next
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularDoublyLinkedList:
    """A doubly linked ring closed through a sentinel node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._sentinel = _DNode()
        self._sentinel.prior = self._sentinel
        self._sentinel.next = self._sentinel
        self._size = 0
        for value in values:
            self.push_back(value)

    def _insert_after(self, anchor: _DNode, value: Any) -> None:
        node = _DNode(value, anchor, anchor.next)
        anchor.next.prior = node
        anchor.next = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._insert_after(self._sentinel, value)

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        self._insert_after(self._sentinel.prior, value)

    def remove_all(self, value: Any) -> int:
        """Remove every occurrence of ``value`` and return how many were removed."""
        removed = 0
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            if node.value == value:
                node.prior.next = node.next
                node.next.prior = node.prior
                self._size -= 1
                removed += 1
            node = following
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prior
        while node is not self._sentinel:
            yield node.value
            node = node.prior

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"