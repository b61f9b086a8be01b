"""Linked stack, linked queue and fixed-size circular queue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class LinkedStack:
    """A LIFO stack on a chain of nodes; iteration runs from top to bottom."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top-first={list(self)!r})"


class LinkedQueue:
    """A FIFO queue on a chain of nodes; iteration runs from head to tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("dequeue from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("peek at empty queue")
        return self._head.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularQueue:
    """A ring buffer of ``capacity`` slots, one of which is always kept free.

    It therefore holds at most ``capacity - 1`` values.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("circular queue is full")
        self._slots[self._rear] = value
        self._rear = (self._rear + 1) % self.capacity

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if self._front == self._rear:
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        return value

    def peek(self) -> Any:
        """Return the front value; raise IndexError when empty."""
        if self._front == self._rear:
            raise IndexError("peek at empty queue")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return (self._rear - self._front + self.capacity) % self.capacity

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"