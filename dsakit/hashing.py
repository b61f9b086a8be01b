"""A fixed-size hash table resolving collisions by linear probing."""

from __future__ import annotations

from typing import Any

DEFAULT_SIZE = 5


class LinearProbingTable:
    """Stores keys in ``size`` slots at ``key % size``, probing forward on collision.

    A string key of one character is hashed by its code point.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._count = 0

    def hash(self, key: Any) -> int:
        code = ord(key) if isinstance(key, str) else int(key)
        return code % self.size

    def put(self, key: Any) -> int:
        """Store ``key`` and return its slot; raise OverflowError when full."""
        if self._count == self.size:
            raise OverflowError("hash table is full")
        home = self.hash(key)
        for step in range(self.size):
            index = (home + step) % self.size
            if self._slots[index] is None:
                self._slots[index] = key
                self._count += 1
                return index
        raise OverflowError("hash table is full")

    def __getitem__(self, index: int) -> Any:
        """Return the key held in slot ``index``, or None for an empty slot."""
        return self._slots[index]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._slots!r})"