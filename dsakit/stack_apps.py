"""Applications of a stack: bracket matching and octal conversion."""

from __future__ import annotations

from dsakit.stacks_queues import LinkedStack

TERMINATOR = "#"
_PAIRS = {")": "(", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def brackets_match(text: str) -> bool:
    """Return True when the round and square brackets in ``text`` balance.

    Reading stops at the first ``#``. Any character other than ``()[]``
    before it makes the text unbalanced.
    """
    stack = LinkedStack()
    for ch in text:
        if ch == TERMINATOR:
            break
        if ch in _OPENERS:
            stack.push(ch)
        elif ch in _PAIRS:
            if not len(stack) or stack.peek() != _PAIRS[ch]:
                return False
            stack.pop()
        else:
            return False
    return not len(stack)


def to_octal(n: int) -> str:
    """Return the octal digits of a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return "0"
    stack = LinkedStack()
    while n:
        n, digit = divmod(n, 8)
        stack.push(digit)
    return "".join(str(digit) for digit in stack)