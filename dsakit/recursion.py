"""Classic recursive exercises: Tower of Hanoi and factorial."""

from __future__ import annotations


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", spare: str = "B"
) -> list[tuple[str, str]]:
    """Return the moves that carry ``n`` discs from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("at least one disc is needed")
    moves: list[tuple[str, str]] = []

    def move(count: int, src: str, dst: str, via: str) -> None:
        if count == 1:
            moves.append((src, dst))
            return
        move(count - 1, src, via, dst)
        moves.append((src, dst))
        move(count - 1, via, dst, src)

    move(n, source, target, spare)
    return moves


def factorial(n: int) -> int:
    """Return ``n!``; values of ``n`` below 2 give 1."""
    return 1 if n <= 1 else n * factorial(n - 1)