"""Pairing dancers of opposite sex in arrival order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from dsakit.stacks_queues import CircularQueue

MAX_DANCERS = 20
MALE = "m"
FEMALE = "f"


@dataclass(frozen=True)
class Person:
    """A dancer; ``sex`` is ``"m"`` for men, anything else counts as a woman."""

    name: str
    sex: str


@dataclass
class Pairing:
    """Partners formed in order, and who waits first for the next dance."""

    pairs: list[tuple[Person, Person]] = field(default_factory=list)
    waiting: Person | None = None


def pair_dancers(people: Iterable[Person]) -> Pairing:
    """Queue men and women separately and pair them head to head.

    Raises ValueError for more than MAX_DANCERS people.
    """
    people = list(people)
    if len(people) > MAX_DANCERS:
        raise ValueError(f"at most {MAX_DANCERS} dancers are allowed")

    men = CircularQueue(MAX_DANCERS + 1)
    women = CircularQueue(MAX_DANCERS + 1)
    for person in people:
        (men if person.sex == MALE else women).enqueue(person)

    result = Pairing()
    while len(men) and len(women):
        result.pairs.append((men.dequeue(), women.dequeue()))
    if len(men):
        result.waiting = men.peek()
    elif len(women):
        result.waiting = women.peek()
    return result