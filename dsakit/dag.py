"""Topological sorting and critical-path analysis of directed acyclic graphs."""

from __future__ import annotations

from dataclasses import dataclass

from dsakit.graph import Graph


def in_degrees(graph: Graph) -> list[int]:
    """Return the number of edges entering each vertex."""
    n = len(graph)
    return [sum(graph.has_edge(i, j) for i in range(n)) for j in range(n)]


def topological_sort(graph: Graph) -> list[int]:
    """Return the vertex indices in a topological order.

    Ready vertices are kept on a stack, so the most recently freed one comes
    next. Raises ValueError when the graph has a cycle.
    """
    n = len(graph)
    degrees = in_degrees(graph)
    stack = [i for i in range(n) if degrees[i] == 0]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for j in range(n):
            if graph.has_edge(vertex, j):
                degrees[j] -= 1
                if degrees[j] == 0:
                    stack.append(j)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order


@dataclass(frozen=True)
class CriticalPath:
    """Event times of an activity network, indexed by vertex.

    ``activities`` lists the edges ``(i, j)`` with no slack, in row order.
    """

    order: list[int]
    early: list[float]
    late: list[float]
    activities: list[tuple[int, int]]

    @property
    def length(self) -> float:
        """The earliest time at which every event has happened."""
        return max(self.early, default=0)


def critical_path(graph: Graph) -> CriticalPath:
    """Compute earliest and latest event times and the critical activities.

    Raises ValueError when the graph has a cycle.
    """
    n = len(graph)
    order = topological_sort(graph)
    early: list[float] = [0] * n
    for vertex in order:
        early[vertex] = max(
            (early[i] + graph.matrix[i][vertex] for i in range(n) if graph.has_edge(i, vertex)),
            default=0,
        )
    length = max(early, default=0)
    late: list[float] = [length] * n
    for vertex in reversed(order):
        late[vertex] = min(
            (late[j] - graph.matrix[vertex][j] for j in range(n) if graph.has_edge(vertex, j)),
            default=length,
        )
    activities = [
        (i, j)
        for i in range(n)
        for j in range(n)
        if graph.has_edge(i, j) and late[j] - graph.matrix[i][j] - early[i] == 0
    ]
    return CriticalPath(order, early, late, activities)