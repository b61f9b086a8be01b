"""Undirected graphs on an adjacency matrix, with traversals and spanning trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


class Graph:
    """A graph whose vertices are labelled and whose edges live in a square matrix.

    An entry of 0 means no edge; so does an entry equal to ``no_edge`` when
    that is given (it plays the part of infinity in weighted graphs).
    """

    def __init__(
        self,
        vertices: Sequence[Any],
        matrix: Sequence[Sequence[float]],
        no_edge: float | None = None,
    ) -> None:
        self.vertices = tuple(vertices)
        self.matrix = tuple(tuple(row) for row in matrix)
        if len(self.matrix) != len(self.vertices) or any(
            len(row) != len(self.vertices) for row in self.matrix
        ):
            raise ValueError("matrix must be square with one row per vertex")
        self.no_edge = no_edge

    def __len__(self) -> int:
        return len(self.vertices)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.vertices):
            raise IndexError(f"vertex index {index} out of range")

    def has_edge(self, i: int, j: int) -> bool:
        """Tell whether the matrix holds an edge from ``i`` to ``j``."""
        value = self.matrix[i][j]
        return value != 0 and value != self.no_edge

    def _cost(self, i: int, j: int) -> float:
        return self.matrix[i][j] if self.has_edge(i, j) else math.inf

    def neighbours(self, index: int) -> list[int]:
        """Return the indices adjacent to ``index`` in ascending order."""
        self._check(index)
        return [j for j in range(len(self.vertices)) if self.has_edge(index, j)]

    def edge_count(self) -> int:
        """Return the number of undirected edges."""
        total = sum(
            self.has_edge(i, j)
            for i in range(len(self.vertices))
            for j in range(len(self.vertices))
        )
        return total // 2

    def dfs(self, start: int = 0) -> list[Any]:
        """Return the labels reached depth first from ``start``."""
        self._check(start)
        visited: set[int] = set()
        order: list[Any] = []

        def visit(index: int) -> None:
            order.append(self.vertices[index])
            visited.add(index)
            for j in self.neighbours(index):
                if j not in visited:
                    visit(j)

        visit(start)
        return order

    def bfs(self, start: int = 0) -> list[Any]:
        """Return the labels reached breadth first from ``start``."""
        self._check(start)
        visited = {start}
        order = [self.vertices[start]]
        queue = deque([start])
        while queue:
            index = queue.popleft()
            for j in self.neighbours(index):
                if j not in visited:
                    visited.add(j)
                    order.append(self.vertices[j])
                    queue.append(j)
        return order

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.vertices)!r})"


@dataclass(frozen=True)
class TreeEdge:
    """An edge chosen for a spanning tree, by vertex label."""

    start: Any
    end: Any
    weight: float


def prim(graph: Graph, start: int = 0) -> list[TreeEdge]:
    """Grow a minimum spanning tree from ``start``, edges in the order chosen.

    Raises ValueError when the graph is not connected.
    """
    graph._check(start)
    n = len(graph)
    in_tree = {start}
    best = {j: (graph._cost(start, j), start) for j in range(n) if j != start}
    edges: list[TreeEdge] = []
    for _ in range(n - 1):
        candidates = [j for j in sorted(best) if best[j][0] != math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        chosen = min(candidates, key=lambda j: best[j][0])
        weight, origin = best.pop(chosen)
        in_tree.add(chosen)
        edges.append(TreeEdge(graph.vertices[origin], graph.vertices[chosen], weight))
        for j in best:
            cost = graph._cost(chosen, j)
            if cost < best[j][0]:
                best[j] = (cost, chosen)
    return edges


def kruskal(graph: Graph) -> list[TreeEdge]:
    """Return a minimum spanning forest, edges in order of increasing weight."""
    n = len(graph)
    candidates = sorted(
        (
            (graph.matrix[i][j], i, j)
            for i in range(n)
            for j in range(i + 1, n)
            if graph.has_edge(i, j)
        ),
        key=lambda item: item[0],
    )
    component = list(range(n))
    edges: list[TreeEdge] = []
    for weight, i, j in candidates:
        keep, merge = component[i], component[j]
        if keep == merge:
            continue
        edges.append(TreeEdge(graph.vertices[i], graph.vertices[j], weight))
        component = [keep if c == merge else c for c in component]
    return edges