"""Single-source and all-pairs shortest paths on a weighted graph."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dsakit.graph import Graph


def _weight(graph: Graph, i: int, j: int) -> float:
    return graph.matrix[i][j] if graph.has_edge(i, j) else math.inf


@dataclass(frozen=True)
class DijkstraResult:
    """Distances from ``source`` and the vertex preceding each on its shortest path.

    Unreachable vertices have distance ``math.inf`` and predecessor None; so
    does the source's predecessor.
    """

    source: int
    distances: tuple[float, ...]
    predecessors: tuple[int | None, ...]

    def path(self, target: int) -> list[int]:
        """Return the vertex indices from the source to ``target``.

        Raises ValueError when ``target`` cannot be reached.
        """
        if self.distances[target] == math.inf:
            raise ValueError(f"vertex {target} is unreachable from {self.source}")
        nodes = [target]
        while nodes[-1] != self.source:
            nodes.append(self.predecessors[nodes[-1]])
        nodes.reverse()
        return nodes


def dijkstra(graph: Graph, source: int = 0) -> DijkstraResult:
    """Shortest distances from ``source`` by Dijkstra's algorithm.

    Among equally near vertices the one with the lowest index is settled first.
    """
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"vertex index {source} out of range")
    distances = [_weight(graph, source, j) for j in range(n)]
    distances[source] = 0
    predecessors: list[int | None] = [
        source if j != source and graph.has_edge(source, j) else None
        for j in range(n)
    ]
    settled = {source}
    for _ in range(n - 1):
        reachable = [j for j in range(n) if j not in settled and distances[j] < math.inf]
        if not reachable:
            break
        nearest = min(reachable, key=distances.__getitem__)
        settled.add(nearest)
        for j in range(n):
            if j in settled:
                continue
            candidate = distances[nearest] + _weight(graph, nearest, j)
            if candidate < distances[j]:
                distances[j] = candidate
                predecessors[j] = nearest
    return DijkstraResult(source, tuple(distances), tuple(predecessors))


def floyd(graph: Graph) -> tuple[list[list[float]], list[list[int | None]]]:
    """All-pairs shortest paths by Floyd's algorithm.

    Returns ``(distances, predecessors)``: ``distances[i][j]`` is the length of
    the shortest path from i to j (``math.inf`` if none) and
    ``predecessors[i][j]`` the vertex before j on it (None if there is none).
    """
    n = len(graph)
    distances = [
        [0 if i == j and not graph.has_edge(i, j) else _weight(graph, i, j) for j in range(n)]
        for i in range(n)
    ]
    predecessors: list[list[int | None]] = [
        [i if graph.has_edge(i, j) else None for j in range(n)] for i in range(n)
    ]
    for via in range(n):
        for i in range(n):
            for j in range(n):
                candidate = distances[i][via] + distances[via][j]
                if candidate < distances[i][j]:
                    distances[i][j] = candidate
                    predecessors[i][j] = predecessors[via][j]
    return distances, predecessors