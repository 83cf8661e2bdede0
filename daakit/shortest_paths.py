"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_INFINITY = 99999


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    src: int
    dest: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[float]:
    """Shortest distance from source to every vertex; unreachable ones are inf."""
    edges = list(edges)
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} is out of range")
    for edge in edges:
        if not (0 <= edge.src < vertex_count and 0 <= edge.dest < vertex_count):
            raise ValueError(f"edge {edge} refers to a vertex out of range")

    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edges:
            if dist[edge.src] + edge.weight < dist[edge.dest]:
                dist[edge.dest] = dist[edge.src] + edge.weight

    if any(dist[e.src] + e.weight < dist[e.dest] for e in edges):
        raise NegativeCycleError("graph contains negative weight cycle")
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances of an adjacency matrix, as a new matrix."""
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        via = dist[k]
        for row in dist:
            to_k = row[k]
            for j, through in enumerate(via):
                if to_k + through < row[j]:
                    row[j] = to_k + through
    return dist


def format_distance_matrix(
    dist: Sequence[Sequence[float]], infinity_threshold: float = DEFAULT_INFINITY
) -> str:
    """Render a distance matrix in 7-wide columns, with INF at or above the threshold."""
    return "\n".join(
        "".join(
            f"{'INF':>7}" if value >= infinity_threshold else f"{value:>7}"
            for value in row
        )
        for row in dist
    )