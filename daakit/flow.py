"""Maximum flow through a capacity matrix by augmenting shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _residual_graph(
    capacity: Sequence[Sequence[int]], source: int, sink: int
) -> list[list[int]]:
    residual = [list(row) for row in capacity]
    size = len(residual)
    if any(len(row) != size for row in residual):
        raise ValueError("capacity matrix must be square")
    for name, vertex in (("source", source), ("sink", sink)):
        if not 0 <= vertex < size:
            raise ValueError(f"{name} vertex {vertex} is out of range")
    if source == sink:
        raise ValueError("source and sink must be different vertices")
    return residual


def _find_path(
    residual: list[list[int]], source: int, sink: int, stop_at_sink: bool
) -> list[int | None] | None:
    """Breadth-first search; return the parent of each vertex if the sink is reached."""
    parent: list[int | None] = [None] * len(residual)
    visited = [False] * len(residual)
    visited[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, cap in enumerate(residual[u]):
            if visited[v] or cap <= 0:
                continue
            parent[v] = u
            if stop_at_sink and v == sink:
                return parent
            visited[v] = True
            queue.append(v)
    return parent if visited[sink] else None


def _max_flow(
    capacity: Sequence[Sequence[int]], source: int, sink: int, stop_at_sink: bool
) -> int:
    residual = _residual_graph(capacity, source, sink)
    total = 0
    while (parent := _find_path(residual, source, sink, stop_at_sink)) is not None:
        path = []
        v = sink
        while v != source:
            u = parent[v]
            path.append((u, v))
            v = u
        bottleneck = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        total += bottleneck
    return total


def edmonds_karp(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Maximum flow from source to sink; each search explores the whole graph."""
    return _max_flow(capacity, source, sink, stop_at_sink=False)


def ford_fulkerson(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Maximum flow from source to sink; each search stops once the sink is found."""
    return _max_flow(capacity, source, sink, stop_at_sink=True)