"""Graph algorithms: DFS topological ordering and Floyd-Warshall distances."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = ["INF", "topological_sort", "floyd_warshall", "format_distances"]

INF = math.inf


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices ``0..vertex_count-1`` by reversed DFS finishing time.

    Vertices are started from, and neighbours explored, in increasing order.
    For a graph with a cycle some order is still returned.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[set[int]] = [set() for _ in range(vertex_count)]
    for source, target in edges:
        if not (0 <= source < vertex_count and 0 <= target < vertex_count):
            raise ValueError(f"edge ({source}, {target}) names an unknown vertex")
        adjacency[source].add(target)
    neighbours = [sorted(targets) for targets in adjacency]

    visited = [False] * vertex_count
    finished: list[int] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(neighbours[start]))]
        while stack:
            vertex, remaining = stack[-1]
            for nxt in remaining:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(neighbours[nxt])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances; ``INF`` marks a missing edge."""
    size = len(matrix)
    dist = [list(row) for row in matrix]
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        via = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, onward in enumerate(via):
                candidate = to_k + onward
                if candidate < row[j]:
                    row[j] = candidate
    return dist


def _cell(distance: float) -> str:
    if distance == INF:
        return "INF "
    if isinstance(distance, float) and not distance.is_integer():
        return f"{distance:3g} "
    return f"{int(distance):3d} "


def format_distances(distances: Sequence[Sequence[float]]) -> str:
    """Render a distance matrix one row per line, ``INF`` for unreachable pairs."""
    return "".join("".join(_cell(d) for d in row) + "\n" for row in distances)