"""Directed graphs: topological ordering and single-source shortest paths."""

from __future__ import annotations

import heapq
import math
from typing import Sequence


class Graph:
    """Directed graph on vertices ``0 .. vertex_count - 1`` kept as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(
                f"vertex {vertex} out of range for {len(self._adjacency)} vertices"
            )

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def topological_sort(self) -> list[int]:
        """Return the vertices in reverse depth-first finishing order.

        For an acyclic graph every edge points from an earlier vertex to a
        later one. Searches start from vertices in ascending order and follow
        edges in the order they were added. Cycles are not reported.
        """
        visited = [False] * len(self._adjacency)
        finished: list[int] = []
        for start in range(len(self._adjacency)):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                node, children = stack[-1]
                for child in children:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, iter(self._adjacency[child])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        return finished[::-1]


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return shortest distances from ``source`` over an adjacency matrix.

    ``graph[u][v]`` is the weight of the edge u -> v, with 0 meaning no edge.
    Unreachable vertices get ``math.inf``.
    """
    matrix = [list(row) for row in graph]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range for {n} vertices")
    for row in matrix:
        for weight in row:
            if weight < 0:
                raise ValueError(f"edge weights must be non-negative, got {weight}")

    dist = [math.inf] * n
    dist[source] = 0
    done = [False] * n
    queue = [(0, source)]
    while queue:
        d, u = heapq.heappop(queue)
        if done[u]:
            continue
        done[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not done[v] and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(queue, (dist[v], v))
    return dist