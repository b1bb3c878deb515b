"""Graph drills: shortest paths, adjacency representations, BFS and DFS.

The edge-list functions number vertices from 1 to ``vertex_count`` and treat
every edge as undirected. :func:`dijkstra` works on an adjacency list indexed
from 0.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

__all__ = [
    "ShortestPaths",
    "adjacency_list",
    "adjacency_matrix",
    "bfs_order",
    "dfs_order",
    "dijkstra",
]


class ShortestPaths(NamedTuple):
    """Distances from the source and each vertex's predecessor on its path.

    Unreachable vertices have a distance of None; the source and unreachable
    vertices have no predecessor (None).
    """

    distances: list[int | None]
    predecessors: list[int | None]


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], source: int
) -> ShortestPaths:
    """Find shortest distances from ``source`` over non-negative weighted edges.

    ``adjacency[v]`` lists ``(neighbour, weight)`` pairs leaving vertex ``v``.
    """
    count = len(adjacency)
    if not 0 <= source < count:
        raise ValueError(f"source {source} is not a vertex of the graph")
    edges = [list(neighbours) for neighbours in adjacency]
    for neighbours in edges:
        for target, weight in neighbours:
            if not 0 <= target < count:
                raise ValueError(f"edge leads to unknown vertex {target}")
            if weight < 0:
                raise ValueError(f"negative edge weight {weight}")
    distances: list[int | None] = [None] * count
    predecessors: list[int | None] = [None] * count
    settled = [False] * count
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if settled[vertex]:
            continue
        settled[vertex] = True
        for target, weight in edges[vertex]:
            candidate = distance + weight
            known = distances[target]
            if known is None or candidate < known:
                distances[target] = candidate
                predecessors[target] = vertex
                heapq.heappush(heap, (candidate, target))
    return ShortestPaths(distances, predecessors)


def _checked_edges(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    if vertex_count < 0:
        raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
    checked = []
    for x, y in edges:
        for vertex in (x, y):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        checked.append((x, y))
    return checked


def adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the 0/1 adjacency matrix; row and column ``i - 1`` belong to vertex ``i``."""
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for x, y in _checked_edges(vertex_count, edges):
        matrix[x - 1][y - 1] = 1
        matrix[y - 1][x - 1] = 1
    return matrix


def adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> dict[int, list[int]]:
    """Map every vertex to its neighbours in the order the edges were given."""
    neighbours: dict[int, list[int]] = {v: [] for v in range(1, vertex_count + 1)}
    for x, y in _checked_edges(vertex_count, edges):
        neighbours[x].append(y)
        neighbours[y].append(x)
    return neighbours


def _check_start(vertex_count: int, start: int) -> None:
    if not 1 <= start <= vertex_count:
        raise ValueError(f"start vertex {start} is outside 1..{vertex_count}")


def bfs_order(vertex_count: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the breadth-first visiting order, trying neighbours in ascending order."""
    matrix = adjacency_matrix(vertex_count, edges)
    _check_start(vertex_count, start)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        row = matrix[queue.popleft() - 1]
        for vertex in range(1, vertex_count + 1):
            if vertex not in visited and row[vertex - 1]:
                visited.add(vertex)
                order.append(vertex)
                queue.append(vertex)
    return order


def dfs_order(vertex_count: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Return the depth-first visiting order, trying neighbours in ascending order."""
    matrix = adjacency_matrix(vertex_count, edges)
    _check_start(vertex_count, start)

    def neighbours(vertex: int) -> Iterator[int]:
        row = matrix[vertex - 1]
        return (other for other in range(1, vertex_count + 1) if row[other - 1])

    visited = {start}
    order = [start]
    stack = [neighbours(start)]
    while stack:
        for vertex in stack[-1]:
            if vertex not in visited:
                visited.add(vertex)
                order.append(vertex)
                stack.append(neighbours(vertex))
                break
        else:
            stack.pop()
    return order