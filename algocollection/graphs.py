"""Graph traversals, shortest paths, spanning trees and orderings."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from enum import Enum


def _index(vertex: int, vertex_count: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
    return vertex - 1


class Graph:
    """Directed graph over vertices numbered 1..vertex_count."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, src: int, dest: int) -> None:
        """Add a directed edge from src to dest."""
        self._adjacency[_index(src, self.vertex_count)].append(
            _index(dest, self.vertex_count)
        )

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reached from start in breadth-first order."""
        first = _index(start, self.vertex_count)
        visited = {first}
        queue = deque([first])
        order = []
        while queue:
            node = queue.popleft()
            order.append(node + 1)
            for neighbour in self._adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def describe(self) -> str:
        """Return the adjacency lists as text, one block per vertex."""
        return "".join(
            f"Adjacency list of vertex {vertex} is \n"
            + "".join(f"{n + 1} " for n in neighbours)
            + "\n"
            for vertex, neighbours in enumerate(self._adjacency, 1)
        )


class DisjointSet:
    """Union-find with path halving; unseen items start as their own set."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {item: item for item in items}

    def find(self, item: Hashable) -> Hashable:
        parent = self._parent
        parent.setdefault(item, item)
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Join the sets of a and b; return False if they were already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True


def _undirected(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for x, y in edges:
        a, b = _index(x, vertex_count), _index(y, vertex_count)
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def is_bipartite(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return True if the undirected graph on vertices 1..vertex_count is two-colourable."""
    adjacency = _undirected(vertex_count, edges)
    side: list[int | None] = [None] * vertex_count
    for start in range(vertex_count):
        if side[start] is not None:
            continue
        side[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if side[neighbour] is None:
                    side[neighbour] = side[node] ^ 1
                    queue.append(neighbour)
                elif side[neighbour] == side[node]:
                    return False
    return True


def dfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order over a 0-indexed adjacency matrix, lowest neighbour first."""
    size = len(matrix)
    if not 0 <= start < size:
        raise ValueError(f"start {start} is outside 0..{size - 1}")
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack = [(start, iter(range(size)))]
    while stack:
        node, candidates = stack[-1]
        for candidate in candidates:
            if matrix[node][candidate] == 1 and not visited[candidate]:
                visited[candidate] = True
                order.append(candidate)
                stack.append((candidate, iter(range(size))))
                break
        else:
            stack.pop()
    return order


class _Colour(Enum):
    WHITE = 0
    GREY = 1
    BLACK = 2


def dfs_stack(
    adjacency: Mapping[Hashable, Iterable[Hashable]] | Sequence[Iterable[Hashable]],
    start: Hashable,
) -> list[Hashable]:
    """Depth-first order using an explicit stack; the last-listed neighbour is visited first."""
    if not isinstance(adjacency, Mapping):
        adjacency = dict(enumerate(adjacency))
    colour: dict[Hashable, _Colour] = {start: _Colour.GREY}
    stack = [start]
    order = []
    while stack:
        node = stack.pop()
        if colour.get(node, _Colour.WHITE) is not _Colour.GREY:
            continue
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            stack.append(neighbour)
            if colour.get(neighbour, _Colour.WHITE) is not _Colour.BLACK:
                colour[neighbour] = _Colour.GREY
        colour[node] = _Colour.BLACK
    return order


def dijkstra(
    vertex_count: int,
    edges: Iterable[tuple[int, int, int]],
    source: int,
    directed: bool = False,
) -> dict[int, int | None]:
    """Shortest distances from source over weighted edges (x, y, weight).

    Vertices are numbered 1..vertex_count; unreachable vertices map to None.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for x, y, weight in edges:
        a, b = _index(x, vertex_count), _index(y, vertex_count)
        adjacency[a].append((weight, b))
        if not directed:
            adjacency[b].append((weight, a))

    origin = _index(source, vertex_count)
    distance: list[int | None] = [None] * vertex_count
    distance[origin] = 0
    heap = [(0, origin)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist != distance[node]:
            continue
        for weight, neighbour in adjacency[node]:
            candidate = dist + weight
            current = distance[neighbour]
            if current is None or candidate < current:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return {vertex: d for vertex, d in enumerate(distance, 1)}


def kruskal(edges: Iterable[tuple[Hashable, Hashable, int]]) -> int:
    """Total weight of a minimum spanning forest over edges (u, v, cost)."""
    ordered = sorted(((cost, u, v) for u, v, cost in edges), key=lambda e: e[0])
    sets = DisjointSet()
    return sum(cost for cost, u, v in ordered if sets.union(u, v))


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices 1..vertex_count so that every edge (x, y) puts x before y."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for x, y in edges:
        adjacency[_index(x, vertex_count)].append(_index(y, vertex_count))

    visited = [False] * vertex_count
    finished: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node + 1)
    finished.reverse()
    return finished