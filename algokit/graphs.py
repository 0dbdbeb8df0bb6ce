"""Matrix-based graph algorithms: shortest paths, closure, spanning trees, ordering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

NO_EDGE = 999
"""Cost at or above which a matrix entry means 'no edge'."""


@dataclass(frozen=True)
class Edge:
    """A weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    cost: int


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree in the order they were chosen."""

    edges: tuple[Edge, ...]

    @property
    def cost(self) -> int:
        return sum(edge.cost for edge in self.edges)


def _square(matrix: Iterable[Sequence]) -> list[list]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def floyd(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest path costs; absent edges carry a large cost."""
    dist = _square(matrix)
    for k, row_k in enumerate(dist):
        for row in dist:
            via = row[k]
            row[:] = [min(direct, via + onward) for direct, onward in zip(row, row_k)]
    return dist


def warshall(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the transitive closure of an adjacency matrix as a 0/1 matrix."""
    reach = [[1 if entry else 0 for entry in row] for row in _square(matrix)]
    for k, row_k in enumerate(reach):
        for row in reach:
            if row[k]:
                row[:] = [a | b for a, b in zip(row, row_k)]
    return reach


def kruskal(cost: Iterable[Sequence[int]]) -> SpanningTree:
    """Build a minimum spanning tree by repeatedly taking the cheapest safe edge."""
    matrix = _square(cost)
    size = len(matrix)
    candidates = sorted(
        (weight, i, j)
        for i, row in enumerate(matrix)
        for j, weight in enumerate(row)
        if weight < NO_EDGE
    )
    parent: dict[int, int] = {}

    def root(vertex: int) -> int:
        while vertex in parent:
            vertex = parent[vertex]
        return vertex

    used: set[frozenset[int]] = set()
    edges: list[Edge] = []
    for weight, i, j in candidates:
        if len(edges) >= size - 1:
            break
        pair = frozenset((i, j))
        if pair in used:
            continue
        used.add(pair)
        ru, rv = root(i), root(j)
        if ru != rv:
            edges.append(Edge(i, j, weight))
            parent[rv] = ru
    if len(edges) < size - 1:
        raise ValueError("graph is not connected")
    return SpanningTree(tuple(edges))


def prim(cost: Iterable[Sequence[int]]) -> SpanningTree:
    """Grow a minimum spanning tree from vertex 0 by adding the nearest neighbour."""
    matrix = _square(cost)
    size = len(matrix)
    tree = {0}
    edges: list[Edge] = []
    while len(edges) < size - 1:
        candidates = [
            (matrix[i][j], i, j)
            for i in sorted(tree)
            for j in range(size)
            if j not in tree and matrix[i][j] < NO_EDGE
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        weight, i, j = min(candidates)
        edges.append(Edge(i, j, weight))
        tree.add(j)
    return SpanningTree(tuple(edges))


def topological_order(adjacency: Iterable[Sequence[int]]) -> list[int]:
    """Order vertices by repeated source removal, lowest-numbered source first."""
    matrix = _square(adjacency)
    size = len(matrix)
    removed: set[int] = set()
    order: list[int] = []
    for _ in range(size):
        source = next(
            (
                j
                for j in range(size)
                if j not in removed
                and not any(matrix[i][j] for i in range(size) if i not in removed)
            ),
            None,
        )
        if source is None:
            raise ValueError("graph has a cycle")
        order.append(source)
        removed.add(source)
    return order