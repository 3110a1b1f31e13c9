"""Graph algorithms: connected components and minimum spanning trees."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = [-1] * size
        self._rank = [1] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != -1:
            root = self._parent[root]
        while item != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return whether they were separate."""
        first = self.find(a)
        second = self.find(b)
        if first == second:
            return False
        if self._rank[first] < self._rank[second]:
            self._parent[first] = second
            self._rank[second] += self._rank[second]
        else:
            self._parent[second] = first
            self._rank[first] += self._rank[first]
        return True


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is out of range")


def connected_components(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return the connected components in depth-first visiting order.

    Each edge is ``(u, v)`` or ``(u, v, weight)``; weights are ignored.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v, *_ in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    component.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def kruskal_mst_weight(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> int:
    """Return the total weight of a minimum spanning forest by Kruskal's method."""
    ordered = sorted((weight, x, y) for x, y, weight in edges)
    for _, x, y in ordered:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
    forest = DisjointSet(vertex_count)
    return sum(weight for weight, x, y in ordered if forest.union(x, y))


class MstEdge(NamedTuple):
    """An edge of a spanning tree, from ``parent`` to ``child``."""

    parent: int
    child: int
    weight: int


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[MstEdge]:
    """Return a minimum spanning tree of an adjacency matrix by Prim's method.

    A zero entry means no edge. The tree is grown from vertex 0 and its edges
    are listed by child vertex, from 1 upwards.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    if size == 0:
        return []
    best = [float("inf")] * size
    parent = [-1] * size
    in_tree = [False] * size
    best[0] = 0
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and best[v] < float("inf")]
        if not candidates:
            raise ValueError("the graph is not connected")
        chosen = min(candidates, key=best.__getitem__)
        in_tree[chosen] = True
        for v, weight in enumerate(matrix[chosen]):
            if weight != 0 and not in_tree[v] and weight < best[v]:
                best[v] = weight
                parent[v] = chosen
    if any(p == -1 for p in parent[1:]):
        raise ValueError("the graph is not connected")
    return [MstEdge(parent[v], v, matrix[parent[v]][v]) for v in range(1, size)]