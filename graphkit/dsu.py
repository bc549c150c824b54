"""Disjoint-set union and the connectivity problems built on it."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Union by size over the elements 1..n, with path compression."""

    def __init__(self, n: int) -> None:
        self._n = n
        # A negative entry marks a root and holds minus the size of its set.
        self._parent = [-1] * (n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} is outside 1..{self._n}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] >= 0:
            root = self._parent[root]
        while x != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already merged."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._parent[a] > self._parent[b]:
            a, b = b, a
        self._parent[a] += self._parent[b]
        self._parent[b] = a
        return True

    def same_set(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return -self._parent[self.find(x)]

    def count(self) -> int:
        """Number of disjoint sets."""
        return sum(1 for entry in self._parent[1:] if entry < 0)


def process_union_find(n: int, operations: Iterable[tuple[int, int, int]]) -> list[bool]:
    """Run ``(kind, u, v)`` operations: kind 0 merges, any other kind asks."""
    dsu = DisjointSet(n)
    answers = []
    for kind, u, v in operations:
        if kind == 0:
            dsu.union(u, v)
        else:
            answers.append(dsu.same_set(u, v))
    return answers


def road_construction(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """After each road, report the component count and the largest component size."""
    dsu = DisjointSet(n)
    components = n
    largest = 1 if n else 0
    result = []
    for a, b in roads:
        if dsu.union(a, b):
            components -= 1
            largest = max(largest, dsu.size(a))
        result.append((components, largest))
    return result


def restructuring_company(n: int, queries: Iterable[tuple[int, int, int]]) -> list[bool]:
    """Kind 1 merges two teams, kind 2 merges every team in a range, others ask."""
    dsu = DisjointSet(n)
    next_unmerged = list(range(1, n + 2))
    answers = []
    for kind, u, v in queries:
        if kind == 1:
            dsu.union(u, v)
        elif kind == 2:
            if u > v:
                u, v = v, u
            while u < v:
                dsu.union(u, v)
                after = next_unmerged[u]
                next_unmerged[u] = next_unmerged[v]
                u = after
        else:
            answers.append(dsu.same_set(u, v))
    return answers