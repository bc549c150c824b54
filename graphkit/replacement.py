"""Shortest paths that avoid one edge of a given shortest path."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

_UNREACHED = float("inf")


def _dijkstra(adj: list[list[tuple[int, int, int]]], source: int):
    dist: list[float] = [_UNREACHED] * len(adj)
    parent = [0] * len(adj)
    done = [False] * len(adj)
    settled = []
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        settled.append(u)
        for v, w, _ in adj[u]:
            if d + w < dist[v]:
                dist[v] = d + w
                parent[v] = u
                heapq.heappush(heap, (d + w, v))
    return dist, parent, settled


def _branch(index: dict[int, int], parent: list[int], settled: list[int]) -> dict[int, int]:
    """Index of the path node where each vertex's tree path leaves the path."""
    branch: dict[int, int] = {}
    for u in settled:
        branch[u] = index[u] if u in index else branch[parent[u]]
    return branch


def shortest_path_replacements(n: int, edges: Iterable[tuple[int, int, int]],
                               s: int, t: int, path: Sequence[int]) -> list[int]:
    """For each edge of the shortest path ``path`` from s to t, the length of the
    shortest s-t route avoiding it, or -1 when none exists."""
    edges = list(edges)
    path = list(path)
    if not path or path[0] != s or path[-1] != t:
        raise ValueError("the path must run from s to t")
    if len(set(path)) != len(path):
        raise ValueError("the path must not repeat a node")
    adj: list[list[tuple[int, int, int]]] = [[] for _ in range(n + 1)]
    for idx, (u, v, w) in enumerate(edges):
        if w < 0:
            raise ValueError("edge lengths must not be negative")
        adj[u].append((v, w, idx))
        adj[v].append((u, w, idx))

    ds, ps, order_s = _dijkstra(adj, s)
    dt, pt, order_t = _dijkstra(adj, t)

    used = set()
    total = 0
    for a, b in zip(path, path[1:]):
        options = [(w, idx) for v, w, idx in adj[a] if v == b]
        if not options:
            raise ValueError(f"nodes {a} and {b} are not joined by an edge")
        w, idx = min(options)
        used.add(idx)
        total += w
    if total != ds[t]:
        raise ValueError("the path is not a shortest path")

    index = {node: i for i, node in enumerate(path)}
    leave = _branch(index, ps, order_s)
    join = _branch(index, pt, order_t)

    candidates = []
    for idx, (u, v, w) in enumerate(edges):
        if idx in used:
            continue
        for x, y in ((u, v), (v, u)):
            if x in leave and y in join and leave[x] < join[y]:
                candidates.append((ds[x] + w + dt[y], leave[x], join[y] - 1))
    candidates.sort()

    k = len(path) - 1
    answers = [-1] * k
    next_open = list(range(k + 1))

    def find(i: int) -> int:
        root = i
        while next_open[root] != root:
            root = next_open[root]
        while next_open[i] != root:
            next_open[i], i = root, next_open[i]
        return root

    for value, lo, hi in candidates:
        i = find(lo)
        while i <= hi:
            answers[i] = int(value)
            next_open[i] = i + 1
            i = find(i + 1)
    return answers