"""Breadth-first and Dijkstra based shortest-path problems."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence


def _bfs(adj: list[list[int]], source: int) -> list[int | None]:
    dist: list[int | None] = [None] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] is None:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def piggyback_cost(b: int, e: int, p: int, n: int, edges) -> int:
    """Least energy for walkers from 1 and 2 to reach field ``n``, sharing a route."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    costs = [
        d1 * b + d2 * e + dn * p
        for d1, d2, dn in zip(_bfs(adj, 1)[1:], _bfs(adj, 2)[1:], _bfs(adj, n)[1:])
        if d1 is not None and d2 is not None and dn is not None
    ]
    if not costs:
        raise ValueError(f"fields 1, 2 and {n} are not connected")
    return min(costs)


def shortest_path_tree(n: int, edges, start: int) -> tuple[int, list[int]]:
    """Lightest shortest-path tree from ``start``: total weight and edge ids."""
    adj: list[list[tuple[int, int, int]]] = [[] for _ in range(n + 1)]
    for idx, (u, v, w) in enumerate(edges, start=1):
        adj[u].append((w, v, idx))
        adj[v].append((w, u, idx))
    dist: list[int | None] = [None] * (n + 1)
    last_weight = [0] * (n + 1)
    last_edge = [0] * (n + 1)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for w, v, idx in adj[u]:
            candidate = d + w
            if dist[v] == candidate and last_weight[v] > w:
                last_weight[v], last_edge[v] = w, idx
            elif dist[v] is None or dist[v] > candidate:
                dist[v] = candidate
                last_weight[v], last_edge[v] = w, idx
                heapq.heappush(heap, (candidate, v))
    chosen = []
    total = 0
    for v in range(1, n + 1):
        if v == start:
            continue
        if last_edge[v] == 0:
            raise ValueError(f"vertex {v} is unreachable from {start}")
        chosen.append(last_edge[v])
        total += last_weight[v]
    return total, chosen


def shortcut_savings(n: int, t: int, cows: Sequence[int], edges) -> int:
    """Largest total time saved by a shortcut of length ``t`` to the barn at field 1."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    dist: list[int | None] = [None] * (n + 1)
    parent = [0] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, w in adj[u]:
            candidate = d + w
            if dist[v] == candidate:
                parent[v] = min(parent[v], u)
            elif dist[v] is None or dist[v] > candidate:
                dist[v] = candidate
                parent[v] = u
                heapq.heappush(heap, (candidate, v))
    if any(d is None for d in dist[1:]):
        raise ValueError("every field must be reachable from the barn")

    children: list[list[int]] = [[] for _ in range(n + 1)]
    for v in range(2, n + 1):
        children[parent[v]].append(v)
    order = [1]
    for u in order:
        order.extend(children[u])
    herd = [0, *cows]
    for u in reversed(order[1:]):
        herd[parent[u]] += herd[u]
    return max(0, max(h * (d - t) for h, d in zip(herd[1:], dist[1:])))