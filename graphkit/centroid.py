"""Centroid decomposition: weighted path search and nearest marked node."""

from __future__ import annotations

from collections.abc import Iterable


def _centroid(links: list[list[int]], removed: list[bool], root: int) -> int:
    parent = {root: -1}
    order = [root]
    for u in order:
        for v in links[u]:
            if not removed[v] and v not in parent:
                parent[v] = u
                order.append(v)
    size = dict.fromkeys(order, 1)
    for u in reversed(order[1:]):
        size[parent[u]] += size[u]
    total = len(order)
    for u in order:
        heaviest = total - size[u]
        for v in links[u]:
            if not removed[v] and parent.get(v) == u:
                heaviest = max(heaviest, size[v])
        if 2 * heaviest <= total:
            return u
    return root


def min_race_length(n: int, k: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Fewest edges on a path of total length exactly ``k``, or -1.

    Nodes are numbered from 0 and edge lengths must not be negative.
    """
    if n < 1:
        raise ValueError("the tree must have at least one node")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        if w < 0:
            raise ValueError("edge lengths must not be negative")
        adj[u].append((v, w))
        adj[v].append((u, w))
    links = [[v for v, _ in row] for row in adj]
    removed = [False] * n
    best: int | None = None
    pending = [0]
    while pending:
        c = _centroid(links, removed, pending.pop())
        removed[c] = True
        shortest = {0: 0}
        for v, w in adj[c]:
            if removed[v]:
                continue
            found = []
            stack = [(v, c, w, 1)]
            while stack:
                u, p, dist, steps = stack.pop()
                if dist > k:
                    continue
                found.append((dist, steps))
                stack.extend((x, u, dist + wx, steps + 1)
                             for x, wx in adj[u] if x != p and not removed[x])
            for dist, steps in found:
                other = shortest.get(k - dist)
                if other is not None and (best is None or other + steps < best):
                    best = other + steps
            for dist, steps in found:
                if steps < shortest.get(dist, steps + 1):
                    shortest[dist] = steps
        pending.extend(v for v in links[c] if not removed[v])
    return -1 if best is None else best


def xenia_queries(n: int, edges: Iterable[tuple[int, int]],
                  queries: Iterable[tuple[int, int]]) -> list[int]:
    """Node 1 starts red; ``(1, u)`` paints u red and ``(2, u)`` asks for the
    distance from u to the nearest red node."""
    if n < 1:
        raise ValueError("the tree must have at least one node")
    links: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        links[u].append(v)
        links[v].append(u)
    removed = [False] * (n + 1)
    ancestors: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    pending = [1]
    while pending:
        c = _centroid(links, removed, pending.pop())
        dist = {c: 0}
        queue = [c]
        for u in queue:
            for v in links[u]:
                if not removed[v] and v not in dist:
                    dist[v] = dist[u] + 1
                    queue.append(v)
        for u, d in dist.items():
            ancestors[u].append((c, d))
        removed[c] = True
        pending.extend(v for v in links[c] if not removed[v])
    if not all(ancestors[1:]):
        raise ValueError("the edges do not connect every node")

    nearest: dict[int, int] = {}

    def paint(u: int) -> None:
        for c, d in ancestors[u]:
            if d < nearest.get(c, d + 1):
                nearest[c] = d

    paint(1)
    answers = []
    for kind, u in queries:
        if kind == 1:
            paint(u)
        elif kind == 2:
            answers.append(min(nearest[c] + d for c, d in ancestors[u] if c in nearest))
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers