"""Reachability questions on directed graphs."""

from __future__ import annotations

from collections.abc import Iterable


def _reachable(adj: list[list[int]], starts: Iterable[int], blocked=()) -> set[int]:
    blocked = set(blocked)
    seen: set[int] = set()
    stack = [s for s in starts if s not in blocked]
    while stack:
        u = stack.pop()
        if u in seen:
            continue
        seen.add(u)
        stack.extend(v for v in adj[u] if v not in seen and v not in blocked)
    return seen


def count_ranked(n: int, matches: Iterable[tuple[int, int, int, int]]) -> int:
    """Count the cows that lie on a cycle of the "beats" relation.

    A match ``(a, b, sa, sb)`` means ``a`` beats ``b`` when ``sa > sb``,
    otherwise ``b`` beats ``a``.
    """
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b, sa, sb in matches:
        if sa > sb:
            adj[a].append(b)
        else:
            adj[b].append(a)
    return sum(1 for i in range(1, n + 1) if i in _reachable(adj, adj[i]))


def min_new_roads(n: int, edges: Iterable[tuple[int, int]], source: int) -> int:
    """Fewest one-way roads to add so every city is reachable from ``source``."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
    reached = _reachable(adj, [source])
    candidates = []
    for i in range(1, n + 1):
        if i in reached:
            continue
        candidates.append((len(_reachable(adj, [i], reached)), i))
    candidates.sort(reverse=True)
    covered: set[int] = set()
    roads = 0
    for _, city in candidates:
        if city not in covered:
            covered |= _reachable(adj, [city], reached)
            roads += 1
    return roads