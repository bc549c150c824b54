"""Distinct colours in subtrees under repainting of single nodes."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence

from graphkit.euler_tour import _Fenwick
from graphkit.lca import RootedTree


def victory_queries(colors: Sequence[int], edges: Iterable[tuple[int, int]],
                    queries: Iterable[tuple[int, ...]]) -> list[int]:
    """Run ``(1, e, x)`` repaints of node e to colour x and ``(2, u)`` counts of
    distinct colours in u's subtree. The tree on 1..n is rooted at 1."""
    colors = list(colors)
    n = len(colors)
    if n < 1:
        raise ValueError("the tree must have at least one node")
    tree = RootedTree(n, edges)
    tin, order, parent = tree.tin, tree.order, tree.parent
    size = [1] * (n + 1)
    for u in reversed(order[1:]):
        size[parent[u]] += size[u]

    # Every node counts once; consecutive same-coloured nodes in tour order
    # cancel once at their lowest common ancestor.
    counts = _Fenwick(n)
    for u in range(1, n + 1):
        counts.add(tin[u], 1)
    groups: dict[int, list[int]] = {}
    for u in order:
        groups.setdefault(colors[u - 1], []).append(tin[u])
    for times in groups.values():
        for a, b in zip(times, times[1:]):
            counts.add(tin[tree.lca(order[a], order[b])], -1)

    def relink(times: list[int], idx: int, sign: int) -> None:
        node = order[times[idx]]
        left = order[times[idx - 1]] if idx > 0 else None
        right = order[times[idx + 1]] if idx + 1 < len(times) else None
        if left is not None:
            counts.add(tin[tree.lca(left, node)], sign)
        if right is not None:
            counts.add(tin[tree.lca(node, right)], sign)
        if left is not None and right is not None:
            counts.add(tin[tree.lca(left, right)], -sign)

    answers = []
    for kind, u, *rest in queries:
        if kind == 1:
            (color,) = rest
            times = groups[colors[u - 1]]
            idx = bisect_left(times, tin[u])
            relink(times, idx, 1)
            times.pop(idx)
            if not times:
                del groups[colors[u - 1]]
            colors[u - 1] = color
            times = groups.setdefault(color, [])
            insort(times, tin[u])
            relink(times, bisect_left(times, tin[u]), -1)
        elif kind == 2:
            answers.append(counts.range_sum(tin[u], tin[u] + size[u] - 1))
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers