"""Subtree problems answered offline in a single traversal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _rooted(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[list[int]], list[int], list[int]]:
    if n < 1:
        raise ValueError("the tree must have at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    depth = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    order = [1]
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                depth[v] = depth[u] + 1
                children[u].append(v)
                order.append(v)
    if len(order) != n:
        raise ValueError("the edges do not connect every node")
    return children, order, depth


def vasya_tree(n: int, edges: Iterable[tuple[int, int]],
               queries: Iterable[tuple[int, int, int]]) -> list[int]:
    """Final node values after each ``(v, d, x)`` adds x to the nodes of v's
    subtree at most d levels below v."""
    children, _, depth = _rooted(n, edges)
    pending: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for v, d, x in queries:
        pending[v].append((d, x))

    diff = [0] * (n + 1)
    values = [0] * (n + 1)
    running = 0
    stack = [(1, False)]
    while stack:
        u, leaving = stack.pop()
        level = depth[u]
        if leaving:
            running -= diff[level]
            for d, x in pending[u]:
                diff[level] -= x
                if level + d + 1 < n:
                    diff[level + d + 1] += x
            continue
        for d, x in pending[u]:
            diff[level] += x
            if level + d + 1 < n:
                diff[level + d + 1] -= x
        running += diff[level]
        values[u] = running
        stack.append((u, True))
        stack.extend((c, False) for c in reversed(children[u]))
    return values[1:]


class _Bag:
    """Colour multiset tracking how many colours occur at least k times."""

    def __init__(self) -> None:
        self.counts: dict[int, int] = {}
        self.size = 0
        self._at_least = [0]

    def add(self, color: int) -> None:
        count = self.counts.get(color, 0) + 1
        self.counts[color] = count
        if count == len(self._at_least):
            self._at_least.append(0)
        self._at_least[count] += 1
        self.size += 1

    def merge(self, other: _Bag) -> None:
        for color, count in other.counts.items():
            for _ in range(count):
                self.add(color)

    def at_least(self, k: int) -> int:
        return self._at_least[k] if k < len(self._at_least) else 0


def color_count_queries(colors: Sequence[int], edges: Iterable[tuple[int, int]],
                        queries: Iterable[tuple[int, int]]) -> list[int]:
    """For ``(v, k)``, the number of colours occurring at least k times in v's subtree."""
    colors = list(colors)
    children, order, _ = _rooted(len(colors), edges)
    queries = list(queries)
    asked: list[list[tuple[int, int]]] = [[] for _ in range(len(colors) + 1)]
    for idx, (v, k) in enumerate(queries):
        if k < 1:
            raise ValueError("k must be at least 1")
        asked[v].append((k, idx))

    answers = [0] * len(queries)
    bags: list[_Bag | None] = [None] * (len(colors) + 1)
    for u in reversed(order):
        kids = children[u]
        if kids:
            big = max(kids, key=lambda c: bags[c].size)
            bag = bags[big]
            for c in kids:
                if c != big:
                    bag.merge(bags[c])
                bags[c] = None
        else:
            bag = _Bag()
        bag.add(colors[u - 1])
        bags[u] = bag
        for k, idx in asked[u]:
            answers[idx] = bag.at_least(k)
    return answers