"""Edge-pairing tours and layered toll routes."""

from __future__ import annotations

from collections.abc import Iterable


def wizard_tours(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int, int]]:
    """Tours ``(x, y, z)`` using roads x-y and y-z, each road at most once."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    visited = [False] * (n + 1)
    tours: list[tuple[int, int, int]] = []
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, 0, iter(adj[start]), [])]
        while stack:
            u, p, neighbours, acc = stack[-1]
            descended = False
            for v in neighbours:
                if v == p:
                    continue
                if visited[v]:
                    if u < v:
                        acc.append(v)
                else:
                    visited[v] = True
                    stack.append((v, u, iter(adj[v]), []))
                    descended = True
                    break
            if descended:
                continue
            stack.pop()
            tours.extend((x, u, z) for x, z in zip(acc[::2], acc[1::2]))
            paired = len(acc) % 2 == 0
            if not paired and p:
                tours.append((acc[-1], u, p))
            if paired and stack:
                stack[-1][3].append(u)
    return tours


def toll_costs(k: int, n: int, orders: Iterable[tuple[int, int, int]],
               queries: Iterable[tuple[int, int]]) -> list[int]:
    """Cheapest route cost for each ``(a, b)`` across blocks of ``k`` nodes, or -1."""
    if k < 1:
        raise ValueError("the block size must be positive")
    base: list[dict[int, int]] = [{} for _ in range(n)]
    for u, v, w in orders:
        if u > v:
            u, v = v, u
        if u // k + 1 == v // k:
            base[u][v] = min(w, base[u].get(v, w))

    def compose(front: dict[int, int], layer: list[dict[int, int]]) -> dict[int, int]:
        result: dict[int, int] = {}
        for node, cost in front.items():
            for target, w in layer[node].items():
                total = cost + w
                if total < result.get(target, total + 1):
                    result[target] = total
        return result

    levels = max(1, (max(n - 1, 0) // k).bit_length())
    table = [base]
    for _ in range(1, levels):
        prev = table[-1]
        table.append([compose(prev[j], prev) for j in range(n)])

    answers = []
    for a, b in queries:
        blocks = b // k - a // k
        if blocks <= 0 or blocks >> levels:
            answers.append(-1)
            continue
        current = {a: 0}
        for bit, layer in enumerate(table):
            if blocks >> bit & 1:
                current = compose(current, layer)
        answers.append(current.get(b, -1))
    return answers