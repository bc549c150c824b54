"""Problems solved by building spanning forests edge by edge."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from graphkit.dsu import DisjointSet


def count_paths_within(
    n: int, edges: Iterable[tuple[int, int, int]], queries: Sequence[int]
) -> list[int]:
    """For each limit, the number of vertex pairs whose tree path has no heavier edge."""
    ordered = sorted((w, u, v) for u, v, w in edges)
    queries = list(queries)
    dsu = DisjointSet(n)
    answers = [0] * len(queries)
    total = 0
    position = 0
    for idx in sorted(range(len(queries)), key=queries.__getitem__):
        limit = queries[idx]
        while position < len(ordered) and ordered[position][0] <= limit:
            _, u, v = ordered[position]
            total += dsu.size(u) * dsu.size(v)
            dsu.union(u, v)
            position += 1
        answers[idx] = total
    return answers


def zoo_average(values: Sequence[int], edges: Iterable[tuple[int, int]]) -> float:
    """Average over all ordered-free pairs of the best bottleneck animal count."""
    n = len(values)
    if n < 2:
        raise ValueError("at least two areas are needed")
    weights = [0, *values]
    ordered = sorted(
        ((min(weights[u], weights[v]), u, v) for u, v in edges), reverse=True
    )
    dsu = DisjointSet(n)
    total = 0
    for w, u, v in ordered:
        if dsu.same_set(u, v):
            continue
        total += w * dsu.size(u) * dsu.size(v)
        dsu.union(u, v)
    return total / (n * (n - 1) / 2)


def rebuild_roads(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[int, int, int, int]]:
    """Moves ``(u, v, a, b)``: close road u-v and build a-b, joining all cities."""
    edges = list(edges)
    dsu = DisjointSet(n)
    extra = [not dsu.union(u, v) for u, v in edges]
    if n == 0 or dsu.size(1) == n:
        return []

    spare: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for (u, v), redundant in zip(edges, extra):
        if redundant:
            spare[dsu.find(u)].append((u, v))

    roots = dict.fromkeys(dsu.find(city) for city in range(1, n + 1))
    components = sorted(((len(spare[root]), root) for root in roots), reverse=True)

    plan = []
    following = 1
    for _, root in components:
        for u, v in spare[root]:
            if following >= len(components):
                break
            plan.append((u, v, root, components[following][1]))
            following += 1
    return plan


def new_road_queries(
    n: int, edges: Sequence[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Earliest day after which two cities are connected, or -1 if never."""
    dsu = DisjointSet(n)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for day, (u, v) in enumerate(edges, start=1):
        if dsu.union(u, v):
            adj[u].append((v, day))
            adj[v].append((u, day))

    parent = [0] * (n + 1)
    weight = [0] * (n + 1)
    depth = [0] * (n + 1)
    seen = [False] * (n + 1)
    for root in range(1, n + 1):
        if seen[root]:
            continue
        seen[root] = True
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v, day in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    weight[v] = day
                    depth[v] = depth[u] + 1
                    queue.append(v)

    levels = max(1, n.bit_length())
    up = [parent]
    best = [weight]
    for _ in range(1, levels):
        prev_up, prev_best = up[-1], best[-1]
        up.append([prev_up[p] for p in prev_up])
        best.append([max(b, prev_best[p]) for b, p in zip(prev_best, prev_up)])

    def path_max(a: int, b: int) -> int:
        if depth[a] < depth[b]:
            a, b = b, a
        result = 0
        diff = depth[a] - depth[b]
        for bit in range(levels):
            if diff >> bit & 1:
                result = max(result, best[bit][a])
                a = up[bit][a]
        if a == b:
            return result
        for bit in reversed(range(levels)):
            if up[bit][a] != up[bit][b]:
                result = max(result, best[bit][a], best[bit][b])
                a, b = up[bit][a], up[bit][b]
        return max(result, best[0][a], best[0][b])

    return [path_max(u, v) if dsu.same_set(u, v) else -1 for u, v in queries]