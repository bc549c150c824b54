"""Rooted trees with binary lifting, and the path problems built on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from graphkit.dsu import DisjointSet


class RootedTree:
    """A tree on nodes 1..n rooted at ``root`` with ancestor queries.

    ``labels`` gives a value for each edge (default: its 1-based position);
    ``parent_label[v]`` holds the label of the edge from ``v`` to its parent.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 1,
                 labels: Sequence[int] | None = None) -> None:
        edges = list(edges)
        if labels is None:
            labels = range(1, len(edges) + 1)
        adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        for (u, v), label in zip(edges, labels):
            adj[u].append((v, label))
            adj[v].append((u, label))
        self.n = n
        self.root = root
        self.parent = [0] * (n + 1)
        self.parent_label = [0] * (n + 1)
        self.depth = [0] * (n + 1)
        self.tin = [0] * (n + 1)
        self.order: list[int] = []
        seen = [False] * (n + 1)
        seen[root] = True
        stack = [root]
        while stack:
            u = stack.pop()
            self.tin[u] = len(self.order)
            self.order.append(u)
            for v, label in reversed(adj[u]):
                if not seen[v]:
                    seen[v] = True
                    self.parent[v] = u
                    self.parent_label[v] = label
                    self.depth[v] = self.depth[u] + 1
                    stack.append(v)
        if len(self.order) != n:
            raise ValueError("the edges do not connect every node")
        self._up = [self.parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[p] for p in prev])

    def ancestor(self, node: int, steps: int) -> int:
        """The ancestor ``steps`` levels above ``node``."""
        if not 0 <= steps <= self.depth[node]:
            raise ValueError(f"node {node} has no ancestor {steps} levels up")
        for bit, row in enumerate(self._up):
            if steps >> bit & 1:
                node = row[node]
        return node

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``."""
        if self.depth[a] < self.depth[b]:
            a, b = b, a
        a = self.ancestor(a, self.depth[a] - self.depth[b])
        if a == b:
            return a
        for row in reversed(self._up):
            if row[a] != row[b]:
                a, b = row[a], row[b]
        return self.parent[a]

    def distance(self, a: int, b: int) -> int:
        """Number of edges between ``a`` and ``b``."""
        return self.depth[a] + self.depth[b] - 2 * self.depth[self.lca(a, b)]


def _path_max(tree: RootedTree):
    best = [tree.parent_label[:]]
    for up in tree._up[:-1]:
        prev = best[-1]
        best.append([max(b, prev[p]) for b, p in zip(prev, up)])

    def query(a: int, b: int) -> int:
        if tree.depth[a] < tree.depth[b]:
            a, b = b, a
        result = 0
        diff = tree.depth[a] - tree.depth[b]
        for bit, row in enumerate(tree._up):
            if diff >> bit & 1:
                result = max(result, best[bit][a])
                a = row[a]
        if a == b:
            return result
        for bit in reversed(range(len(tree._up))):
            row = tree._up[bit]
            if row[a] != row[b]:
                result = max(result, best[bit][a], best[bit][b])
                a, b = row[a], row[b]
        return max(result, best[0][a], best[0][b])

    return query


def obx_queries(n: int, edges: Sequence[tuple[int, int]],
                queries: Iterable[tuple[int, int]]) -> list[int]:
    """For each ``(l, r)``, the fewest first edges connecting all of l..r."""
    dsu = DisjointSet(n)
    kept, labels = [], []
    for idx, (u, v) in enumerate(edges, start=1):
        if dsu.union(u, v):
            kept.append((u, v))
            labels.append(idx)
    tree = RootedTree(n, kept, labels=labels)
    path_max = _path_max(tree)
    weights = [path_max(i, i + 1) for i in range(1, n)]

    table = [weights]
    span = 1
    while 2 * span <= len(weights):
        prev = table[-1]
        table.append([max(prev[i], prev[i + span]) for i in range(len(prev) - span)])
        span *= 2

    answers = []
    for l, r in queries:
        if l > r:
            l, r = r, l
        if l == r:
            answers.append(0)
            continue
        lo, hi = l - 1, r - 2
        k = (hi - lo + 1).bit_length() - 1
        answers.append(max(table[k][lo], table[k][hi - (1 << k) + 1]))
    return answers


def barn_reach_counts(limit: int, parents: Sequence[tuple[int, int]]) -> list[int]:
    """For every node, how many nodes of its subtree lie within ``limit`` of it.

    ``parents[i]`` is ``(parent, length)`` for node ``i + 2``.
    """
    n = len(parents) + 1
    tree = RootedTree(n, [(p, node) for node, (p, _) in enumerate(parents, start=2)],
                      labels=[w for _, w in parents])
    dist = [0] * (n + 1)
    for u in tree.order[1:]:
        dist[u] = dist[tree.parent[u]] + tree.parent_label[u]
    delta = [0] * (n + 1)
    for i in range(1, n + 1):
        top = i
        for row in reversed(tree._up):
            a = row[top]
            if a != 0 and dist[i] - dist[a] <= limit:
                top = a
        delta[i] += 1
        delta[tree.parent[top]] -= 1
    for u in reversed(tree.order[1:]):
        delta[tree.parent[u]] += delta[u]
    return delta[1:]


def tree_dfs_roots(n: int, edges: Iterable[tuple[int, int]]) -> str:
    """A string whose i-th character is 1 when a DFS from node i yields the
    spanning tree formed greedily from the edges in order."""
    dsu = DisjointSet(n)
    kept, extra = [], []
    for u, v in edges:
        if u == v:
            raise ValueError("self-loops are not allowed")
        (kept if dsu.union(u, v) else extra).append((u, v))
    tree = RootedTree(n, kept)
    mark = [0] * (n + 1)
    for u, v in extra:
        if tree.depth[u] > tree.depth[v]:
            u, v = v, u
        if tree.lca(u, v) == u:
            mark[v] -= 1
            mark[tree.ancestor(v, tree.depth[v] - tree.depth[u] - 1)] += 1
        else:
            mark[tree.root] += 1
            mark[u] -= 1
            mark[v] -= 1
    for u in tree.order[1:]:
        mark[u] += mark[tree.parent[u]]
    return "".join("1" if m == 0 else "0" for m in mark[1:])


def railway_edges(n: int, k: int, edges: Sequence[tuple[int, int]],
                  ministers: Iterable[Sequence[int]]) -> list[int]:
    """Sorted ids of the edges needed by at least ``k`` ministers."""
    tree = RootedTree(n, edges)
    count = [0] * (n + 1)
    for cities in ministers:
        nodes = sorted(cities, key=tree.tin.__getitem__)
        if not nodes:
            continue
        for u, v in zip(nodes, nodes[1:] + nodes[:1]):
            count[u] += 1
            count[v] += 1
            count[tree.lca(u, v)] -= 2
    for u in reversed(tree.order[1:]):
        count[tree.parent[u]] += count[u]
    return sorted(tree.parent_label[v] for v in tree.order[1:] if count[v] >= 2 * k)