"""Heavy-light decomposition and the path and subtree problems it answers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Chains:
    """Heavy-light decomposition of a tree on 1..n rooted at 1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("the tree must have at least one node")
        adj: list[list[int]] = [[] for _ in range(n + 1)]
        for u, v in edges:
            adj[u].append(v)
            adj[v].append(u)
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        seen = [False] * (n + 1)
        seen[1] = True
        order = [1]
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    order.append(v)
        if len(order) != n:
            raise ValueError("the edges do not connect every node")
        size = [1] * (n + 1)
        for u in reversed(order[1:]):
            size[parent[u]] += size[u]
        heavy = [0] * (n + 1)
        for u in order:
            best = 0
            for v in adj[u]:
                if v != parent[u] and size[v] > best:
                    best = size[v]
                    heavy[u] = v

        pos = [0] * (n + 1)
        top = [0] * (n + 1)
        node_at = [0] * n
        top[1] = 1
        stack = [1]
        clock = 0
        while stack:
            u = stack.pop()
            pos[u] = clock
            node_at[clock] = u
            clock += 1
            for v in reversed(adj[u]):
                if v != parent[u] and v != heavy[u]:
                    top[v] = v
                    stack.append(v)
            if heavy[u]:
                top[heavy[u]] = top[u]
                stack.append(heavy[u])

        self.n = n
        self.parent = parent
        self.depth = depth
        self.pos = pos
        self.top = top
        self.node_at = node_at
        self.end = [pos[u] + size[u] - 1 for u in range(n + 1)]

    def path_segments(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        """Position ranges covering the path x..y, each listed shallow end first."""
        top, depth, pos, parent = self.top, self.depth, self.pos, self.parent
        while top[x] != top[y]:
            if depth[top[x]] < depth[top[y]]:
                x, y = y, x
            yield pos[top[x]], pos[x]
            x = parent[top[x]]
        if depth[x] > depth[y]:
            x, y = y, x
        yield pos[x], pos[y]


class _Assignments:
    """Range assignment with point reads; unassigned points read as ``default``."""

    def __init__(self, n: int, default: int = 0) -> None:
        self._n = n
        self._default = default
        self._tag: list[int | None] = [None] * (4 * n)

    def assign(self, lo: int, hi: int, value: int, p: int = 1, l: int = 0,
               r: int | None = None) -> None:
        if r is None:
            r = self._n - 1
        if hi < l or r < lo:
            return
        if lo <= l and r <= hi:
            self._tag[p] = value
            return
        if self._tag[p] is not None:
            self._tag[2 * p] = self._tag[2 * p + 1] = self._tag[p]
            self._tag[p] = None
        m = (l + r) // 2
        self.assign(lo, hi, value, 2 * p, l, m)
        self.assign(lo, hi, value, 2 * p + 1, m + 1, r)

    def value_at(self, i: int) -> int:
        p, l, r = 1, 0, self._n - 1
        while True:
            tag = self._tag[p]
            if tag is not None:
                return tag
            if l == r:
                return self._default
            m = (l + r) // 2
            if i <= m:
                p, r = 2 * p, m
            else:
                p, l = 2 * p + 1, m + 1


class _Marks:
    """Toggleable marks with a search for the first mark in a range."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._count = [0] * (4 * n)

    def toggle(self, i: int) -> None:
        p, l, r = 1, 0, self._n - 1
        path = []
        while l < r:
            path.append(p)
            m = (l + r) // 2
            if i <= m:
                p, r = 2 * p, m
            else:
                p, l = 2 * p + 1, m + 1
        self._count[p] ^= 1
        for q in reversed(path):
            self._count[q] = self._count[2 * q] + self._count[2 * q + 1]

    def first(self, lo: int, hi: int, p: int = 1, l: int = 0,
              r: int | None = None) -> int | None:
        if r is None:
            r = self._n - 1
        if hi < l or r < lo or self._count[p] == 0:
            return None
        if l == r:
            return l
        m = (l + r) // 2
        found = self.first(lo, hi, 2 * p, l, m)
        if found is not None:
            return found
        return self.first(lo, hi, 2 * p + 1, m + 1, r)


class _AddMax:
    """Range addition with range maximum, starting from zeros."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._max = [0] * (4 * n)
        self._lazy = [0] * (4 * n)

    def _push(self, p: int) -> None:
        delta = self._lazy[p]
        if delta:
            for c in (2 * p, 2 * p + 1):
                self._max[c] += delta
                self._lazy[c] += delta
            self._lazy[p] = 0

    def add(self, lo: int, hi: int, x: int, p: int = 1, l: int = 0,
            r: int | None = None) -> None:
        if r is None:
            r = self._n - 1
        if hi < l or r < lo:
            return
        if lo <= l and r <= hi:
            self._max[p] += x
            self._lazy[p] += x
            return
        self._push(p)
        m = (l + r) // 2
        self.add(lo, hi, x, 2 * p, l, m)
        self.add(lo, hi, x, 2 * p + 1, m + 1, r)
        self._max[p] = max(self._max[2 * p], self._max[2 * p + 1])

    def maximum(self, lo: int, hi: int, p: int = 1, l: int = 0,
                r: int | None = None) -> int:
        if r is None:
            r = self._n - 1
        if lo <= l and r <= hi:
            return self._max[p]
        self._push(p)
        m = (l + r) // 2
        if hi <= m:
            return self.maximum(lo, hi, 2 * p, l, m)
        if lo > m:
            return self.maximum(lo, hi, 2 * p + 1, m + 1, r)
        return max(self.maximum(lo, hi, 2 * p, l, m),
                   self.maximum(lo, hi, 2 * p + 1, m + 1, r))


def water_tree(n: int, edges: Iterable[tuple[int, int]],
               operations: Iterable[tuple[int, int]]) -> list[int]:
    """Run ``(1, v)`` fill v's subtree, ``(2, v)`` empty the path root..v and
    ``(3, v)`` report whether v holds water (1) or not (0)."""
    chains = _Chains(n, edges)
    water = _Assignments(n)
    answers = []
    for kind, v in operations:
        if kind == 1:
            water.assign(chains.pos[v], chains.end[v], 1)
        elif kind == 2:
            for lo, hi in chains.path_segments(1, v):
                water.assign(lo, hi, 0)
        elif kind == 3:
            answers.append(water.value_at(chains.pos[v]))
        else:
            raise ValueError(f"unknown operation kind {kind}")
    return answers


def first_black_queries(n: int, edges: Iterable[tuple[int, int]],
                        operations: Iterable[tuple[int, int]]) -> list[int]:
    """Run ``(0, v)`` colour toggles and ``(1, v)`` queries for the black node
    nearest the root on the path 1..v, or -1 when there is none."""
    chains = _Chains(n, edges)
    marks = _Marks(n)
    answers = []
    for kind, v in operations:
        if kind == 0:
            marks.toggle(chains.pos[v])
        elif kind == 1:
            found = None
            for lo, hi in reversed(list(chains.path_segments(1, v))):
                found = marks.first(lo, hi)
                if found is not None:
                    break
            answers.append(-1 if found is None else chains.node_at[found])
        else:
            raise ValueError(f"unknown operation kind {kind}")
    return answers


def subtree_path_queries(n: int, edges: Iterable[tuple[int, int]],
                         operations: Iterable[tuple[str, int, int]]) -> list[int]:
    """Run ``("add", u, x)`` subtree additions and ``("max", u, v)`` path maxima."""
    chains = _Chains(n, edges)
    values = _AddMax(n)
    answers = []
    for command, a, b in operations:
        if command == "add":
            values.add(chains.pos[a], chains.end[a], b)
        elif command == "max":
            answers.append(max(values.maximum(lo, hi)
                               for lo, hi in chains.path_segments(a, b)))
        else:
            raise ValueError(f"unknown command {command!r}")
    return answers