"""Subtree and level queries answered over an Euler tour of a rooted tree."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence

# Regions with more members than this get their answers precomputed.
_HEAVY_REGION = 500


def _children_from_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("the tree must have at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    seen = [False] * (n + 1)
    seen[1] = True
    order = [1]
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                children[u].append(v)
                order.append(v)
    if len(order) != n:
        raise ValueError("the edges do not connect every node")
    return children


def _children_from_parents(parents: Sequence[int]) -> list[list[int]]:
    n = len(parents) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for node, boss in enumerate(parents, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"parent {boss} of node {node} is outside 1..{n}")
        children[boss].append(node)
    return children


def _tour(children: list[list[int]]) -> tuple[list[int], list[int], list[int], list[int]]:
    """Entry times, last entry time inside each subtree, depths and preorder."""
    n = len(children) - 1
    tin = [0] * (n + 1)
    tout = [0] * (n + 1)
    depth = [0] * (n + 1)
    order: list[int] = []
    stack = [(1, False)]
    while stack:
        u, leaving = stack.pop()
        if leaving:
            tout[u] = len(order) - 1
            continue
        tin[u] = len(order)
        order.append(u)
        stack.append((u, True))
        for v in reversed(children[u]):
            depth[v] = depth[u] + 1
            stack.append((v, False))
    if len(order) != n:
        raise ValueError("the parents do not form a tree rooted at 1")
    return tin, tout, depth, order


class _Fenwick:
    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, i: int, delta: int) -> None:
        i += 1
        while i < len(self._tree):
            self._tree[i] += delta
            i += i & -i

    def _prefix(self, i: int) -> int:
        total = 0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def range_sum(self, lo: int, hi: int) -> int:
        return self._prefix(hi + 1) - self._prefix(lo)


class _PaintTree:
    """Range assignment of colour masks with range OR queries."""

    def __init__(self, masks: list[int]) -> None:
        self._n = len(masks)
        self._val = [0] * (4 * self._n)
        self._tag = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1, masks)

    def _build(self, p: int, l: int, r: int, masks: list[int]) -> None:
        if l == r:
            self._val[p] = masks[l]
            return
        m = (l + r) // 2
        self._build(2 * p, l, m, masks)
        self._build(2 * p + 1, m + 1, r, masks)
        self._val[p] = self._val[2 * p] | self._val[2 * p + 1]

    def _push(self, p: int) -> None:
        tag = self._tag[p]
        if tag:
            for c in (2 * p, 2 * p + 1):
                self._val[c] = self._tag[c] = tag
            self._tag[p] = 0

    def paint(self, lo: int, hi: int, mask: int, p: int = 1, l: int = 0,
              r: int | None = None) -> None:
        if r is None:
            r = self._n - 1
        if hi < l or r < lo:
            return
        if lo <= l and r <= hi:
            self._val[p] = self._tag[p] = mask
            return
        self._push(p)
        m = (l + r) // 2
        self.paint(lo, hi, mask, 2 * p, l, m)
        self.paint(lo, hi, mask, 2 * p + 1, m + 1, r)
        self._val[p] = self._val[2 * p] | self._val[2 * p + 1]

    def union(self, lo: int, hi: int, p: int = 1, l: int = 0,
              r: int | None = None) -> int:
        if r is None:
            r = self._n - 1
        if hi < l or r < lo:
            return 0
        if lo <= l and r <= hi:
            return self._val[p]
        self._push(p)
        m = (l + r) // 2
        return self.union(lo, hi, 2 * p, l, m) | self.union(lo, hi, 2 * p + 1, m + 1, r)


def distinct_color_queries(colors: Sequence[int], edges: Iterable[tuple[int, int]],
                           queries: Iterable[tuple[int, ...]]) -> list[int]:
    """Run ``(1, v, c)`` repaints of v's subtree and ``(2, v)`` distinct-colour counts."""
    colors = list(colors)
    if any(c < 1 for c in colors):
        raise ValueError("colours start at 1")
    children = _children_from_edges(len(colors), edges)
    tin, tout, _, _ = _tour(children)
    masks = [0] * len(colors)
    for node, color in enumerate(colors, start=1):
        masks[tin[node]] = 1 << (color - 1)
    tree = _PaintTree(masks)
    answers = []
    for kind, v, *rest in queries:
        if kind == 1:
            (color,) = rest
            if color < 1:
                raise ValueError("colours start at 1")
            tree.paint(tin[v], tout[v], 1 << (color - 1))
        elif kind == 2:
            answers.append(bin(tree.union(tin[v], tout[v])).count("1"))
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers


def promotion_counts(proficiency: Sequence[int], parents: Sequence[int]) -> list[int]:
    """For every employee, how many subordinates are more proficient.

    ``parents`` lists the bosses of employees 2..n.
    """
    rating = [0, *proficiency]
    n = len(proficiency)
    if n != len(parents) + 1:
        raise ValueError("there must be one boss for every employee but the first")
    tin, tout, _, _ = _tour(_children_from_parents(parents))
    seen = _Fenwick(n)
    counts = [0] * (n + 1)
    for node in sorted(range(1, n + 1), key=lambda i: (rating[i], i), reverse=True):
        seen.add(tin[node], 1)
        counts[node] = seen.range_sum(tin[node], tout[node]) - 1
    return counts[1:]


def subtree_sum_queries(values: Sequence[int], edges: Iterable[tuple[int, int]],
                        queries: Iterable[tuple[int, ...]]) -> list[int]:
    """Run ``(1, s, x)`` value updates and ``(2, s)`` subtree-sum queries."""
    current = [0, *values]
    children = _children_from_edges(len(values), edges)
    tin, tout, _, _ = _tour(children)
    sums = _Fenwick(len(values))
    for node in range(1, len(current)):
        sums.add(tin[node], current[node])
    answers = []
    for kind, s, *rest in queries:
        if kind == 1:
            (x,) = rest
            sums.add(tin[s], x - current[s])
            current[s] = x
        elif kind == 2:
            answers.append(sums.range_sum(tin[s], tout[s]))
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers


def palindrome_queries(parents: Sequence[int], letters: str,
                       queries: Iterable[tuple[int, int]]) -> list[bool]:
    """For ``(v, h)``: can the letters at depth h inside v's subtree form a palindrome?

    The root is at depth 1.
    """
    n = len(parents) + 1
    if len(letters) != n:
        raise ValueError("there must be one letter for every node")
    if any(not "a" <= ch <= "z" for ch in letters):
        raise ValueError("letters must be lowercase a to z")
    tin, tout, depth, order = _tour(_children_from_parents(parents))
    levels: dict[int, tuple[list[int], list[int]]] = {}
    for u in order:
        entries, prefix = levels.setdefault(depth[u] + 1, ([], [0]))
        entries.append(tin[u])
        prefix.append(prefix[-1] ^ (1 << (ord(letters[u - 1]) - ord("a"))))
    answers = []
    for v, h in queries:
        entries, prefix = levels.get(h, ([], [0]))
        lo = bisect_left(entries, tin[v])
        hi = bisect_right(entries, tout[v])
        parity = prefix[hi] ^ prefix[lo] if hi > lo else 0
        answers.append(parity & (parity - 1) == 0)
    return answers


def region_queries(regions: Sequence[int], parents: Sequence[int], region_count: int,
                   queries: Iterable[tuple[int, int]]) -> list[int]:
    """For ``(r1, r2)``, count pairs where a region-r1 node is an ancestor (or
    the node itself) of a region-r2 node."""
    n = len(regions)
    if n != len(parents) + 1:
        raise ValueError("there must be one parent for every node but the root")
    region_of = [0, *regions]
    if any(not 1 <= r <= region_count for r in regions):
        raise ValueError(f"regions must lie in 1..{region_count}")
    children = _children_from_parents(parents)
    tin, tout, _, order = _tour(children)
    parent = [0] * (n + 1)
    for u in order:
        for c in children[u]:
            parent[c] = u

    members: list[list[int]] = [[] for _ in range(region_count + 1)]
    for u in order:
        members[region_of[u]].append(u)
    entries = [[tin[u] for u in group] for group in members]

    heavy: dict[int, list[int]] = {}
    for r in range(1, region_count + 1):
        if len(members[r]) <= _HEAVY_REGION:
            continue
        above = [0] * (n + 1)
        counts = [0] * (region_count + 1)
        for u in order:
            above[u] = above[parent[u]] + (region_of[u] == r)
            counts[region_of[u]] += above[u]
        heavy[r] = counts

    answers = []
    for r1, r2 in queries:
        if not (1 <= r1 <= region_count and 1 <= r2 <= region_count):
            raise ValueError(f"regions must lie in 1..{region_count}")
        if r1 in heavy:
            answers.append(heavy[r1][r2])
            continue
        targets = entries[r2]
        answers.append(sum(
            bisect_right(targets, tout[u]) - bisect_left(targets, tin[u])
            for u in members[r1]
        ))
    return answers