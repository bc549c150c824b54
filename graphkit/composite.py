"""Compositions of linear functions along tree paths, with point updates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from graphkit.hld import _Chains

MOD = 998244353

Linear = tuple[int, int]
_IDENTITY: Linear = (1, 0)


def _then(f: Linear, g: Linear) -> Linear:
    """The function that applies ``f`` first and ``g`` second."""
    return g[0] * f[0] % MOD, (g[0] * f[1] + g[1]) % MOD


class _CompositeTree:
    """Segment tree of linear functions composed in either direction."""

    def __init__(self, functions: list[Linear]) -> None:
        size = 1
        while size < len(functions):
            size *= 2
        self._size = size
        self._fwd = [_IDENTITY] * (2 * size)
        self._rev = [_IDENTITY] * (2 * size)
        for i, f in enumerate(functions):
            self._fwd[size + i] = self._rev[size + i] = f
        for p in range(size - 1, 0, -1):
            self._pull(p)

    def _pull(self, p: int) -> None:
        left, right = 2 * p, 2 * p + 1
        self._fwd[p] = _then(self._fwd[left], self._fwd[right])
        self._rev[p] = _then(self._rev[right], self._rev[left])

    def set(self, i: int, f: Linear) -> None:
        p = i + self._size
        self._fwd[p] = self._rev[p] = f
        p //= 2
        while p:
            self._pull(p)
            p //= 2

    def forward(self, lo: int, hi: int) -> Linear:
        """Composition over positions lo..hi, lowest position applied first."""
        left = right = _IDENTITY
        l, r = lo + self._size, hi + self._size + 1
        while l < r:
            if l & 1:
                left = _then(left, self._fwd[l])
                l += 1
            if r & 1:
                r -= 1
                right = _then(self._fwd[r], right)
            l //= 2
            r //= 2
        return _then(left, right)

    def backward(self, lo: int, hi: int) -> Linear:
        """Composition over positions lo..hi, highest position applied first."""
        first = last = _IDENTITY
        l, r = lo + self._size, hi + self._size + 1
        while l < r:
            if l & 1:
                last = _then(self._rev[l], last)
                l += 1
            if r & 1:
                r -= 1
                first = _then(first, self._rev[r])
            l //= 2
            r //= 2
        return _then(first, last)


def _path_function(chains: _Chains, tree: _CompositeTree, u: int, v: int) -> Linear:
    top, depth, pos, parent = chains.top, chains.depth, chains.pos, chains.parent
    head = _IDENTITY
    tail: list[Linear] = []
    while top[u] != top[v]:
        if depth[top[u]] >= depth[top[v]]:
            head = _then(head, tree.backward(pos[top[u]], pos[u]))
            u = parent[top[u]]
        else:
            tail.append(tree.forward(pos[top[v]], pos[v]))
            v = parent[top[v]]
    if depth[u] >= depth[v]:
        head = _then(head, tree.backward(pos[v], pos[u]))
    else:
        head = _then(head, tree.forward(pos[u], pos[v]))
    for f in reversed(tail):
        head = _then(head, f)
    return head


def vertex_path_composite(functions: Sequence[tuple[int, int]],
                          edges: Iterable[tuple[int, int]],
                          queries: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Run ``(0, p, c, d)`` to set f_p(x) = c*x + d and ``(1, u, v, x)`` to apply
    the functions on the path u..v to x in path order, modulo 998244353.

    Nodes are numbered from 0.
    """
    funcs = [(a % MOD, b % MOD) for a, b in functions]
    n = len(funcs)
    chains = _Chains(n, [(u + 1, v + 1) for u, v in edges])
    ordered = [_IDENTITY] * n
    for node in range(1, n + 1):
        ordered[chains.pos[node]] = funcs[node - 1]
    tree = _CompositeTree(ordered)
    answers = []
    for kind, a, b, c in queries:
        if kind == 0:
            tree.set(chains.pos[a + 1], (b % MOD, c % MOD))
        elif kind == 1:
            f = _path_function(chains, tree, a + 1, b + 1)
            answers.append((f[0] * c + f[1]) % MOD)
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers