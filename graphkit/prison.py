"""Path queries on trees: meeting points and digit strings along paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from graphkit.lca import RootedTree


def prison_escape(n: int, edges: Iterable[tuple[int, int]],
                  queries: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """For ``(a, b, c, d)``: walkers a→b and c→d move in step; return the time
    they meet strictly before either arrives, or -1."""
    tree = RootedTree(n, edges)
    answers = []
    for a, b, c, d in queries:
        anc = tree.lca(a, c)
        dis = tree.depth[a] + tree.depth[c] - 2 * tree.depth[anc]
        if dis % 2:
            answers.append(-1)
            continue
        half = dis // 2
        if anc == a:
            mid = tree.ancestor(c, half)
        elif anc == c:
            mid = tree.ancestor(a, half)
        elif tree.depth[a] < tree.depth[c]:
            mid = tree.ancestor(c, half)
        elif tree.depth[a] > tree.depth[c]:
            mid = tree.ancestor(a, half)
        else:
            mid = anc
        if mid in (b, d):
            answers.append(-1)
            continue
        on_ab = tree.distance(a, mid) + tree.distance(mid, b) == tree.distance(a, b)
        on_cd = tree.distance(c, mid) + tree.distance(mid, d) == tree.distance(c, d)
        answers.append(half if on_ab and on_cd else -1)
    return answers


def tree_number_queries(n: int, mod: int, edges: Iterable[tuple[int, int]],
                        digits: Sequence[int],
                        queries: Iterable[tuple[int, int]]) -> list[int]:
    """The number spelled by the digits on the path u→v, modulo ``mod``."""
    if mod < 1:
        raise ValueError("the modulus must be positive")
    tree = RootedTree(n, edges)
    num = [0, *digits]
    up = tree._up

    def p10(e: int) -> int:
        return pow(10, e, mod)

    val = [[num[p] % mod for p in tree.parent]]
    vald = [val[0][:]]
    for i in range(1, len(up)):
        shift = p10(1 << (i - 1))
        row, prev, prevd = up[i - 1], val[-1], vald[-1]
        val.append([(prev[j] * shift + prev[row[j]]) % mod for j in range(n + 1)])
        vald.append([(prevd[j] + prevd[row[j]] * shift) % mod for j in range(n + 1)])

    def jump_up(x: int, d: int) -> int:
        ans = 0
        for i, row in enumerate(up):
            if d >> i & 1:
                ans = (ans * p10(1 << i) + val[i][x]) % mod
                x = row[x]
        return ans

    def jump_down(x: int, d: int) -> int:
        ans = num[x] % mod
        shift = 1
        for i, row in enumerate(up):
            if d >> i & 1:
                ans = (ans + vald[i][x] * p10(shift)) % mod
                shift += 1 << i
                x = row[x]
        return ans

    answers = []
    for u, v in queries:
        anc = tree.lca(u, v)
        du = tree.depth[u] - tree.depth[anc]
        dv = tree.depth[v] - tree.depth[anc]
        if u != anc and v != anc:
            res = (num[u] * p10(du) + jump_up(u, du)) % mod * p10(dv)
            res = (res + jump_down(v, dv - 1)) % mod
        elif u == anc:
            res = jump_down(v, dv)
        else:
            res = (num[u] * p10(du) + jump_up(u, du)) % mod
        answers.append(res % mod)
    return answers