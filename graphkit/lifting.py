"""Problems on successor graphs solved with binary lifting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _lifting_table(successor: list[int], levels: int) -> list[list[int]]:
    table = [successor]
    for _ in range(1, levels):
        prev = table[-1]
        table.append([prev[p] for p in prev])
    return table


def _jump(table: list[list[int]], node: int, steps: int) -> int:
    for bit, row in enumerate(table):
        if steps >> bit & 1:
            node = row[node]
    return node


def planet_queries(successors: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Planet reached from ``x`` after ``k`` teleports, for each ``(x, k)``."""
    queries = list(queries)
    steps = max((k for _, k in queries), default=0)
    table = _lifting_table([0, *successors], max(1, steps.bit_length()))
    return [_jump(table, x, k) for x, k in queries]


def planet_distances(successors: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Fewest teleports from ``a`` to ``b`` for each ``(a, b)``, or -1."""
    n = len(successors)
    nxt = [0, *successors]

    cycle_of = [-1] * (n + 1)
    position = [0] * (n + 1)
    cycle_lengths: list[int] = []
    state = [0] * (n + 1)
    for start in range(1, n + 1):
        if state[start]:
            continue
        path = []
        v = start
        while state[v] == 0:
            state[v] = 1
            path.append(v)
            v = nxt[v]
        if state[v] == 1:
            cycle = path[path.index(v):]
            for pos, node in enumerate(cycle):
                cycle_of[node] = len(cycle_lengths)
                position[node] = pos
            cycle_lengths.append(len(cycle))
        for node in path:
            state[node] = 2

    children: list[list[int]] = [[] for _ in range(n + 1)]
    for v in range(1, n + 1):
        if cycle_of[v] < 0:
            children[nxt[v]].append(v)

    depth = [0] * (n + 1)
    entry = list(range(n + 1))
    tin = [0] * (n + 1)
    tout = [0] * (n + 1)
    timer = 0
    for root in range(1, n + 1):
        if cycle_of[root] < 0:
            continue
        stack = [(root, False)]
        while stack:
            v, finished = stack.pop()
            if finished:
                tout[v] = timer - 1
                continue
            tin[v] = timer
            timer += 1
            stack.append((v, True))
            for c in children[v]:
                depth[c] = depth[v] + 1
                entry[c] = entry[v]
                stack.append((c, False))

    answers = []
    for a, b in queries:
        if cycle_of[b] >= 0:
            e = entry[a]
            if cycle_of[e] != cycle_of[b]:
                answers.append(-1)
            else:
                length = cycle_lengths[cycle_of[b]]
                answers.append(depth[a] + (position[b] - position[e]) % length)
        elif entry[a] == entry[b] and tin[b] <= tin[a] <= tout[b]:
            answers.append(depth[a] - depth[b])
        else:
            answers.append(-1)
    return answers


def min_cyclic_segments(values: Sequence[int], k: int) -> int:
    """Fewest contiguous segments of the cyclic array with sums at most ``k``."""
    n = len(values)
    if n == 0:
        raise ValueError("the array must not be empty")
    if max(values) > k:
        raise ValueError("an element exceeds the segment limit")

    reach = [0] * n
    cover = [0] * n
    r = 0
    total = 0
    for i, value in enumerate(values):
        while r <= 2 * n and total + values[r % n] <= k:
            total += values[r % n]
            r += 1
        reach[i] = r % n
        cover[i] = r - i
        total -= value

    ups = [reach]
    lengths = [cover]
    for _ in range(1, max(1, n.bit_length())):
        prev_up, prev_len = ups[-1], lengths[-1]
        ups.append([prev_up[j] for j in prev_up])
        lengths.append([a + prev_len[j] for a, j in zip(prev_len, prev_up)])

    def covered(start: int, segments: int) -> int:
        total_len = 0
        for bit, (up, length) in enumerate(zip(ups, lengths)):
            if segments >> bit & 1:
                total_len += length[start]
                start = up[start]
        return total_len

    def feasible(segments: int) -> bool:
        return any(covered(start, segments) >= n for start in range(n))

    low, high = 1, n
    while low < high:
        mid = (low + high) // 2
        if feasible(mid):
            high = mid
        else:
            low = mid + 1
    return low