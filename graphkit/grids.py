"""Connectivity problems on rectangular grids of heights."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from graphkit.dsu import DisjointSet

_STEPS = ((0, 1), (0, -1), (-1, 0), (1, 0))
_MAX_COST = 10**7


def _rows(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must have equal length")
    return rows


def mountain_heights(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    """Topographic prominence of every cell of a height map.

    Cells of the highest summit keep their own height; every other cell gets
    the drop it must descend before reaching ground that leads higher.
    """
    rows = _rows(grid)
    n = len(rows)
    m = len(rows[0]) if rows else 0
    heights = [h for row in rows for h in row]
    if any(h < 0 for h in heights):
        raise ValueError("heights must not be negative")

    link = list(range(n * m))
    peaks = [[cell] for cell in range(n * m)]
    result = [0] * (n * m)

    def find(x: int) -> int:
        root = x
        while link[root] != root:
            root = link[root]
        while link[x] != root:
            link[x], x = root, link[x]
        return root

    for cell in sorted(range(n * m), key=lambda c: -heights[c]):
        r, c = divmod(cell, m)
        level = heights[cell]
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < n and 0 <= nc < m):
                continue
            other = nr * m + nc
            if level > heights[other]:
                continue
            a, b = find(cell), find(other)
            if a == b:
                continue
            if heights[peaks[b][0]] > heights[peaks[a][0]]:
                a, b = b, a
            link[b] = a
            if heights[peaks[a][0]] == heights[peaks[b][0]]:
                peaks[a].extend(peaks[b])
            else:
                for peak in peaks[b]:
                    result[peak] = heights[peak] - level
            peaks[b] = []

    for cell in range(n * m):
        root = find(cell)
        for peak in peaks[root]:
            result[peak] = heights[peak]
        peaks[root] = []
    return [result[r * m:(r + 1) * m] for r in range(n)]


def ski_course_rating(
    grid: Iterable[Sequence[int]],
    threshold: int,
    starts: Iterable[Sequence[int]],
) -> int:
    """Sum of the difficulty ratings of all starting cells of a ski area."""
    rows = _rows(grid)
    flags = _rows(starts)
    if len(rows) != len(flags) or any(len(a) != len(b) for a, b in zip(rows, flags)):
        raise ValueError("the start grid must have the same shape as the heights")
    n = len(rows)
    m = len(rows[0]) if rows else 0

    edges = []
    for r in range(n):
        for c in range(m):
            cell = r * m + c + 1
            if c + 1 < m:
                edges.append((abs(rows[r][c] - rows[r][c + 1]), cell, cell + 1))
            if r + 1 < n:
                edges.append((abs(rows[r][c] - rows[r + 1][c]), cell, cell + m))
    edges.sort()

    dsu = DisjointSet(n * m)
    pending = [0] + [int(flag) for row in flags for flag in row]
    total = 0
    for difficulty, a, b in edges:
        ra, rb = dsu.find(a), dsu.find(b)
        if ra == rb:
            continue
        if dsu.size(ra) + dsu.size(rb) >= threshold:
            total += difficulty * (pending[ra] + pending[rb])
            pending[ra] = pending[rb] = 0
        merged = pending[ra] + pending[rb]
        dsu.union(ra, rb)
        pending[dsu.find(ra)] = merged
    return total


def tractor_cost(grid: Iterable[Sequence[int]]) -> int:
    """Least slope limit letting a tractor reach at least half of a square field."""
    rows = _rows(grid)
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("the field must be square")
    needed = (n * n + 1) // 2

    pairs = []
    for r in range(n):
        for c in range(n):
            cell = r * n + c + 1
            if c + 1 < n:
                pairs.append((abs(rows[r][c] - rows[r][c + 1]), cell, cell + 1))
            if r + 1 < n:
                pairs.append((abs(rows[r][c] - rows[r + 1][c]), cell, cell + n))

    def reaches(limit: int) -> bool:
        dsu = DisjointSet(n * n)
        largest = 0
        for slope, a, b in pairs:
            if slope <= limit and dsu.union(a, b):
                largest = max(largest, dsu.size(a))
        return largest >= needed

    low, high = 1, _MAX_COST
    while low < high:
        mid = (low + high) // 2
        if reaches(mid):
            high = mid
        else:
            low = mid + 1
    return low


def lit_rooms(n: int, switches: Iterable[tuple[int, int, int, int]]) -> int:
    """Rooms lit when walking an ``n`` by ``n`` barn from the lit room (1, 1).

    Each switch ``(x, y, a, b)`` in room (x, y) lights room (a, b).
    """
    if n < 1:
        raise ValueError("the barn must have at least one room")
    controls: dict[tuple[int, int], list[tuple[int, int]]] = defaultdict(list)
    for x, y, a, b in switches:
        controls[(x - 1, y - 1)].append((a - 1, b - 1))

    lit = {(0, 0)}
    visited = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        room = queue.popleft()
        if room not in lit:
            continue
        for target in controls.get(room, ()):
            if target in lit:
                continue
            if target in visited:
                queue.append(target)
            lit.add(target)
        x, y = room
        for dx, dy in ((1, 0), (-1, 0), (0, -1), (0, 1)):
            nxt = (x + dx, y + dy)
            if not (0 <= nxt[0] < n and 0 <= nxt[1] < n) or nxt in visited:
                continue
            visited.add(nxt)
            queue.append(nxt)
    return len(lit)