"""Classic computations on unweighted trees and forests."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from graphkit.dsu import DisjointSet


def _adjacency(n: int, edges) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _distances(adj: list[list[int]], source: int) -> list[int]:
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] < 0:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _farthest(dist: list[int]) -> int:
    return max(range(1, len(dist)), key=dist.__getitem__)


def _bfs_order(adj: list[list[int]], root: int) -> tuple[list[int], list[int]]:
    parent = [0] * len(adj)
    order = [root]
    seen = [False] * len(adj)
    seen[root] = True
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                order.append(v)
    return order, parent


def subordinate_counts(parents: Sequence[int]) -> list[int]:
    """Subordinate count of every employee; ``parents`` lists bosses of 2..n."""
    n = len(parents) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(parents, start=2):
        children[boss].append(employee)
    order = [1]
    for u in order:
        order.extend(children[u])
    size = [1] * (n + 1)
    for u in reversed(order):
        size[u] += sum(size[c] for c in children[u])
    return [s - 1 for s in size[1:]]


def tree_diameter(n: int, edges) -> int:
    """Number of edges on the longest path of the tree."""
    adj = _adjacency(n, edges)
    far = _farthest(_distances(adj, 1))
    return max(_distances(adj, far)[1:])


def max_distances(n: int, edges) -> list[int]:
    """For every node, the distance to the node farthest from it."""
    adj = _adjacency(n, edges)
    end_a = _farthest(_distances(adj, _farthest(_distances(adj, 1))))
    from_a = _distances(adj, end_a)
    end_b = _farthest(from_a)
    from_b = _distances(adj, end_b)
    return [max(a, b) for a, b in zip(from_a[1:], from_b[1:])]


def distance_sums(n: int, edges) -> list[int]:
    """For every node, the sum of distances to all other nodes."""
    adj = _adjacency(n, edges)
    order, parent = _bfs_order(adj, 1)
    size = [1] * (n + 1)
    down = [0] * (n + 1)
    for u in reversed(order[1:]):
        p = parent[u]
        size[p] += size[u]
        down[p] += down[u] + size[u]
    result = [0] * (n + 1)
    result[1] = down[1]
    for u in order[1:]:
        result[u] = result[parent[u]] + n - 2 * size[u]
    return result[1:]


def count_forest_trees(relatives: Sequence[int]) -> int:
    """Count the trees of a forest where node i+1 names relative ``relatives[i]``."""
    dsu = DisjointSet(len(relatives))
    for node, relative in enumerate(relatives, start=1):
        dsu.union(node, relative)
    return dsu.count()