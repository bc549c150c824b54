"""Finding cycles in directed, undirected and weighted graphs."""

from __future__ import annotations

_INFINITY = 10**18


def find_negative_cycle(n: int, edges) -> list[int] | None:
    """Return a negative-weight cycle ``[v, ..., v]`` or None."""
    edges = list(edges)
    dist = [_INFINITY] * (n + 1)
    dist[0] = 0
    if n:
        dist[1] = 0
    trace = [0] * (n + 1)
    last = -1
    for _ in range(n):
        last = -1
        for u, v, w in edges:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                trace[v] = u
                last = v
    if last == -1:
        return None
    node = last
    for _ in range(n):
        node = trace[node]
    cycle = [trace[node]]
    while cycle[-1] != node:
        cycle.append(trace[cycle[-1]])
    cycle.append(cycle[0])
    cycle.reverse()
    return cycle


def _search(n: int, adj: list[list[int]], undirected: bool) -> list[int] | None:
    visited = [False] * (n + 1)
    on_stack = [False] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = on_stack[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for u in neighbours:
                if undirected and (u == parent[node] or u == node):
                    continue
                if on_stack[u]:
                    path = [node]
                    while path[-1] != u:
                        path.append(parent[path[-1]])
                    path.append(node)
                    if not undirected:
                        path.reverse()
                    return path
                if not visited[u]:
                    visited[u] = on_stack[u] = True
                    parent[u] = node
                    stack.append((u, iter(adj[u])))
                    break
            else:
                on_stack[node] = False
                stack.pop()
    return None


def find_round_trip(n: int, edges) -> list[int] | None:
    """Return a cycle ``[v, ..., v]`` of an undirected graph or None."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return _search(n, adj, undirected=True)


def find_directed_cycle(n: int, edges) -> list[int] | None:
    """Return a cycle ``[v, ..., v]`` of a directed graph or None."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adj[u].append(v)
    return _search(n, adj, undirected=False)