"""Shortest-path problems on undirected graphs with vertices 1..n."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def shortest_path_avoiding_triplets(
    n: int,
    edges: Iterable[tuple[int, int]],
    forbidden: Iterable[tuple[int, int, int]] = (),
) -> tuple[int, list[int]] | None:
    """Shortest walk from 1 to n that never visits a forbidden triple in a row.

    Edges are unweighted and undirected. Returns the number of edges and the
    walk, or None when n cannot be reached.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    banned = {tuple(t) for t in forbidden}

    # States are (previous vertex, current vertex); the start has no previous (0).
    dist = {(0, 1): 0}
    parent: dict[tuple[int, int], int] = {}
    heap = [(0, 0, 1)]
    while heap:
        cost, prev, node = heapq.heappop(heap)
        if dist[(prev, node)] != cost:
            continue
        for nxt in adjacency[node]:
            if (prev, node, nxt) in banned:
                continue
            state = (node, nxt)
            if dist.get(state, math.inf) > cost + 1:
                parent[state] = prev
                dist[state] = cost + 1
                heapq.heappush(heap, (cost + 1, node, nxt))

    endings = [(dist[(p, n)], p) for p in range(1, n + 1) if (p, n) in dist]
    if not endings:
        return None
    best, best_prev = min(endings)

    path = [n, best_prev]
    node, prev = n, best_prev
    while (before := parent[(prev, node)]) != 0:
        node, prev = prev, before
        path.append(before)
    path.reverse()
    return best, path


def count_points_at_distance(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    source: int,
    distance: int,
) -> int:
    """Number of places (vertices or points on edges) whose shortest distance
    from source is exactly the given distance.

    Edges are (u, v, w) with positive integer weights.
    """
    _check_vertex(source, n)
    edge_list = []
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
        edge_list.append((u, v, w))

    dist: list[float] = [math.inf] * (n + 1)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost != dist[node]:
            continue
        for nxt, w in adjacency[node]:
            if dist[nxt] > cost + w:
                dist[nxt] = cost + w
                heapq.heappush(heap, (cost + w, nxt))

    count = sum(1 for d in dist[1:] if d == distance)
    for u, v, w in edge_list:
        rem = distance - dist[u]
        if 0 < rem < w and dist[v] + (w - rem) >= distance:
            count += 1
        rem = distance - dist[v]
        # Strict here so a point reached equally from both ends is counted once.
        if 0 < rem < w and dist[u] + (w - rem) > distance:
            count += 1
    return count