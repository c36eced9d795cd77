"""Reference shortest-path implementations used in tests and benchmarks."""

from __future__ import annotations

import heapq
from typing import List, Optional, Tuple

from .matrix import AdjacencyMatrix, Distance, Vertex


def dijkstra_reference(G: AdjacencyMatrix, source: Vertex = 0) -> List[Distance]:
    """Run the binary-heap Dijkstra with lazy deletion.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex identifier.

    Returns:
        Distances from ``source``, ``None`` for unreachable vertices.
    """
    dist: List[Optional[int]] = [None] * G.nv
    dist[source] = 0
    pq: List[Tuple[int, Vertex]] = [(0, source)]
    while pq:
        d, u = heapq.heappop(pq)
        if d != dist[u]:
            continue
        for v, w in G.row(u):
            nd = d + w
            if dist[v] is None or nd < dist[v]:
                dist[v] = nd
                heapq.heappush(pq, (nd, v))
    return dist


def floyd_warshall_reference(G: AdjacencyMatrix, source: Vertex = 0) -> List[Distance]:
    """Brute-force all-pairs distances, returning the row for ``source``.

    Cubic in the number of vertices; only meant for small graphs.
    """
    n = G.nv
    d: List[List[Optional[int]]] = G.to_rows()
    for v in range(n):
        d[v][v] = 0
    for k in range(n):
        dk = d[k]
        for i in range(n):
            dik = d[i][k]
            if dik is None:
                continue
            di = d[i]
            for j in range(n):
                if dk[j] is None:
                    continue
                cand = dik + dk[j]
                if di[j] is None or cand < di[j]:
                    di[j] = cand
    return d[source]


__all__ = ["dijkstra_reference", "floyd_warshall_reference"]
