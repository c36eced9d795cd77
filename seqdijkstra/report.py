"""Text rendering of results and graphs."""

from __future__ import annotations

from typing import List, Sequence

from .matrix import AdjacencyMatrix, Distance, Vertex
from .solver import Goal, SSSPResult

UNREACHABLE = "*"


def format_distances(distances: Sequence[Distance]) -> str:
    """Return one ``<vertex>:<distance>`` line per vertex, ``*`` if unreachable."""
    lines = [f"{v}:{UNREACHABLE if d is None else d}" for v, d in enumerate(distances)]
    return "".join(line + "\n" for line in lines)


def format_distance(target: Vertex, distance: Distance, source: Vertex = 0) -> str:
    if distance is None:
        return f"no path to vertex {target}\n"
    return f"distance from {source} to {target} is {distance}\n"


def format_result(result: SSSPResult) -> str:
    """Render ``result`` the way its goal asks for."""
    if result.goal is Goal.ONE_DISTANCE and result.target is not None:
        return format_distance(result.target, result.distance(result.target))
    return format_distances(result.distances)


def format_matrix(G: AdjacencyMatrix) -> str:
    """Return a human readable dump of the weights, for debugging."""
    out: List[str] = ["graph weights:"]
    for row in G.to_rows():
        out.append("".join(f"{UNREACHABLE if w is None else w}  " for w in row))
    return "\n".join(out) + "\n"


__all__ = ["UNREACHABLE", "format_distances", "format_distance", "format_result", "format_matrix"]
