from __future__ import annotations

import pytest

from seqdijkstra import AdjacencyMatrix

N = None

EXAMPLE_ROWS = [
    [N, 1, 4, N],
    [N, N, 2, 7],
    [N, N, N, 1],
    [N, N, N, N],
]


@pytest.fixture
def example_graph() -> AdjacencyMatrix:
    """Four vertices: 0->1=1, 0->2=4, 1->2=2, 1->3=7, 2->3=1."""
    return AdjacencyMatrix.from_rows(EXAMPLE_ROWS)


@pytest.fixture
def isolated_graph() -> AdjacencyMatrix:
    """Vertex 2 has no edges at all; vertex 3 is only reachable through 1."""
    return AdjacencyMatrix.from_rows(
        [
            [N, 5, N, N],
            [N, N, N, 2],
            [N, N, N, N],
            [3, N, N, N],
        ]
    )
