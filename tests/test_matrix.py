import numpy as np
import pytest

from seqdijkstra import AdjacencyMatrix, InputError


def test_weight_accessor_returns_none_for_missing_edge(example_graph):
    assert example_graph.weight(0, 1) == 1
    assert example_graph.weight(1, 3) == 7
    assert example_graph.weight(3, 0) is None
    assert example_graph.weight(2, 2) is None
    assert example_graph.has_edge(0, 2)
    assert not example_graph.has_edge(2, 0)


def test_row_lists_present_edges_only(example_graph):
    assert list(example_graph.row(1)) == [(2, 2), (3, 7)]
    assert list(example_graph.row(3)) == []


def test_counts_and_max_weight(example_graph):
    assert example_graph.edge_count() == 5
    assert example_graph.max_weight() == 7
    assert AdjacencyMatrix.from_rows([[None]]).max_weight() is None


def test_backing_array_is_read_only(example_graph):
    with pytest.raises(ValueError):
        example_graph.weights[0, 0] = 3


def test_zero_weight_is_an_edge():
    g = AdjacencyMatrix.from_rows([[None, 0], [None, None]])
    assert g.weight(0, 1) == 0
    assert g.has_edge(0, 1)


def test_equality_by_content(example_graph):
    again = AdjacencyMatrix.from_rows(example_graph.to_rows())
    assert again == example_graph
    assert again != AdjacencyMatrix.from_rows([[None]])


def test_from_flat_matches_from_rows():
    flat = [None, 3, 4, None]
    g = AdjacencyMatrix.from_flat(2, flat)
    assert g.to_rows() == [[None, 3], [4, None]]
    np.testing.assert_array_equal(g.weights, np.array([[-1, 3], [4, -1]]))


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [[None, 1]],
        [[None, 1], [None]],
        [[None, -2], [None, None]],
    ],
)
def test_invalid_matrices_rejected(rows):
    with pytest.raises(InputError):
        AdjacencyMatrix.from_rows(rows)


def test_wrong_flat_length_rejected():
    with pytest.raises(InputError):
        AdjacencyMatrix.from_flat(2, [None, 1, 2])


def test_out_of_range_access(example_graph):
    with pytest.raises(InputError):
        example_graph.weight(0, 4)
    with pytest.raises(InputError):
        example_graph.weight(-1, 0)


def test_weight_beyond_int64_rejected():
    from seqdijkstra.matrix import MAX_WEIGHT

    with pytest.raises(InputError, match="exceeds"):
        AdjacencyMatrix.from_flat(1, [MAX_WEIGHT + 1])


def test_from_flat_allocation_failure(monkeypatch):
    from seqdijkstra import AllocationFailure

    def _no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(np, "full", _no_memory)
    with pytest.raises(AllocationFailure):
        AdjacencyMatrix.from_flat(2, [None, 1, 2, None])
