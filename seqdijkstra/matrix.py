"""Dense adjacency-matrix graph representation used by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import AllocationFailure, InputError

Vertex = int
Weight = int
Distance = Optional[int]

# Storage marker for an absent edge. Never handed out as a weight.
_NO_EDGE = -1

# Largest weight the int64 backing array can hold.
MAX_WEIGHT = int(np.iinfo(np.int64).max)


def _allocate(nv: int) -> npt.NDArray[np.int64]:
    try:
        return np.full((nv, nv), _NO_EDGE, dtype=np.int64)
    except MemoryError as exc:
        raise AllocationFailure(f"cannot allocate a {nv}x{nv} weight matrix") from exc


@dataclass(frozen=True, eq=False)
class AdjacencyMatrix:
    """Immutable directed graph stored as an ``nv`` x ``nv`` weight matrix.

    Entry ``(u, v)`` holds the weight of the edge ``u -> v`` or marks that
    no such edge exists. Weights are non-negative integers.

    Attributes:
        nv: Number of vertices in the range ``0`` .. ``nv-1``.
        weights: Read-only ``int64`` array; absent edges are stored as ``-1``.
            Use :meth:`weight` instead of reading it directly.
    """

    nv: int
    weights: npt.NDArray[np.int64] = field(repr=False)

    def __post_init__(self) -> None:
        """Validate shape and weights, then freeze the backing array."""
        if not isinstance(self.nv, (int, np.integer)) or self.nv <= 0:
            raise InputError("number of vertices must be a positive integer.")
        if self.weights.shape != (self.nv, self.nv):
            raise InputError(
                f"weight matrix must be {self.nv}x{self.nv}, got shape {self.weights.shape}"
            )
        if (self.weights < _NO_EDGE).any():
            u, v = (int(i) for i in np.argwhere(self.weights < _NO_EDGE)[0])
            raise InputError(f"negative weight on edge ({u}, {v})")
        self.weights.setflags(write=False)

    @classmethod
    def from_flat(cls, nv: int, flat: Sequence[Optional[Weight]]) -> "AdjacencyMatrix":
        """Build a matrix from ``nv*nv`` row-major entries.

        Args:
            nv: Number of vertices.
            flat: Weights in row-major order, ``None`` meaning "no edge".

        Returns:
            The populated matrix.

        Raises:
            InputError: If the entry count is wrong or a weight is negative.
            AllocationFailure: If the backing array cannot be allocated.
        """
        if nv <= 0:
            raise InputError("number of vertices must be a positive integer.")
        if len(flat) != nv * nv:
            raise InputError(f"expected {nv * nv} weights, got {len(flat)}")
        arr = _allocate(nv)
        view = arr.reshape(-1)
        for i, w in enumerate(flat):
            if w is None:
                continue
            if w < 0:
                raise InputError(f"negative weight {w} on edge ({i // nv}, {i % nv})")
            if w > MAX_WEIGHT:
                raise InputError(f"weight {w} on edge ({i // nv}, {i % nv}) exceeds {MAX_WEIGHT}")
            view[i] = w
        return cls(nv, arr)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Optional[Weight]]]) -> "AdjacencyMatrix":
        """Build a matrix from a square list of rows.

        Examples:
            ```python
            >>> g = AdjacencyMatrix.from_rows([[None, 3], [None, None]])
            >>> g.weight(0, 1), g.weight(1, 0)
            (3, None)
            ```
        """
        rows = [list(r) for r in rows]
        nv = len(rows)
        for u, r in enumerate(rows):
            if len(r) != nv:
                raise InputError(f"row {u} has {len(r)} entries, expected {nv}")
        return cls.from_flat(nv, [w for r in rows for w in r])

    def _check(self, v: Vertex) -> None:
        if not 0 <= v < self.nv:
            raise InputError(f"vertex {v} out of range [0, {self.nv}).")

    def weight(self, u: Vertex, v: Vertex) -> Optional[Weight]:
        """Return the weight of ``u -> v`` or ``None`` when there is no edge."""
        self._check(u)
        self._check(v)
        w = int(self.weights[u, v])
        return None if w == _NO_EDGE else w

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Return ``True`` if the edge ``u -> v`` exists."""
        return self.weight(u, v) is not None

    def row(self, u: Vertex) -> Iterator[Tuple[Vertex, Weight]]:
        """Yield ``(v, w)`` for every outgoing edge of ``u``."""
        self._check(u)
        for v in np.flatnonzero(self.weights[u] != _NO_EDGE):
            yield int(v), int(self.weights[u, v])

    def edge_count(self) -> int:
        """Return the number of present edges."""
        return int(np.count_nonzero(self.weights != _NO_EDGE))

    def max_weight(self) -> Optional[Weight]:
        """Return the largest edge weight, or ``None`` for an edgeless graph."""
        present = self.weights[self.weights != _NO_EDGE]
        return int(present.max()) if present.size else None

    def to_rows(self) -> List[List[Optional[Weight]]]:
        """Return the matrix as nested lists with ``None`` for absent edges."""
        return [[None if w == _NO_EDGE else int(w) for w in r] for r in self.weights]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return self.nv == other.nv and bool(np.array_equal(self.weights, other.weights))

    __hash__ = None  # type: ignore[assignment]


__all__ = ["AdjacencyMatrix", "MAX_WEIGHT", "Vertex", "Weight", "Distance"]
