"""Sequential O(V^2) Dijkstra over a dense adjacency matrix.

The engine repeatedly selects the closest vertex that is not done yet,
finalizes it and relaxes every other not-done vertex through it. There is
no priority queue: selection is a linear scan, which is the whole point of
this baseline.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .exceptions import AlgorithmError, AllocationFailure, ConfigError, InvalidVertex
from .logger import Logger, NoopLogger
from .matrix import AdjacencyMatrix, Distance, Vertex


class Goal(enum.Enum):
    """What a run is asked to compute."""

    ALL_DISTANCES = "all"
    ONE_DISTANCE = "one"


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        source: Vertex distances are measured from. The tools always use 0.
        target: When set, stop as soon as this vertex's distance is final.
    """

    source: Vertex = 0
    target: Optional[Vertex] = None

    def __post_init__(self) -> None:
        if not isinstance(self.source, int) or isinstance(self.source, bool):
            raise ConfigError("source must be an integer vertex id.")
        if self.target is not None and (
            not isinstance(self.target, int) or isinstance(self.target, bool)
        ):
            raise ConfigError("target must be an integer vertex id or None.")

    @property
    def goal(self) -> Goal:
        return Goal.ALL_DISTANCES if self.target is None else Goal.ONE_DISTANCE


@dataclass(frozen=True)
class SSSPResult:
    """Distances produced by one run of the solver.

    Attributes:
        distances: Best known distance per vertex, ``None`` when unreachable.
        done: Vertices in the order they were finalized.
        goal: Mode the run was executed in.
        target: Target vertex for :attr:`Goal.ONE_DISTANCE` runs.
    """

    distances: List[Distance]
    done: List[Vertex]
    goal: Goal = Goal.ALL_DISTANCES
    target: Optional[Vertex] = None

    def distance(self, v: Vertex) -> Distance:
        """Return the distance to ``v`` (``None`` if unreachable)."""
        return self.distances[v]

    def is_reachable(self, v: Vertex) -> bool:
        return self.distances[v] is not None


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    nv: int
    edges: int
    goal: str
    counters: Dict[str, int] = field(default_factory=dict)
    wall_ms: float = 0.0


class DijkstraSolver:
    """Single-source shortest paths with the textbook O(V^2) loop.

    The solver owns its distance table and done set for the lifetime of one
    computation; the matrix is only read.
    """

    def __init__(
        self,
        matrix: AdjacencyMatrix,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            matrix: Input graph.
            config: Optional solver configuration (source 0, all distances).
            logger: Optional event logger.

        Raises:
            InvalidVertex: If the source or target is outside ``[0, nv)``.
            AllocationFailure: If the working tables cannot be allocated.
        """
        self.G = matrix
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()

        nv = matrix.nv
        if not 0 <= self.cfg.source < nv:
            raise InvalidVertex(self.cfg.source, nv, role="source")
        if self.cfg.target is not None and not 0 <= self.cfg.target < nv:
            raise InvalidVertex(self.cfg.target, nv)

        try:
            self.dist: List[Distance] = [None] * nv
            self.done: List[bool] = [False] * nv
        except MemoryError as exc:
            raise AllocationFailure(f"cannot allocate working tables for {nv} vertices") from exc
        self.dist[self.cfg.source] = 0
        self.order: List[Vertex] = []
        self._solved = False

        self.counters: Dict[str, int] = {
            "steps": 0,
            "selections": 0,
            "edges_relaxed": 0,
            "improvements": 0,
        }

    # ---------- loop body -------------------------------------------------

    def _select(self) -> Optional[Tuple[Vertex, int]]:
        """Return the not-done vertex with the smallest known distance.

        Ties go to the lowest index. Returns ``None`` when every remaining
        vertex is unreachable.
        """
        self.counters["selections"] += 1
        best: Optional[Tuple[Vertex, int]] = None
        for v in range(self.G.nv):
            d = self.dist[v]
            if self.done[v] or d is None:
                continue
            if best is None or d < best[1]:
                best = (v, d)
        return best

    def _relax_from(self, u: Vertex, du: int) -> None:
        """Lower the distance of every not-done vertex reachable via ``u``."""
        for v in range(self.G.nv):
            if self.done[v]:
                continue
            w = self.G.weight(u, v)
            if w is None:
                continue
            self.counters["edges_relaxed"] += 1
            cand = du + w
            dv = self.dist[v]
            if dv is None or cand < dv:
                self.dist[v] = cand
                self.counters["improvements"] += 1

    def _finalize(self, u: Vertex, du: int) -> None:
        if self.done[u]:
            raise AlgorithmError(f"vertex {u} selected twice")
        if self.dist[u] != du:
            raise AlgorithmError(f"distance of vertex {u} changed during selection")
        self.done[u] = True
        self.order.append(u)

    # ---------- driver ----------------------------------------------------

    def solve(self) -> SSSPResult:
        """Run the algorithm and return the distances.

        The loop does at most ``nv`` steps. It stops early when the next
        closest vertex is unreachable or, in single-target mode, when the
        target is selected.
        """
        if self._solved:
            raise AlgorithmError("solve() may only be called once per solver.")
        self._solved = True

        target = self.cfg.target
        for step in range(self.G.nv):
            self.counters["steps"] += 1
            if step == 0:
                current: Optional[Tuple[Vertex, int]] = (self.cfg.source, 0)
            else:
                current = self._select()
            if current is None:
                self.logger.debug("unreachable_rest", step=step, remaining=self.G.nv - step)
                break
            u, du = current
            self.logger.debug("select", step=step, vertex=u, distance=du)

            if target is not None and u == target:
                self.logger.debug("early_exit", step=step, vertex=u, distance=du)
                break

            self._finalize(u, du)
            self._relax_from(u, du)

        self.logger.info(
            "solve_done",
            nv=self.G.nv,
            goal=self.cfg.goal.value,
            finalized=len(self.order),
            **self.counters,
        )
        return SSSPResult(
            distances=list(self.dist),
            done=list(self.order),
            goal=self.cfg.goal,
            target=target,
        )

    # ---------- counters --------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
        """
        return SolverMetrics(
            nv=self.G.nv,
            edges=self.G.edge_count(),
            goal=self.cfg.goal.value,
            counters=self.summary(),
            wall_ms=wall_ms,
        )


def compute_distances(
    matrix: AdjacencyMatrix,
    source: Vertex = 0,
    target: Optional[Vertex] = None,
    logger: Logger | None = None,
) -> List[Distance]:
    """Return shortest distances from ``source`` to every vertex.

    Args:
        matrix: Input graph.
        source: Source vertex, 0 unless stated otherwise.
        target: Optional vertex whose distance is all the caller needs.

    Returns:
        One entry per vertex; ``None`` marks an unreachable vertex. With a
        ``target`` only that entry is guaranteed to be final.

    Raises:
        InvalidVertex: If ``source`` or ``target`` is out of range.

    Examples:
        ```python
        >>> g = AdjacencyMatrix.from_rows([[None, 2], [None, None]])
        >>> compute_distances(g)
        [0, 2]
        ```
    """
    solver = DijkstraSolver(matrix, SolverConfig(source=source, target=target), logger=logger)
    return solver.solve().distances


__all__ = [
    "Goal",
    "SolverConfig",
    "SSSPResult",
    "SolverMetrics",
    "DijkstraSolver",
    "compute_distances",
]
