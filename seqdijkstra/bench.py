"""Timing harness for the sequential engine.

Runs the O(V^2) engine and the heap-based reference on generated graphs
and reports timings together with the number of vertices whose distances
disagree (which should always be zero).

Example:
```bash
python -m seqdijkstra.bench --sizes 100 400 --trials 3 --out-csv out.csv
```
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from .generator import DEFAULT_MAX_WEIGHT, generate_matrix
from .reference import dijkstra_reference
from .solver import DijkstraSolver, SolverMetrics


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    metrics: SolverMetrics
    reference_ms: float
    mismatches: int


def run_once(nv: int, max_weight: int = DEFAULT_MAX_WEIGHT, seed: int = 1) -> BenchResult:
    """Run the engine once and compare it against the heap reference.

    Args:
        nv: Number of vertices of the generated graph.
        max_weight: Largest edge weight.
        seed: Seed for the generator.

    Returns:
        Timing information and the count of mismatching distances.
    """
    G = generate_matrix(nv, max_weight, seed)

    t0 = time.perf_counter()
    solver = DijkstraSolver(G)
    res = solver.solve()
    t1 = time.perf_counter()
    ref = dijkstra_reference(G, 0)
    t2 = time.perf_counter()

    mismatches = sum(1 for a, b in zip(res.distances, ref) if a != b)
    return BenchResult(
        metrics=solver.metrics(wall_ms=(t1 - t0) * 1000.0),
        reference_ms=(t2 - t1) * 1000.0,
        mismatches=mismatches,
    )


def _p95(values: List[float]) -> float:
    if len(values) < 2:
        return values[0]
    return statistics.quantiles(values, n=100, method="inclusive")[94]


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per size")
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[50, 100],
        help="Vertex counts to benchmark. Defaults to a small demo.",
    )
    parser.add_argument("--max-weight", type=int, default=DEFAULT_MAX_WEIGHT)
    parser.add_argument("--seed-base", type=int, default=1, help="Seed of the first trial")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error("--trials must be at least 1")
    if any(nv < 1 for nv in args.sizes):
        parser.error("every size must be at least 1")

    rows: List[List[object]] = []
    engine_ms: Dict[int, List[float]] = {}
    reference_ms: Dict[int, List[float]] = {}
    mismatches: Dict[int, int] = {}

    for nv in args.sizes:
        engine_ms[nv] = []
        reference_ms[nv] = []
        mismatches[nv] = 0
        for trial in range(args.trials):
            res = run_once(nv, args.max_weight, seed=args.seed_base + trial)
            mtx = res.metrics
            rows.append(
                [
                    mtx.nv,
                    mtx.edges,
                    trial,
                    f"{mtx.wall_ms:.6f}",
                    f"{res.reference_ms:.6f}",
                    mtx.counters["edges_relaxed"],
                    mtx.counters["improvements"],
                    res.mismatches,
                ]
            )
            engine_ms[nv].append(mtx.wall_ms)
            reference_ms[nv].append(res.reference_ms)
            mismatches[nv] += res.mismatches

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                [
                    "nv",
                    "edges",
                    "trial",
                    "engine_ms",
                    "reference_ms",
                    "edges_relaxed",
                    "improvements",
                    "mismatches",
                ]
            )
            writer.writerows(rows)

    print(
        f"{'nv':>6} {'engine_med':>11} {'engine_p95':>11}"
        f" {'ref_med':>11} {'ref_p95':>11} {'mismatch':>8}"
    )
    for nv in args.sizes:
        e, r = engine_ms[nv], reference_ms[nv]
        print(
            f"{nv:6d} {statistics.median(e):11.2f} {_p95(e):11.2f}"
            f" {statistics.median(r):11.2f} {_p95(r):11.2f} {mismatches[nv]:8d}"
        )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
