"""Command-line interfaces for the engine and the graph generator."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from typing import List, NoReturn, Optional

from .exceptions import InputError, SeqDijkstraError
from .generator import DEFAULT_MAX_WEIGHT, DEFAULT_SEED, generate_matrix
from .io import read_graph, write_graph
from .logger import StdLogger
from .matrix import AdjacencyMatrix
from .report import format_matrix, format_result
from .solver import DijkstraSolver, SolverConfig

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INTERNAL = 70

EXAMPLE_GRAPH = """4
*  1  4  *
*  *  2  7
*  *  *  1
*  *  *  *
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _load(path: Optional[str]) -> AdjacencyMatrix:
    if path is None or path == "-":
        return read_graph(sys.stdin)
    try:
        return read_graph(path)
    except OSError as exc:
        raise InputError(f"cannot read graph file {path}: {exc.strerror or exc}") from exc


def _report_error(exc: BaseException, verbose: bool, internal: bool = False) -> None:
    if verbose:
        traceback.print_exc()
    else:
        prefix = "internal error" if internal else "error"
        sys.stderr.write(f"{prefix}: {exc}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``seqdijkstra`` command-line tool."""
    examples = (
        "Examples:\n"
        "  seqdijkstra < graph.txt\n"
        "  seqdijkstra 3 --input graph.txt\n"
        "  seqdijkstra-gen 100 20 7 | seqdijkstra 42\n"
    )
    p = _ArgumentParser(
        prog="seqdijkstra",
        description="Distances from vertex 0 in a dense directed graph (sequential Dijkstra)",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument(
        "destination",
        type=int,
        nargs="?",
        default=None,
        help="Only report the distance to this vertex",
    )
    p.add_argument("--input", type=str, default=None, help="Graph file (default: stdin)")
    p.add_argument(
        "--example",
        action="store_true",
        help="Print a sample graph to stdout and exit",
    )
    p.add_argument("--print-graph", action="store_true", help="Dump the weights to stderr")
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit log events as JSON lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_GRAPH)
        return EXIT_OK

    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        G = _load(args.input)
        logger.info("graph_loaded", nv=G.nv, edges=G.edge_count())
        if args.print_graph:
            sys.stderr.write(format_matrix(G))

        solver = DijkstraSolver(G, SolverConfig(target=args.destination), logger=logger)
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0

        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics(wall_ms=wall_ms)), fh)

        sys.stdout.write(format_result(res))
        return EXIT_OK

    except InputError as exc:
        _report_error(exc, args.verbose)
        return exc.exit_code
    except SeqDijkstraError as exc:
        _report_error(exc, args.verbose, internal=exc.exit_code == EXIT_INTERNAL)
        return exc.exit_code
    except Exception as exc:  # pragma: no cover - unexpected
        _report_error(exc, args.verbose, internal=True)
        return EXIT_INTERNAL


def gen_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``seqdijkstra-gen`` command-line tool."""
    p = _ArgumentParser(
        prog="seqdijkstra-gen",
        description="Write a random dense graph in the seqdijkstra text format",
        epilog="Example:\n  seqdijkstra-gen 10 20 7 > graph.txt\n",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("nv", type=int, help="Number of vertices")
    p.add_argument(
        "max_weight",
        type=int,
        nargs="?",
        default=DEFAULT_MAX_WEIGHT,
        help=f"Maximum edge weight (default {DEFAULT_MAX_WEIGHT})",
    )
    p.add_argument(
        "seed",
        type=int,
        nargs="?",
        default=DEFAULT_SEED,
        help=f"Seed for the random weights (default {DEFAULT_SEED})",
    )
    p.add_argument("--output", type=str, default=None, help="Output file (default: stdout)")
    args = p.parse_args(argv)

    try:
        G = generate_matrix(args.nv, args.max_weight, args.seed)
        if args.output is None:
            write_graph(G, sys.stdout)
        else:
            write_graph(G, args.output)
    except SeqDijkstraError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return exc.exit_code
    except OSError as exc:
        sys.stderr.write(f"error: cannot write {args.output}: {exc.strerror or exc}\n")
        return EXIT_USAGE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
