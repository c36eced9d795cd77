"""Public package exports for :mod:`seqdijkstra`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    AllocationFailure,
    ConfigError,
    InputError,
    InvalidVertex,
    MalformedWeightError,
    MissingVertexCountError,
    ParseError,
    SeqDijkstraError,
    TooFewWeightsError,
    TooManyWeightsError,
)
from .generator import GeneratorConfig, generate_matrix, generate_text
from .io import format_graph, load_graph, parse_graph, read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .matrix import AdjacencyMatrix
from .reference import dijkstra_reference, floyd_warshall_reference
from .report import format_distance, format_distances, format_matrix, format_result
from .solver import (
    DijkstraSolver,
    Goal,
    SolverConfig,
    SolverMetrics,
    SSSPResult,
    compute_distances,
)

__version__ = "0.1.0"

__all__ = [
    "AdjacencyMatrix",
    "DijkstraSolver",
    "Goal",
    "SolverConfig",
    "SolverMetrics",
    "SSSPResult",
    "compute_distances",
    "dijkstra_reference",
    "floyd_warshall_reference",
    "GeneratorConfig",
    "generate_matrix",
    "generate_text",
    "parse_graph",
    "read_graph",
    "load_graph",
    "format_graph",
    "write_graph",
    "format_distance",
    "format_distances",
    "format_matrix",
    "format_result",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "SeqDijkstraError",
    "InputError",
    "ParseError",
    "MissingVertexCountError",
    "MalformedWeightError",
    "TooManyWeightsError",
    "TooFewWeightsError",
    "InvalidVertex",
    "ConfigError",
    "AllocationFailure",
    "AlgorithmError",
]
