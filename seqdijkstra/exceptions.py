"""Custom exception types used across :mod:`seqdijkstra`.

Every error the command-line tools can report carries an ``exit_code``
attribute; library code only raises, the CLI decides how to exit.
"""

from __future__ import annotations

from typing import Optional


class SeqDijkstraError(Exception):
    """Base class for all package-specific errors."""

    exit_code: int = 70


class InputError(SeqDijkstraError, ValueError):
    """Raised for invalid user input such as a bad matrix or weight."""

    exit_code = 1


class ParseError(InputError):
    """Raised when the textual graph description cannot be parsed.

    Attributes:
        lineno: 1-based input line on which the problem was detected.
    """

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        self.message = message
        self.lineno = lineno
        if lineno is None:
            super().__init__(message)
        else:
            super().__init__(f"line {lineno}: {message}")


class MissingVertexCountError(ParseError):
    """The input does not start with a usable vertex count."""

    exit_code = 1


class MalformedWeightError(ParseError):
    """A weight token is neither ``*`` nor a non-negative integer."""

    exit_code = 2


class TooManyWeightsError(ParseError):
    """More than ``NV*NV`` weights appear in the input."""

    exit_code = 5


class TooFewWeightsError(ParseError):
    """Fewer than ``NV*NV`` weights appear in the input."""

    exit_code = 6


class InvalidVertex(InputError, IndexError):
    """Raised when a vertex index lies outside ``[0, NV)``."""

    exit_code = 4

    def __init__(self, vertex: int, nv: int, role: str = "destination") -> None:
        self.vertex = vertex
        self.nv = nv
        self.role = role
        super().__init__(f"illegal {role} vertex {vertex} (graph has {nv} vertices)")


class ConfigError(SeqDijkstraError, ValueError):
    """Raised for invalid configuration options."""

    exit_code = 1


class AllocationFailure(SeqDijkstraError, MemoryError):
    """Raised when the matrix or working tables cannot be allocated."""

    exit_code = 1


class AlgorithmError(SeqDijkstraError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
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
