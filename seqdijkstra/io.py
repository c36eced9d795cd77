"""Graph input/output helpers for the whitespace matrix format.

The format is a stream of whitespace-separated tokens: the vertex count
``NV`` followed by ``NV*NV`` row-major weights, each a non-negative integer
or ``*`` for "no edge". Line breaks carry no meaning beyond error messages.
"""

from __future__ import annotations

import io
import itertools
import re
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple, Union

from .exceptions import (
    MalformedWeightError,
    MissingVertexCountError,
    TooFewWeightsError,
    TooManyWeightsError,
)
from .matrix import MAX_WEIGHT, AdjacencyMatrix, Weight

NO_EDGE_TOKEN = "*"

Source = Union[str, Path, TextIO]

_NV_MISSING = "first item in the input should be the number of vertices in the graph"
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _split_stars(tok: str) -> Iterator[str]:
    # "*" needs no surrounding whitespace, so "3*4" and "**" are valid runs.
    start = 0
    for i, ch in enumerate(tok):
        if ch == NO_EDGE_TOKEN:
            if i > start:
                yield tok[start:i]
            yield NO_EDGE_TOKEN
            start = i + 1
    if start < len(tok):
        yield tok[start:]


def _tokens(fh: TextIO) -> Iterator[Tuple[int, str]]:
    """Yield ``(lineno, token)`` pairs; line numbers start at 1."""
    for lineno, line in enumerate(fh, start=1):
        for raw in line.split():
            for tok in _split_stars(raw):
                yield lineno, tok


def _parse_weight(tok: str, lineno: int) -> Optional[Weight]:
    if tok == NO_EDGE_TOKEN:
        return None
    if not (tok.isascii() and tok.isdigit()):
        raise MalformedWeightError(f"error in input (bad weight {tok!r})", lineno)
    w = int(tok)
    if w > MAX_WEIGHT:
        raise MalformedWeightError(f"error in input (weight {tok} exceeds {MAX_WEIGHT})", lineno)
    return w


def _parse_vertex_count(tok: str, lineno: int) -> Tuple[int, str]:
    """Read the leading integer of ``tok``; return it with the unread rest."""
    m = _LEADING_INT.match(tok)
    if m is None:
        raise MissingVertexCountError(_NV_MISSING, lineno)
    nv = int(m.group())
    if nv <= 0:
        raise MissingVertexCountError(f"number of vertices must be positive, got {nv}", lineno)
    return nv, tok[m.end():]


def read_matrix(fh: TextIO) -> AdjacencyMatrix:
    """Parse a graph from an open text stream.

    Args:
        fh: Stream positioned at the start of the graph description.

    Returns:
        The parsed adjacency matrix.

    Raises:
        MissingVertexCountError: The first token is absent or not a positive integer.
        MalformedWeightError: A weight is neither ``*`` nor a non-negative integer.
        TooManyWeightsError: More than ``NV*NV`` weights follow the vertex count.
        TooFewWeightsError: Fewer than ``NV*NV`` weights follow the vertex count.
        AllocationFailure: The matrix cannot be allocated.
    """
    tokens: Iterator[Tuple[int, str]] = _tokens(fh)
    first = next(tokens, None)
    if first is None:
        raise MissingVertexCountError(_NV_MISSING, 1)
    lineno, tok = first
    nv, rest = _parse_vertex_count(tok, lineno)
    if rest:
        # "3abc": the count is 3 and "abc" is the first weight
        tokens = itertools.chain([(lineno, rest)], tokens)
    expected = nv * nv

    flat: List[Optional[Weight]] = []
    for lineno, tok in tokens:
        if len(flat) >= expected:
            raise TooManyWeightsError(f"too many weights (expecting {nv}*{nv} weights)", lineno)
        flat.append(_parse_weight(tok, lineno))
    if len(flat) != expected:
        raise TooFewWeightsError(
            f"{len(flat)} weights appear in the input (expected {expected} weights "
            f"because number of vertices is {nv})",
            lineno,
        )
    return AdjacencyMatrix.from_flat(nv, flat)


def parse_graph(text: str) -> AdjacencyMatrix:
    """Parse a graph from a string."""
    return read_matrix(io.StringIO(text))


def read_graph(src: Source) -> AdjacencyMatrix:
    """Read a graph from a path or an open text stream."""
    if isinstance(src, (str, Path)):
        with Path(src).open("r", encoding="utf-8") as fh:
            return read_matrix(fh)
    return read_matrix(src)


def load_graph(path: Union[str, Path]) -> AdjacencyMatrix:
    """Load a graph file from ``path``."""
    return read_graph(Path(path))


def format_graph(G: AdjacencyMatrix) -> str:
    """Render ``G`` in the text format, one matrix row per line.

    Every entry is followed by two spaces, matching the generator output.
    """
    lines = [str(G.nv)]
    for row in G.to_rows():
        lines.append("".join(f"{NO_EDGE_TOKEN if w is None else w}  " for w in row))
    return "\n".join(lines) + "\n"


def write_graph(G: AdjacencyMatrix, dst: Source) -> None:
    """Write ``G`` to a path or an open text stream."""
    text = format_graph(G)
    if isinstance(dst, (str, Path)):
        Path(dst).write_text(text, encoding="utf-8")
    else:
        dst.write(text)


__all__ = [
    "NO_EDGE_TOKEN",
    "read_matrix",
    "parse_graph",
    "read_graph",
    "load_graph",
    "format_graph",
    "write_graph",
]
