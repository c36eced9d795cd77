"""Random dense graph generator producing loader-compatible input.

Every off-diagonal pair gets an edge whose weight is drawn from a seeded
:class:`random.Random`; the diagonal never carries an edge. The generator
never emits a missing off-diagonal edge, so every vertex is reachable from
vertex 0 in the graphs it produces. That is a known limitation rather
than a feature: graphs with unreachable vertices have to be written by
hand.

Weights are drawn as ``randint(0, max_weight)`` with ``0`` bumped up to
``1``, so weight 1 is about twice as likely as any other value. The same
seed reproduces the same graph with the same Python ``random`` module;
matching the output of other languages' generators is not attempted.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import ConfigError
from .io import format_graph
from .matrix import AdjacencyMatrix, Weight

DEFAULT_MAX_WEIGHT = 10
DEFAULT_SEED = 1


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters of one generated graph.

    Attributes:
        nv: Number of vertices (> 0).
        max_weight: Largest weight an edge may get (>= 1).
        seed: Seed for the weight sequence.
    """

    nv: int
    max_weight: int = DEFAULT_MAX_WEIGHT
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        if self.nv <= 0:
            raise ConfigError("number of vertices must be positive.")
        if self.max_weight < 1:
            raise ConfigError("max weight must be at least 1.")


def _sample_weight(rng: random.Random, max_weight: int) -> Weight:
    w = rng.randint(0, max_weight)
    return w if w > 0 else 1


def generate_matrix(
    nv: int,
    max_weight: int = DEFAULT_MAX_WEIGHT,
    seed: int = DEFAULT_SEED,
) -> AdjacencyMatrix:
    """Generate a complete directed graph with random positive weights.

    Args:
        nv: Number of vertices.
        max_weight: Upper bound (inclusive) for edge weights.
        seed: Seed controlling the weight sequence.

    Returns:
        An ``nv`` x ``nv`` matrix with no self-loops.

    Raises:
        ConfigError: If ``nv`` or ``max_weight`` is out of range.
    """
    cfg = GeneratorConfig(nv=nv, max_weight=max_weight, seed=seed)
    rng = random.Random(cfg.seed)
    flat: List[Optional[Weight]] = []
    for i in range(cfg.nv):
        for j in range(cfg.nv):
            flat.append(None if i == j else _sample_weight(rng, cfg.max_weight))
    return AdjacencyMatrix.from_flat(cfg.nv, flat)


def generate_text(
    nv: int,
    max_weight: int = DEFAULT_MAX_WEIGHT,
    seed: int = DEFAULT_SEED,
) -> str:
    """Return a generated graph rendered in the loader's text format."""
    return format_graph(generate_matrix(nv, max_weight, seed))


__all__ = [
    "DEFAULT_MAX_WEIGHT",
    "DEFAULT_SEED",
    "GeneratorConfig",
    "generate_matrix",
    "generate_text",
]
