"""
Problem instance sources: TSPLIB ``.atsp`` files and random cost matrices.
"""

from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass

import numpy as np
import tsplib95
from tsplib95.exceptions import TsplibError

from ATSPSolvers.graph import Graph

logger = logging.getLogger(__name__)

MIN_RANDOM_COST = 1
MAX_RANDOM_COST = 1001  # exclusive

SUPPORTED_FORMATS = {"FULL_MATRIX"}


@dataclass(frozen=True)
class TsplibInstance:
    name: str
    comment: str
    dimension: int
    graph: Graph


def _weights_to_matrix(problem, dimension: int) -> np.ndarray:
    rows = problem.edge_weights or []
    weights = np.concatenate([np.ravel(row) for row in rows]) if rows else np.empty(0)
    expected = dimension * dimension
    if weights.size < expected:
        raise ValueError(f"Expected {expected} weights, found {weights.size}.")
    if weights.size > expected:
        logger.warning("Ignoring %d trailing values after the weight matrix", weights.size - expected)
    matrix = weights[:expected].astype(np.int64).reshape(dimension, dimension)
    np.fill_diagonal(matrix, 0)
    return matrix


def parse_tsplib(text: str) -> TsplibInstance:
    """Parse an explicit full-matrix TSPLIB instance.

    Diagonal entries (often 9999 or 100000000) are replaced with zero.
    """
    try:
        problem = tsplib95.parse(text)
    except (TsplibError, KeyError) as exc:
        raise ValueError(f"Malformed TSPLIB data: {exc}") from exc

    dimension = problem.dimension
    if not dimension:
        raise ValueError("TSPLIB header is missing DIMENSION.")
    weight_format = (problem.edge_weight_format or "FULL_MATRIX").upper()
    if weight_format not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported EDGE_WEIGHT_FORMAT: {weight_format}")

    return TsplibInstance(
        name=problem.name or "",
        comment=problem.comment or "",
        dimension=dimension,
        graph=Graph(_weights_to_matrix(problem, dimension)),
    )


def read_tsplib(path: str | pathlib.Path) -> TsplibInstance:
    path = pathlib.Path(path)
    logger.info("Reading data from file: %s", path)
    instance = parse_tsplib(path.read_text(encoding="utf-8"))
    logger.info("Read %s (%d nodes)", instance.name or path.name, instance.dimension)
    return instance


def generate_matrix(
    size: int,
    rng: np.random.Generator | int | None = None,
    low: int = MIN_RANDOM_COST,
    high: int = MAX_RANDOM_COST,
) -> np.ndarray:
    """Random asymmetric costs drawn uniformly from ``[low, high)`` with a zero diagonal."""
    if size < 2:
        raise ValueError(f"size must be at least 2, got {size}.")
    if low < 0 or high <= low:
        raise ValueError(f"Invalid cost range [{low}, {high}).")
    rng = np.random.default_rng(rng)
    matrix = rng.integers(low, high, size=(size, size), dtype=np.int64)
    np.fill_diagonal(matrix, 0)
    return matrix


def generate_graph(
    size: int,
    rng: np.random.Generator | int | None = None,
    low: int = MIN_RANDOM_COST,
    high: int = MAX_RANDOM_COST,
) -> Graph:
    return Graph(generate_matrix(size, rng, low, high))


__all__ = [
    "TsplibInstance",
    "generate_graph",
    "generate_matrix",
    "parse_tsplib",
    "read_tsplib",
]
