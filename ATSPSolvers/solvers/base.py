from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Type

import numpy as np

from ATSPSolvers.graph import Graph
from ATSPSolvers.utils.taxonomy import AlgorithmFamily


@dataclass
class SolverResult:
    """Container capturing the outcome of running an ATSP solver."""

    name: str
    best_tour: List[int]
    best_cost: int
    elapsed_millis: float
    status: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def current_time() -> float:
    return time.perf_counter()


def elapsed_millis(start_time: float) -> float:
    return (current_time() - start_time) * 1000.0


def make_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    """Accept a generator, a seed or None and return a generator."""
    return np.random.default_rng(rng)


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily


class BaseSolver:
    """Common interface for ATSP solvers."""

    name: str
    family: AlgorithmFamily

    def __init__(self, graph: Graph, start_vertex: int = 0):
        if not isinstance(graph, Graph):
            raise TypeError(f"Expected a Graph, got {type(graph).__name__}.")
        if not 0 <= start_vertex < graph.size:
            raise IndexError(f"Start vertex {start_vertex} is outside a graph of size {graph.size}.")
        self.graph = graph
        self.start_vertex = start_vertex
        self._result: SolverResult | None = None

    @property
    def result(self) -> SolverResult | None:
        """Result of the most recent run, or None before the first one."""
        return self._result

    def run(self) -> SolverResult:
        self._result = self._run()
        return self._result

    def _run(self) -> SolverResult:
        raise NotImplementedError

    def __call__(self) -> SolverResult:
        return self.run()


__all__ = [
    "AlgorithmFamily",
    "BaseSolver",
    "SolverResult",
    "SolverSpec",
    "current_time",
    "elapsed_millis",
    "make_rng",
]
