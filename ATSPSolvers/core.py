from __future__ import annotations

from typing import Sequence

import numpy as np

from ATSPSolvers.graph import Graph
from ATSPSolvers.solvers import SolverResult, get_solver


def to_graph(problem: Graph | Sequence[Sequence[int]] | np.ndarray) -> Graph:
    if isinstance(problem, Graph):
        return problem
    return Graph(problem)


def solve(
    problem: Graph | Sequence[Sequence[int]] | np.ndarray,
    method: str = "held_karp",
    **options,
) -> SolverResult:
    """Build the named solver for ``problem`` and run it to completion."""
    solver = get_solver(method, to_graph(problem), **options)
    return solver.run()


__all__ = ["solve", "to_graph"]
