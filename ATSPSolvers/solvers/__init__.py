from __future__ import annotations

from ATSPSolvers.graph import Graph
from ATSPSolvers.solvers.base import BaseSolver, SolverResult, SolverSpec
from ATSPSolvers.solvers.exact import BruteForceSolver, HeldKarpSolver
from ATSPSolvers.solvers.meta import GeneticAlgorithmSolver, TabuSearchSolver
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    cls.name: SolverSpec(name=cls.name, cls=cls, family=cls.family)
    for cls in (BruteForceSolver, HeldKarpSolver, TabuSearchSolver, GeneticAlgorithmSolver)
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str, graph: Graph, **options) -> BaseSolver:
    solver_cls = SOLVER_REGISTRY.get(name)
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls(graph, **options)


__all__ = [
    "AlgorithmFamily",
    "BaseSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SolverResult",
    "get_solver",
    "BruteForceSolver",
    "HeldKarpSolver",
    "TabuSearchSolver",
    "GeneticAlgorithmSolver",
]
