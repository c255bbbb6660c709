from ATSPSolvers.config import CrossoverOperator, GeneticConfig, SwapOperator, TabuSearchConfig
from ATSPSolvers.core import solve
from ATSPSolvers.graph import Graph
from ATSPSolvers.instances import TsplibInstance, generate_graph, generate_matrix, parse_tsplib, read_tsplib
from ATSPSolvers.solvers import (
    BaseSolver,
    BruteForceSolver,
    GeneticAlgorithmSolver,
    HeldKarpSolver,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    SolverResult,
    TabuSearchSolver,
    get_solver,
)
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

__all__ = [
    "AlgorithmFamily",
    "BaseSolver",
    "BruteForceSolver",
    "CrossoverOperator",
    "GeneticAlgorithmSolver",
    "GeneticConfig",
    "Graph",
    "HeldKarpSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SolverResult",
    "SwapOperator",
    "TabuSearchConfig",
    "TabuSearchSolver",
    "TsplibInstance",
    "generate_graph",
    "generate_matrix",
    "get_solver",
    "parse_tsplib",
    "read_tsplib",
    "solve",
]
