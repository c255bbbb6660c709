from ATSPSolvers.solvers.exact.brute_force import BruteForceSolver
from ATSPSolvers.solvers.exact.held_karp import HeldKarpSolver

__all__ = [
    "BruteForceSolver",
    "HeldKarpSolver",
]
