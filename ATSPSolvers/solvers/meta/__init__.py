from ATSPSolvers.solvers.meta.crossover import order_crossover, partially_mapped_crossover
from ATSPSolvers.solvers.meta.genetic_algorithm import GeneticAlgorithmSolver
from ATSPSolvers.solvers.meta.tabu_search import TabuList, TabuSearchSolver

__all__ = [
    "GeneticAlgorithmSolver",
    "TabuList",
    "TabuSearchSolver",
    "order_crossover",
    "partially_mapped_crossover",
]
