from ATSPSolvers.solvers.heuristics.moves import MOVES, edge_swap, get_move, insert_swap, vertex_swap
from ATSPSolvers.solvers.heuristics.nearest_neighbor import nearest_neighbor_tour, random_nearest_neighbor_tour

__all__ = [
    "MOVES",
    "edge_swap",
    "get_move",
    "insert_swap",
    "nearest_neighbor_tour",
    "random_nearest_neighbor_tour",
    "vertex_swap",
]
