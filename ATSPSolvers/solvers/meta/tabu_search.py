from __future__ import annotations

import logging
from collections import Counter, deque
from typing import Iterator

import numpy as np

from ATSPSolvers.config import SwapOperator, TabuSearchConfig
from ATSPSolvers.graph import Graph, cycle_cost
from ATSPSolvers.solvers.base import (
    BaseSolver,
    SolverResult,
    current_time,
    elapsed_millis,
    make_rng,
)
from ATSPSolvers.solvers.heuristics import get_move, random_nearest_neighbor_tour, vertex_swap
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class TabuList:
    """Fixed-capacity FIFO of position pairs with constant-time membership."""

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"Tabu list capacity must be positive, got {capacity}.")
        self.capacity = capacity
        self._entries: deque[tuple[int, int]] = deque()
        self._counts: Counter[tuple[int, int]] = Counter()

    @staticmethod
    def _key(i: int, j: int) -> tuple[int, int]:
        return (i, j) if i <= j else (j, i)

    def push(self, i: int, j: int) -> None:
        key = self._key(i, j)
        self._entries.append(key)
        self._counts[key] += 1
        while len(self._entries) > self.capacity:
            evicted = self._entries.popleft()
            self._counts[evicted] -= 1
            if not self._counts[evicted]:
                del self._counts[evicted]

    def __contains__(self, pair: tuple[int, int]) -> bool:
        return self._key(*pair) in self._counts

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._counts.clear()


class TabuSearchSolver(BaseSolver):
    name = "tabu_search"
    family = AlgorithmFamily.METAHEURISTIC

    def __init__(
        self,
        graph: Graph,
        config: TabuSearchConfig | None = None,
        rng: np.random.Generator | int | None = None,
        start_vertex: int = 0,
        **options,
    ):
        super().__init__(graph, start_vertex)
        if config is not None and options:
            raise TypeError("Pass either a TabuSearchConfig or keyword options, not both.")
        self.config = config or TabuSearchConfig(**options)
        self.rng = make_rng(rng)
        self.move = get_move(self.config.swap_operator)
        self.tabu_list = TabuList(self.config.tabu_capacity)

    def _run(self) -> SolverResult:
        matrix = self.graph.matrix
        n = self.graph.size
        time_limit = self.config.time_limit_millis
        stagnation_limit = self.config.stagnation_limit_factor * n
        self.tabu_list.clear()

        start_time = current_time()
        current = np.asarray(random_nearest_neighbor_tour(matrix, self.rng), dtype=np.intp)
        best_cost = float("inf")
        best_tour = current.copy()
        improved_at = 0.0
        history: list[int] = []

        current_cost = cycle_cost(matrix, current)
        if current_cost < best_cost:
            best_cost = current_cost
            best_tour = current.copy()
            improved_at = elapsed_millis(start_time)
            history.append(best_cost)

        iterations = 0
        restarts = 0
        idle = 0
        while elapsed_millis(start_time) <= time_limit:
            iterations += 1
            move = self._best_neighbour(current, best_cost)
            if move is not None:
                current, current_cost = move
            if move is not None and current_cost < best_cost:
                best_cost = current_cost
                best_tour = current.copy()
                improved_at = elapsed_millis(start_time)
                history.append(best_cost)
                idle = 0
                logger.debug("Tabu search found new best solution: %d", best_cost)
            else:
                idle += 1

            if idle >= stagnation_limit:
                current = np.asarray(random_nearest_neighbor_tour(matrix, self.rng), dtype=np.intp)
                current_cost = cycle_cost(matrix, current)
                restarts += 1
                idle = 0
                if current_cost < best_cost:
                    best_cost = current_cost
                    best_tour = current.copy()
                    improved_at = elapsed_millis(start_time)
                    history.append(best_cost)
                    logger.debug("Tabu search restart found new best solution: %d", best_cost)

        total = elapsed_millis(start_time)
        logger.info(
            "Tabu search finished after %d iterations (%d restarts): cost %d", iterations, restarts, best_cost
        )
        return SolverResult(
            name=self.name,
            best_tour=[int(node) for node in best_tour],
            best_cost=int(best_cost),
            elapsed_millis=improved_at,
            status="timeout",
            metadata={
                "iterations": iterations,
                "restarts": restarts,
                "history": history,
                "total_elapsed_millis": total,
                "swap_operator": self.config.swap_operator.value,
            },
        )

    def _best_neighbour(self, solution: np.ndarray, best_cost: float) -> tuple[np.ndarray, int] | None:
        """Scan all pairs and apply the cheapest admissible move.

        A tabu pair is admissible only when it beats ``best_cost``. Returns the
        new solution and its cost, or None when every move was rejected.
        """
        matrix = self.graph.matrix
        n = self.graph.size
        in_place = self.config.swap_operator is SwapOperator.VERTEX_SWAP
        working = solution.copy()
        best_local_cost = float("inf")
        best_local: np.ndarray | None = None
        chosen: tuple[int, int] | None = None

        for i in range(n - 1):
            for j in range(i + 1, n):
                if in_place:
                    vertex_swap(working, i, j)
                    candidate = working
                else:
                    candidate = solution.copy()
                    self.move(candidate, i, j)
                cost = cycle_cost(matrix, candidate)
                if cost < best_local_cost and ((i, j) not in self.tabu_list or cost < best_cost):
                    best_local_cost = cost
                    best_local = candidate.copy()
                    chosen = (i, j)
                if in_place:
                    vertex_swap(working, i, j)

        if chosen is None:
            return None
        self.tabu_list.push(*chosen)
        return best_local, int(best_local_cost)


__all__ = ["TabuList", "TabuSearchSolver"]
