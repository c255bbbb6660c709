from __future__ import annotations

import logging

from ATSPSolvers.config import BRUTE_FORCE_PRACTICAL_LIMIT
from ATSPSolvers.solvers.base import (
    BaseSolver,
    SolverResult,
    current_time,
    elapsed_millis,
)
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class BruteForceSolver(BaseSolver):
    """Depth-first enumeration of every tour that starts at the start vertex.

    A branch is cut as soon as its partial cost is no better than the best
    complete tour, with no estimate of the remaining edges.
    """

    name = "brute_force"
    family = AlgorithmFamily.EXACT

    def _run(self) -> SolverResult:
        matrix = self.graph.matrix.tolist()
        n = self.graph.size
        start = self.start_vertex
        if n > BRUTE_FORCE_PRACTICAL_LIMIT:
            logger.warning("Brute force on %d nodes explores up to %d! paths", n, n - 1)

        start_time = current_time()
        best_cost = float("inf")
        best_path: list[int] = []
        nodes_explored = 0
        visited = [False] * n
        visited[start] = True

        def dfs(path: list[int], cost_so_far: int) -> None:
            nonlocal best_cost, best_path, nodes_explored
            nodes_explored += 1

            if len(path) == n:
                total_cost = cost_so_far + matrix[path[-1]][start]
                if total_cost < best_cost:
                    best_cost = total_cost
                    best_path = path[:]
                    logger.debug("New best tour with cost %d", total_cost)
                return

            last = path[-1]
            for next_city in range(n):
                if visited[next_city]:
                    continue
                new_cost = cost_so_far + matrix[last][next_city]
                if new_cost >= best_cost:
                    continue
                visited[next_city] = True
                path.append(next_city)
                dfs(path, new_cost)
                path.pop()
                visited[next_city] = False

        dfs([start], 0)

        elapsed = elapsed_millis(start_time)
        logger.info("Brute force finished: cost %d in %.3f ms", best_cost, elapsed)
        return SolverResult(
            name=self.name,
            best_tour=best_path,
            best_cost=int(best_cost),
            elapsed_millis=elapsed,
            status="complete",
            metadata={"nodes_explored": nodes_explored},
        )


__all__ = ["BruteForceSolver"]
