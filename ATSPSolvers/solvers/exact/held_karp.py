from __future__ import annotations

import logging

import numpy as np

from ATSPSolvers.config import HELD_KARP_PRACTICAL_LIMIT
from ATSPSolvers.graph import Graph
from ATSPSolvers.solvers.base import (
    BaseSolver,
    SolverResult,
    current_time,
    elapsed_millis,
)
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)

UNSET = -1


class HeldKarpSolver(BaseSolver):
    """Bitmask dynamic programming over (current city, visited set) states.

    ``memo[c, mask]`` is the cheapest way to finish the tour from ``c`` after
    visiting exactly ``mask``. The table lives in one flat buffer indexed
    ``c * 2**n + mask``; entries hold ``UNSET`` until computed.
    """

    name = "held_karp"
    family = AlgorithmFamily.EXACT

    def __init__(self, graph: Graph, start_vertex: int = 0):
        super().__init__(graph, start_vertex)
        self._buffer: np.ndarray | None = None

    @property
    def memo(self) -> np.ndarray | None:
        """The ``(n, 2**n)`` memo table of the last run."""
        if self._buffer is None:
            return None
        table = self._buffer.reshape(self.graph.size, -1)
        table.flags.writeable = False
        return table

    def _run(self) -> SolverResult:
        matrix = self.graph.matrix
        n = self.graph.size
        start = self.start_vertex
        if n > HELD_KARP_PRACTICAL_LIMIT:
            logger.warning("Held-Karp on %d nodes needs a %d-entry memo table", n, n * (1 << n))

        start_time = current_time()
        width = 1 << n
        full_mask = width - 1
        start_bit = 1 << start
        bits = np.left_shift(1, np.arange(n, dtype=np.int64))

        self._buffer = np.full(n * width, UNSET, dtype=np.int64)
        table = self._buffer.reshape(n, width)
        table[:, full_mask] = matrix[:, start]

        # Every state depends only on strictly larger masks.
        for mask in range(full_mask - 1, 0, -1):
            if not mask & start_bit:
                continue
            members = (bits & mask) != 0
            inside = np.flatnonzero(members)
            outside = np.flatnonzero(~members)
            tails = table[outside, mask | bits[outside]]
            candidates = matrix[np.ix_(inside, outside)] + tails
            table[inside, mask] = candidates.min(axis=1)

        best_cost = int(table[start, start_bit])
        path = self._reconstruct(table, matrix, start)

        elapsed = elapsed_millis(start_time)
        logger.info("Held-Karp finished: cost %d in %.3f ms", best_cost, elapsed)
        return SolverResult(
            name=self.name,
            best_tour=path,
            best_cost=best_cost,
            elapsed_millis=elapsed,
            status="complete",
            metadata={"states": int(np.count_nonzero(self._buffer != UNSET))},
        )

    @staticmethod
    def _reconstruct(table: np.ndarray, matrix: np.ndarray, start: int) -> list[int]:
        n = matrix.shape[0]
        full_mask = (1 << n) - 1
        path = [start]
        mask = 1 << start
        city = start
        while mask != full_mask:
            remaining = int(table[city, mask])
            for next_city in range(n):
                next_mask = mask | (1 << next_city)
                if next_mask == mask:
                    continue
                if remaining - int(matrix[city, next_city]) == int(table[next_city, next_mask]):
                    break
            else:
                raise RuntimeError(f"Memo table inconsistent at city {city}, mask {mask:#x}")
            path.append(next_city)
            mask = next_mask
            city = next_city
        return path


__all__ = ["HeldKarpSolver", "UNSET"]
