from __future__ import annotations

import logging

import numpy as np

from ATSPSolvers.config import GeneticConfig
from ATSPSolvers.graph import Graph, cycle_cost
from ATSPSolvers.solvers.base import (
    BaseSolver,
    SolverResult,
    current_time,
    elapsed_millis,
    make_rng,
)
from ATSPSolvers.solvers.heuristics import edge_swap
from ATSPSolvers.solvers.meta.crossover import get_crossover
from ATSPSolvers.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


def normalized_fitness(costs: np.ndarray, exponent: float) -> np.ndarray:
    """Fitness ``1 / cost**exponent`` scaled to sum to one.

    Evaluated as ``(min_cost / cost)**exponent`` so large costs cannot
    overflow; when some tours cost nothing they share all the weight.
    """
    costs = np.asarray(costs, dtype=float)
    lowest = costs.min()
    if lowest == 0:
        weights = (costs == 0).astype(float)
    else:
        weights = (lowest / costs) ** exponent
    return weights / weights.sum()


def roulette_select(cumulative: np.ndarray, draws: np.ndarray) -> np.ndarray:
    """Index of the first cumulative fitness that is >= each draw."""
    picks = np.searchsorted(cumulative, draws, side="left")
    return np.minimum(picks, cumulative.shape[0] - 1)


class GeneticAlgorithmSolver(BaseSolver):
    name = "genetic_algorithm"
    family = AlgorithmFamily.METAHEURISTIC

    def __init__(
        self,
        graph: Graph,
        config: GeneticConfig | None = None,
        rng: np.random.Generator | int | None = None,
        start_vertex: int = 0,
        **options,
    ):
        super().__init__(graph, start_vertex)
        if config is not None and options:
            raise TypeError("Pass either a GeneticConfig or keyword options, not both.")
        self.config = config or GeneticConfig(**options)
        self.rng = make_rng(rng)
        self.crossover = get_crossover(self.config.crossover_operator)

    def _run(self) -> SolverResult:
        matrix = self.graph.matrix
        n = self.graph.size
        cfg = self.config
        rng = self.rng

        start_time = current_time()
        population = [rng.permutation(n) for _ in range(cfg.population_size)]
        best_cost = float("inf")
        best_tour = population[0].copy()
        improved_at = 0.0
        history: list[int] = []
        generations = 0

        while True:
            costs = np.array([cycle_cost(matrix, tour) for tour in population])
            fitness = normalized_fitness(costs, cfg.fitness_exponent)
            order = np.argsort(fitness, kind="stable")
            population = [population[k] for k in order]
            costs = costs[order]
            cumulative = np.cumsum(fitness[order])

            fittest = int(np.argmin(costs))
            if costs[fittest] < best_cost:
                best_cost = int(costs[fittest])
                best_tour = population[fittest].copy()
                improved_at = elapsed_millis(start_time)
                history.append(best_cost)
                logger.debug(
                    "Genetic algorithm found new best solution: %d (generation %d)", best_cost, generations
                )

            if elapsed_millis(start_time) >= cfg.time_limit_millis:
                break
            population = self._next_generation(population, cumulative)
            generations += 1

        total = elapsed_millis(start_time)
        logger.info("Genetic algorithm finished after %d generations: cost %d", generations, best_cost)
        return SolverResult(
            name=self.name,
            best_tour=[int(node) for node in best_tour],
            best_cost=int(best_cost),
            elapsed_millis=improved_at,
            status="timeout",
            metadata={
                "generations": generations,
                "population_size": cfg.population_size,
                "history": history,
                "total_elapsed_millis": total,
                "crossover_operator": cfg.crossover_operator.value,
            },
        )

    def _next_generation(self, population: list[np.ndarray], cumulative: np.ndarray) -> list[np.ndarray]:
        cfg = self.config
        rng = self.rng
        n = self.graph.size

        draws = rng.random(cfg.population_size)
        offspring = [population[k].copy() for k in roulette_select(cumulative, draws)]

        for i in range(0, len(offspring) - 1, 2):
            if rng.random() < cfg.crossover_rate:
                offspring[i], offspring[i + 1] = self.crossover(offspring[i], offspring[i + 1], rng)

        for child in offspring:
            if rng.random() < cfg.mutation_rate:
                i, j = rng.choice(n, size=2, replace=False)
                edge_swap(child, int(i), int(j))
        return offspring


__all__ = ["GeneticAlgorithmSolver", "normalized_fitness", "roulette_select"]
