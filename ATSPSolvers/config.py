"""
Tuneable defaults and per-strategy configuration for the ATSP solvers.

Every heuristic reads its parameters from one of the frozen dataclasses below,
so the command line, the registry and direct callers share the same validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# -- exact search ----------------------------------------------------------
DEFAULT_START_VERTEX: int = 0
BRUTE_FORCE_PRACTICAL_LIMIT: int = 12  # (N-1)! paths beyond this is hours
HELD_KARP_PRACTICAL_LIMIT: int = 20  # N * 2**N int64 table ~ 160 MB at 20

# -- tabu search -----------------------------------------------------------
DEFAULT_TIME_LIMIT_MILLIS: int = 1_000
DEFAULT_TABU_CAPACITY: int = 20
DEFAULT_STAGNATION_FACTOR: int = 10  # restart after factor * N idle iterations

# -- genetic algorithm -----------------------------------------------------
DEFAULT_POPULATION_SIZE: int = 100
DEFAULT_CROSSOVER_RATE: float = 0.8
DEFAULT_MUTATION_RATE: float = 0.05
DEFAULT_FITNESS_EXPONENT: float = 10.0


class SwapOperator(str, Enum):
    VERTEX_SWAP = "vertex_swap"
    EDGE_SWAP = "edge_swap"
    INSERT_SWAP = "insert_swap"


class CrossoverOperator(str, Enum):
    ORDER = "order_crossover"
    PARTIALLY_MAPPED = "partially_mapped_crossover"


def _check_time_limit(value: int) -> None:
    if value <= 0:
        raise ValueError(f"time_limit_millis must be positive, got {value}.")


def _check_rate(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must lie in [0, 1], got {value}.")


@dataclass(frozen=True)
class TabuSearchConfig:
    time_limit_millis: int = DEFAULT_TIME_LIMIT_MILLIS
    swap_operator: SwapOperator = SwapOperator.VERTEX_SWAP
    tabu_capacity: int = DEFAULT_TABU_CAPACITY
    stagnation_limit_factor: int = DEFAULT_STAGNATION_FACTOR

    def __post_init__(self) -> None:
        _check_time_limit(self.time_limit_millis)
        object.__setattr__(self, "swap_operator", SwapOperator(self.swap_operator))
        if self.tabu_capacity <= 0:
            raise ValueError(f"tabu_capacity must be positive, got {self.tabu_capacity}.")
        if self.stagnation_limit_factor <= 0:
            raise ValueError(f"stagnation_limit_factor must be positive, got {self.stagnation_limit_factor}.")


@dataclass(frozen=True)
class GeneticConfig:
    time_limit_millis: int = DEFAULT_TIME_LIMIT_MILLIS
    population_size: int = DEFAULT_POPULATION_SIZE
    crossover_rate: float = DEFAULT_CROSSOVER_RATE
    mutation_rate: float = DEFAULT_MUTATION_RATE
    crossover_operator: CrossoverOperator = CrossoverOperator.ORDER
    fitness_exponent: float = DEFAULT_FITNESS_EXPONENT

    def __post_init__(self) -> None:
        _check_time_limit(self.time_limit_millis)
        if self.population_size <= 0:
            raise ValueError(f"population_size must be positive, got {self.population_size}.")
        _check_rate("crossover_rate", self.crossover_rate)
        _check_rate("mutation_rate", self.mutation_rate)
        object.__setattr__(self, "crossover_operator", CrossoverOperator(self.crossover_operator))
        if self.fitness_exponent <= 0:
            raise ValueError(f"fitness_exponent must be positive, got {self.fitness_exponent}.")


__all__ = [
    "BRUTE_FORCE_PRACTICAL_LIMIT",
    "CrossoverOperator",
    "DEFAULT_CROSSOVER_RATE",
    "DEFAULT_FITNESS_EXPONENT",
    "DEFAULT_MUTATION_RATE",
    "DEFAULT_POPULATION_SIZE",
    "DEFAULT_STAGNATION_FACTOR",
    "DEFAULT_START_VERTEX",
    "DEFAULT_TABU_CAPACITY",
    "DEFAULT_TIME_LIMIT_MILLIS",
    "GeneticConfig",
    "HELD_KARP_PRACTICAL_LIMIT",
    "SwapOperator",
    "TabuSearchConfig",
]
