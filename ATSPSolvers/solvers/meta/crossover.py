"""
Permutation crossover operators used by the genetic algorithm.

Each operator takes two parent tours and returns two children. The cut points
``(start, end)`` delimit an inclusive segment copied verbatim from one parent;
they are drawn from ``rng`` unless given explicitly.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

import numpy as np

from ATSPSolvers.config import CrossoverOperator

Children = Tuple[np.ndarray, np.ndarray]
Crossover = Callable[..., Children]


def random_cut(n: int, rng: np.random.Generator) -> tuple[int, int]:
    start, end = sorted(int(k) for k in rng.choice(n, size=2, replace=False))
    return start, end


def _resolve_cut(n: int, rng: np.random.Generator | None, cut: tuple[int, int] | None) -> tuple[int, int]:
    if cut is None:
        if rng is None:
            raise ValueError("Either rng or cut must be given.")
        return random_cut(n, rng)
    start, end = cut
    if not 0 <= start < end < n:
        raise ValueError(f"Cut points must satisfy 0 <= start < end < {n}, got {cut}.")
    return start, end


def _order_child(donor: np.ndarray, other: np.ndarray, start: int, end: int) -> np.ndarray:
    n = donor.shape[0]
    child = np.full(n, -1, dtype=donor.dtype)
    child[start : end + 1] = donor[start : end + 1]
    segment = set(child[start : end + 1].tolist())
    fill = [city for city in np.roll(other, -(end + 1)).tolist() if city not in segment]
    positions = (end + 1 + np.arange(len(fill))) % n
    child[positions] = np.asarray(fill, dtype=donor.dtype)
    return child


def order_crossover(
    parent1: Sequence[int],
    parent2: Sequence[int],
    rng: np.random.Generator | None = None,
    cut: tuple[int, int] | None = None,
) -> Children:
    """OX: keep a segment, fill the rest in the other parent's cyclic order from ``end + 1``."""
    p1 = np.asarray(parent1)
    p2 = np.asarray(parent2)
    start, end = _resolve_cut(p1.shape[0], rng, cut)
    return _order_child(p1, p2, start, end), _order_child(p2, p1, start, end)


def _pmx_child(donor: np.ndarray, other: np.ndarray, start: int, end: int) -> np.ndarray:
    n = donor.shape[0]
    child = np.full(n, -1, dtype=donor.dtype)
    child[start : end + 1] = donor[start : end + 1]
    present = np.zeros(n, dtype=bool)
    present[donor[start : end + 1]] = True
    position_in_other = np.empty(n, dtype=np.intp)
    position_in_other[other] = np.arange(n)

    for i in range(start, end + 1):
        value = other[i]
        if present[value]:
            continue
        idx = position_in_other[donor[i]]
        while start <= idx <= end:
            idx = position_in_other[donor[idx]]
        child[idx] = value
        present[value] = True

    gaps = child == -1
    child[gaps] = other[gaps]
    return child


def partially_mapped_crossover(
    parent1: Sequence[int],
    parent2: Sequence[int],
    rng: np.random.Generator | None = None,
    cut: tuple[int, int] | None = None,
) -> Children:
    """PMX: keep a segment, relocate displaced values along the segment's mapping."""
    p1 = np.asarray(parent1)
    p2 = np.asarray(parent2)
    start, end = _resolve_cut(p1.shape[0], rng, cut)
    return _pmx_child(p1, p2, start, end), _pmx_child(p2, p1, start, end)


CROSSOVERS: dict[CrossoverOperator, Crossover] = {
    CrossoverOperator.ORDER: order_crossover,
    CrossoverOperator.PARTIALLY_MAPPED: partially_mapped_crossover,
}


def get_crossover(operator: CrossoverOperator | str) -> Crossover:
    return CROSSOVERS[CrossoverOperator(operator)]


__all__ = [
    "CROSSOVERS",
    "get_crossover",
    "order_crossover",
    "partially_mapped_crossover",
    "random_cut",
]
