from __future__ import annotations

import numpy as np


def nearest_neighbor_tour(matrix: np.ndarray, start: int) -> list[int]:
    """Greedy walk to the cheapest unvisited node; ties go to the lowest index."""
    n = matrix.shape[0]
    visited = np.zeros(n, dtype=bool)
    path = [start]
    visited[start] = True
    last = start
    for _ in range(1, n):
        row = np.where(visited, np.inf, matrix[last].astype(float))
        next_city = int(np.argmin(row))
        path.append(next_city)
        visited[next_city] = True
        last = next_city
    return path


def random_nearest_neighbor_tour(matrix: np.ndarray, rng: np.random.Generator) -> list[int]:
    return nearest_neighbor_tour(matrix, int(rng.integers(matrix.shape[0])))


__all__ = ["nearest_neighbor_tour", "random_nearest_neighbor_tour"]
