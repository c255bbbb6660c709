from __future__ import annotations

from typing import Sequence

import numpy as np


def is_permutation(tour: Sequence[int], size: int) -> bool:
    """Return True when ``tour`` visits every node of ``range(size)`` exactly once."""
    if len(tour) != size:
        return False
    seen = np.zeros(size, dtype=bool)
    for node in tour:
        if not isinstance(node, (int, np.integer)) or isinstance(node, bool):
            return False
        node = int(node)
        if node < 0 or node >= size or seen[node]:
            return False
        seen[node] = True
    return True


def cycle_cost(matrix: np.ndarray, tour: Sequence[int]) -> int:
    """Compute tour cost (including return leg) without validating the tour."""
    order = np.asarray(tour, dtype=np.intp)
    return int(matrix[order, np.roll(order, -1)].sum())


class Graph:
    """Immutable directed cost matrix shared by every solver."""

    def __init__(self, matrix: Sequence[Sequence[int]] | np.ndarray):
        self._matrix = self._validate(matrix)
        self._size = self._matrix.shape[0]

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]] | np.ndarray) -> "Graph":
        return cls(matrix)

    @staticmethod
    def _validate(matrix: Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
        try:
            raw = np.array(matrix)
        except ValueError as exc:
            raise ValueError("Cost matrix rows must all have the same length.") from exc
        if raw.ndim != 2 or raw.shape[0] != raw.shape[1]:
            raise ValueError(f"Cost matrix must be square, got shape {raw.shape}.")
        if raw.shape[0] < 2:
            raise ValueError("Graph needs at least 2 nodes.")
        if raw.dtype.kind not in "iu":
            if raw.dtype.kind != "f" or not np.all(np.isfinite(raw)) or not np.all(raw == np.floor(raw)):
                raise ValueError("Cost matrix must contain integer costs.")
        if int(raw.max()) * raw.shape[0] > np.iinfo(np.int64).max:
            raise ValueError("Cost matrix values are too large: a tour cost would overflow int64.")
        data = raw.astype(np.int64)
        if np.any(data < 0):
            raise ValueError("Cost matrix must not contain negative costs.")
        if np.any(np.diagonal(data) != 0):
            raise ValueError("Cost matrix diagonal must be zero.")
        data.setflags(write=False)
        return data

    @property
    def size(self) -> int:
        return self._size

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the raw weights."""
        return self._matrix

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Graph(size={self._size})"

    def cost(self, a: int, b: int) -> int:
        if not 0 <= a < self._size or not 0 <= b < self._size:
            raise IndexError(f"Edge ({a}, {b}) is outside a graph of size {self._size}.")
        return int(self._matrix[a, b])

    def tour_cost(self, tour: Sequence[int]) -> int:
        if not is_permutation(tour, self._size):
            raise ValueError(f"Tour must be a permutation of range({self._size}).")
        return cycle_cost(self._matrix, tour)

    def replace_matrix(self, matrix: Sequence[Sequence[int]] | np.ndarray) -> "Graph":
        """Return a new graph over ``matrix``; this graph is left unchanged."""
        return type(self)(matrix)


__all__ = ["Graph", "cycle_cost", "is_permutation"]
