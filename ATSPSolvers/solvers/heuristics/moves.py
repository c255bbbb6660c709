"""
Neighbourhood moves over a tour held in a mutable sequence.

All three operators work in place on positions ``i`` and ``j``; the order of the
two positions only matters for ``insert_swap``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

from ATSPSolvers.config import SwapOperator

Move = Callable[[MutableSequence[int], int, int], None]


def vertex_swap(tour: MutableSequence[int], i: int, j: int) -> None:
    """Exchange the nodes at positions ``i`` and ``j``. Applying it twice is a no-op."""
    tour[i], tour[j] = tour[j], tour[i]


def edge_swap(tour: MutableSequence[int], i: int, j: int) -> None:
    """Reverse the segment between positions ``i`` and ``j`` inclusive."""
    lo, hi = min(i, j), max(i, j)
    tour[lo : hi + 1] = tour[lo : hi + 1][::-1]


def insert_swap(tour: MutableSequence[int], i: int, j: int) -> None:
    """Remove the node at position ``i`` and reinsert it at position ``j``."""
    node = tour[i]
    if i < j:
        tour[i:j] = tour[i + 1 : j + 1]
    else:
        tour[j + 1 : i + 1] = tour[j:i]
    tour[j] = node


MOVES: dict[SwapOperator, Move] = {
    SwapOperator.VERTEX_SWAP: vertex_swap,
    SwapOperator.EDGE_SWAP: edge_swap,
    SwapOperator.INSERT_SWAP: insert_swap,
}


def get_move(operator: SwapOperator | str) -> Move:
    return MOVES[SwapOperator(operator)]


__all__ = ["MOVES", "Move", "edge_swap", "get_move", "insert_swap", "vertex_swap"]
