"""Tests for the shared neighbourhood moves and the greedy construction."""
import numpy as np
import pytest

from ATSPSolvers.config import SwapOperator
from ATSPSolvers.solvers.heuristics import (
    edge_swap,
    get_move,
    insert_swap,
    nearest_neighbor_tour,
    random_nearest_neighbor_tour,
    vertex_swap,
)

from conftest import MATRIX_4, MATRIX_RING


class TestMoves:
    def test_vertex_swap_is_its_own_inverse(self):
        tour = [0, 1, 2, 3, 4]
        vertex_swap(tour, 1, 3)
        assert tour == [0, 3, 2, 1, 4]
        vertex_swap(tour, 1, 3)
        assert tour == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize("i, j", [(1, 3), (3, 1)])
    def test_edge_swap_reverses_segment(self, i, j):
        tour = [0, 1, 2, 3, 4]
        edge_swap(tour, i, j)
        assert tour == [0, 3, 2, 1, 4]

    def test_edge_swap_on_array(self):
        tour = np.arange(6)
        edge_swap(tour, 0, 5)
        assert tour.tolist() == [5, 4, 3, 2, 1, 0]

    def test_insert_swap_forward(self):
        tour = [0, 1, 2, 3]
        insert_swap(tour, 0, 2)
        assert tour == [1, 2, 0, 3]

    def test_insert_swap_backward(self):
        tour = [0, 1, 2, 3]
        insert_swap(tour, 2, 0)
        assert tour == [2, 0, 1, 3]

    def test_insert_swap_on_array(self):
        tour = np.array([0, 1, 2, 3, 4])
        insert_swap(tour, 1, 4)
        assert tour.tolist() == [0, 2, 3, 4, 1]

    @pytest.mark.parametrize("operator", list(SwapOperator))
    def test_moves_keep_permutations(self, operator):
        move = get_move(operator.value)
        for i in range(6):
            for j in range(6):
                if i == j:
                    continue
                tour = list(range(6))
                move(tour, i, j)
                assert sorted(tour) == list(range(6))

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            get_move("three_opt")


class TestNearestNeighbor:
    def test_follows_cheapest_edges(self):
        assert nearest_neighbor_tour(np.array(MATRIX_RING), 0) == [0, 1, 2, 3, 4]
        assert nearest_neighbor_tour(np.array(MATRIX_RING), 3) == [3, 4, 0, 1, 2]

    def test_ties_take_lowest_index(self):
        matrix = np.array([[0, 5, 5, 5], [5, 0, 5, 5], [5, 5, 0, 5], [5, 5, 5, 0]])
        assert nearest_neighbor_tour(matrix, 2) == [2, 0, 1, 3]

    def test_symmetric_instance(self):
        assert nearest_neighbor_tour(np.array(MATRIX_4), 0) == [0, 1, 3, 2]

    def test_random_start_is_reproducible(self):
        matrix = np.array(MATRIX_RING)
        first = random_nearest_neighbor_tour(matrix, np.random.default_rng(7))
        second = random_nearest_neighbor_tour(matrix, np.random.default_rng(7))
        assert first == second
        assert sorted(first) == list(range(5))
