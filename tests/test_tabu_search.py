"""Tests for the tabu list and the tabu search solver."""
import numpy as np
import pytest

from ATSPSolvers.config import SwapOperator, TabuSearchConfig
from ATSPSolvers.solvers.exact import HeldKarpSolver
from ATSPSolvers.solvers.heuristics import random_nearest_neighbor_tour
from ATSPSolvers.solvers.meta import TabuList, TabuSearchSolver

from conftest import assert_valid_tour


class TestTabuList:
    def test_fifo_eviction(self):
        tabu = TabuList(3)
        for pair in [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3)]:
            tabu.push(*pair)
        assert list(tabu) == [(0, 3), (1, 2), (1, 3)]
        assert len(tabu) == 3
        assert (0, 1) not in tabu
        assert (0, 2) not in tabu
        assert (1, 3) in tabu

    def test_pairs_are_unordered(self):
        tabu = TabuList(2)
        tabu.push(4, 1)
        assert (1, 4) in tabu
        assert (4, 1) in tabu

    def test_duplicates_survive_partial_eviction(self):
        tabu = TabuList(2)
        tabu.push(0, 1)
        tabu.push(0, 1)
        tabu.push(2, 3)
        assert (0, 1) in tabu
        tabu.push(2, 3)
        assert (0, 1) not in tabu

    def test_clear(self):
        tabu = TabuList(2)
        tabu.push(0, 1)
        tabu.clear()
        assert len(tabu) == 0
        assert (0, 1) not in tabu

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            TabuList(0)


class TestNeighbourhoodScan:
    def test_picks_cheapest_neighbour(self, ring_graph):
        solver = TabuSearchSolver(ring_graph, time_limit_millis=10, rng=0)
        start = np.array([0, 2, 1, 3, 4])
        new, cost = solver._best_neighbour(start, float("inf"))
        assert new.tolist() == [0, 1, 2, 3, 4]
        assert cost == 5
        assert (1, 2) in solver.tabu_list

    def test_tabu_moves_are_skipped(self, ring_graph):
        solver = TabuSearchSolver(ring_graph, time_limit_millis=10, rng=0)
        solver.tabu_list.push(1, 2)
        start = np.array([0, 2, 1, 3, 4])
        new, cost = solver._best_neighbour(start, best_cost=5)
        assert new.tolist() != [0, 1, 2, 3, 4]
        assert cost >= 5

    def test_aspiration_overrides_tabu(self, ring_graph):
        solver = TabuSearchSolver(ring_graph, time_limit_millis=10, rng=0)
        solver.tabu_list.push(1, 2)
        start = np.array([0, 2, 1, 3, 4])
        new, cost = solver._best_neighbour(start, best_cost=6)
        assert new.tolist() == [0, 1, 2, 3, 4]
        assert cost == 5

    def test_no_admissible_move(self, graph4):
        config = TabuSearchConfig(time_limit_millis=10, tabu_capacity=6)
        solver = TabuSearchSolver(graph4, config=config, rng=0)
        for i in range(3):
            for j in range(i + 1, 4):
                solver.tabu_list.push(i, j)
        assert solver._best_neighbour(np.array([0, 1, 3, 2]), best_cost=0) is None

    @pytest.mark.parametrize("operator", list(SwapOperator))
    def test_scan_leaves_input_untouched(self, random_graph, operator):
        solver = TabuSearchSolver(random_graph(6), time_limit_millis=10, swap_operator=operator, rng=1)
        start = np.array([5, 3, 1, 0, 2, 4])
        solver._best_neighbour(start, float("inf"))
        assert start.tolist() == [5, 3, 1, 0, 2, 4]


class TestTabuSearchSolver:
    @pytest.mark.parametrize("operator", [op.value for op in SwapOperator])
    def test_returns_valid_tour(self, random_graph, operator):
        graph = random_graph(9, seed=11)
        result = TabuSearchSolver(graph, time_limit_millis=60, swap_operator=operator, rng=3).run()
        assert_valid_tour(result.best_tour, 9)
        assert graph.tour_cost(result.best_tour) == result.best_cost
        assert result.best_cost >= HeldKarpSolver(graph).run().best_cost
        assert result.status == "timeout"
        assert result.metadata["swap_operator"] == operator

    def test_best_cost_never_increases(self, random_graph):
        graph = random_graph(10, seed=5)
        result = TabuSearchSolver(graph, time_limit_millis=80, rng=2).run()
        history = result.metadata["history"]
        assert history
        assert all(later < earlier for earlier, later in zip(history, history[1:]))
        assert history[-1] == result.best_cost

    def test_reports_time_of_last_improvement(self, random_graph):
        result = TabuSearchSolver(random_graph(8), time_limit_millis=50, rng=4).run()
        assert 0 <= result.elapsed_millis <= result.metadata["total_elapsed_millis"]
        assert result.metadata["total_elapsed_millis"] >= 50

    def test_finds_optimum_on_directed_ring(self, ring_graph):
        result = TabuSearchSolver(ring_graph, time_limit_millis=50, rng=9).run()
        assert result.best_cost == 5

    def test_stagnation_triggers_restart(self, graph4):
        config = TabuSearchConfig(time_limit_millis=50, stagnation_limit_factor=1)
        result = TabuSearchSolver(graph4, config=config, rng=0).run()
        assert result.metadata["restarts"] > 0
        assert result.best_cost == 80

    def test_restart_tour_can_become_best(self, ring_graph, monkeypatch):
        tours = iter([[0, 2, 1, 3, 4], [0, 1, 2, 3, 4]])
        monkeypatch.setattr(
            "ATSPSolvers.solvers.meta.tabu_search.random_nearest_neighbor_tour",
            lambda matrix, rng: next(tours, [0, 2, 1, 3, 4]),
        )
        solver = TabuSearchSolver(ring_graph, time_limit_millis=20, stagnation_limit_factor=1, rng=0)
        monkeypatch.setattr(solver, "_best_neighbour", lambda solution, best_cost: None)
        result = solver.run()
        assert result.best_tour == [0, 1, 2, 3, 4]
        assert result.best_cost == 5
        assert result.metadata["history"][-1] == 5

    def test_same_seed_gives_same_draws(self, random_graph):
        graph = random_graph(9, seed=13)
        first = TabuSearchSolver(graph, time_limit_millis=10, rng=42)
        second = TabuSearchSolver(graph, time_limit_millis=10, rng=42)
        start_a = random_nearest_neighbor_tour(graph.matrix, first.rng)
        start_b = random_nearest_neighbor_tour(graph.matrix, second.rng)
        assert list(start_a) == list(start_b)
        new_a, cost_a = first._best_neighbour(np.asarray(start_a), float("inf"))
        new_b, cost_b = second._best_neighbour(np.asarray(start_b), float("inf"))
        assert new_a.tolist() == new_b.tolist()
        assert cost_a == cost_b
        assert list(first.tabu_list) == list(second.tabu_list)

    def test_config_and_options_are_exclusive(self, graph4):
        with pytest.raises(TypeError):
            TabuSearchSolver(graph4, config=TabuSearchConfig(), time_limit_millis=5)

    @pytest.mark.parametrize(
        "options",
        [
            {"time_limit_millis": 0},
            {"tabu_capacity": 0},
            {"stagnation_limit_factor": 0},
            {"swap_operator": "two_opt"},
        ],
    )
    def test_invalid_config(self, graph4, options):
        with pytest.raises(ValueError):
            TabuSearchSolver(graph4, **options)
