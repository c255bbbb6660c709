import pytest

from ATSPSolvers.graph import Graph
from ATSPSolvers.instances import generate_graph

# Symmetric 4-node instance: 0 -> 1 -> 3 -> 2 -> 0 costs 10 + 25 + 30 + 15 = 80,
# tied with its reversal 0 -> 2 -> 3 -> 1 -> 0.
MATRIX_4 = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]

# Directed 5-node instance where the cheap ring 0 -> 1 -> 2 -> 3 -> 4 -> 0
# costs 5 and every reverse edge is expensive.
MATRIX_RING = [
    [0, 1, 50, 50, 50],
    [90, 0, 1, 50, 50],
    [50, 90, 0, 1, 50],
    [50, 50, 90, 0, 1],
    [1, 50, 50, 90, 0],
]


@pytest.fixture
def graph4():
    return Graph(MATRIX_4)


@pytest.fixture
def ring_graph():
    return Graph(MATRIX_RING)


@pytest.fixture
def random_graph():
    def build(size, seed=0):
        return generate_graph(size, rng=seed)

    return build


def assert_valid_tour(tour, size):
    assert len(tour) == size
    assert sorted(tour) == list(range(size))
