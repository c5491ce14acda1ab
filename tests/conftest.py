"""Shared test fixtures for moop tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- simple_population: Four-solution front with rank and crowding distance
- Problem fixtures: the two built-in problems and a tiny bi-objective one
- Crossover and mutation operator fixtures
"""

import numpy as np
import pytest

from moop import FunctionProblem, Population, crowding_distance, non_dominated_sort, ratio_problem, squares_problem


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_population() -> Population:
    """Create a population with objectives, rank, and crowding distance.

    The 4 solutions form a single trade-off front.
    """
    x = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0], [7.0, 8.0]])
    objectives = np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]])

    ranks = non_dominated_sort(objectives)
    cd = np.zeros(len(objectives), dtype=np.float64)
    for r in range(int(ranks.max()) + 1):
        mask = ranks == r
        cd[mask] = crowding_distance(objectives[mask])

    return Population(x=x, objectives=objectives, rank=ranks, crowding_distance=cd)


@pytest.fixture
def squares():
    """Four-objective squares problem, f_k = x_k^2."""
    return squares_problem()


@pytest.fixture
def ratio():
    """Two-objective ratio problem, f1 = x1, f2 = (1 + x2) / x1."""
    return ratio_problem()


@pytest.fixture
def biobj_problem():
    """Simple bi-objective problem where f1 = sum(x) and f2 = sum(1 - x) trade off."""
    return FunctionProblem(
        name="biobj",
        n_obj=2,
        lower=np.zeros(3),
        upper=np.ones(3),
        function=lambda x: np.array([x.sum(), (1 - x).sum()]),
    )


@pytest.fixture
def identity_crossover():
    """Crossover that returns copies of the parents."""

    def crossover(p1: np.ndarray, p2: np.ndarray, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
        return p1.copy(), p2.copy()

    return crossover


@pytest.fixture
def averaging_crossover():
    """Crossover that returns the average of both parents twice."""

    def crossover(p1: np.ndarray, p2: np.ndarray, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
        mid = (p1 + p2) / 2
        return mid, mid.copy()

    return crossover


@pytest.fixture
def identity_mutate():
    """Mutation that leaves the children unchanged."""

    def mutate(children: np.ndarray, rng: np.random.Generator) -> None:
        return None

    return mutate


@pytest.fixture
def tracking_crossover():
    """Crossover that tracks all calls for verification.

    Returns a tuple of (crossover_fn, call_log).
    """
    call_log: list[tuple[np.ndarray, np.ndarray]] = []

    def crossover(p1: np.ndarray, p2: np.ndarray, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
        call_log.append((p1.copy(), p2.copy()))
        return p1.copy(), p2.copy()

    return crossover, call_log


@pytest.fixture
def tracking_mutate():
    """Mutation that tracks all calls for verification.

    Returns a tuple of (mutate_fn, call_log).
    """
    call_log: list[np.ndarray] = []

    def mutate(children: np.ndarray, rng: np.random.Generator) -> None:
        call_log.append(children.copy())

    return mutate, call_log
