"""Result types for NSGA and NSGA-II.

- NSGAResult: final population with ranks and shared fitness
- NSGA2Result: final population with ranks and crowding distances

Both classes are immutable (frozen dataclasses); arrays are copied on
construction.
"""

from dataclasses import dataclass

import numpy as np

from moop.population import Population
from moop.primitives import fronts_from_ranks


def _check_per_solution(name: str, value: np.ndarray, n: int) -> None:
    if not isinstance(value, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(value).__name__}")
    if value.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {value.shape}")
    if value.shape[0] != n:
        raise ValueError(f"{name} has {value.shape[0]} elements, expected {n} to match population size")


class _FrontsMixin:
    population: Population
    rank: np.ndarray

    @property
    def fronts(self) -> list[np.ndarray]:
        """Index arrays of each front in rank order."""
        return fronts_from_ranks(self.rank)

    @property
    def pareto_front(self) -> Population:
        """The rank-0 solutions as a new Population."""
        return self.population.take(np.flatnonzero(self.rank == 0))


@dataclass(frozen=True)
class NSGAResult(_FrontsMixin):
    """Results from a sharing-based NSGA run.

    Attributes:
        population: The final population.
        rank: Front index for each solution, shape (n,).
        fitness: Shared fitness for each solution, shape (n,). Larger is better.
        generations: Number of generations completed.
        evaluations: Total number of objective function evaluations.

    Example:
        >>> pop = Population(x=np.zeros((3, 1)), objectives=np.array([[0.0], [1.0], [1.0]]))
        >>> result = NSGAResult(pop, np.array([0, 1, 1]), np.array([3.0, 1.45, 1.45]), 0, 3)
        >>> [f.tolist() for f in result.fronts]
        [[0], [1, 2]]
    """

    population: Population
    rank: np.ndarray
    fitness: np.ndarray
    generations: int
    evaluations: int

    def __post_init__(self) -> None:
        n = len(self.population)
        _check_per_solution("rank", self.rank, n)
        _check_per_solution("fitness", self.fitness, n)
        object.__setattr__(self, "rank", self.rank.copy())
        object.__setattr__(self, "fitness", self.fitness.copy())


@dataclass(frozen=True)
class NSGA2Result(_FrontsMixin):
    """Results from an NSGA-II run.

    Attributes:
        population: The final population.
        rank: Front index for each solution, shape (n,). Rank 0 is the
            non-dominated set.
        crowding_distance: Crowding distance for each solution, shape (n,).
            Boundary solutions of each front have infinite distance.
        generations: Number of generations completed.
        evaluations: Total number of objective function evaluations.

    Example:
        >>> pop = Population(x=np.zeros((3, 2)), objectives=np.array([[0.5, 0.5], [0.3, 0.7], [0.6, 0.6]]))
        >>> result = NSGA2Result(pop, np.array([0, 0, 1]), np.array([np.inf, np.inf, np.inf]), 10, 60)
        >>> len(result.pareto_front)
        2
    """

    population: Population
    rank: np.ndarray
    crowding_distance: np.ndarray
    generations: int
    evaluations: int

    def __post_init__(self) -> None:
        n = len(self.population)
        _check_per_solution("rank", self.rank, n)
        _check_per_solution("crowding_distance", self.crowding_distance, n)
        object.__setattr__(self, "rank", self.rank.copy())
        object.__setattr__(self, "crowding_distance", self.crowding_distance.copy())
