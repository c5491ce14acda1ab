"""Population data structures for NSGA and NSGA-II.

This module provides the core data structures for representing populations
of solutions:

- Population: A struct-of-arrays representation of multiple solutions
- Solution: A read-only view of a single solution

Both classes are immutable (frozen dataclasses). Every array handed to a
Population is copied, so two populations never share a mutable array.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Solution:
    """Read-only view of a single solution in a population.

    Returned by Population.__getitem__.

    Attributes:
        variables: Decision variables, shape (n_vars,).
        objectives: Objective values, shape (n_obj,), or None if not evaluated.
        rank: Front index (0 = first front), or None if not sorted.
        crowding_distance: Crowding distance, or None if not computed.
        fitness: Shared fitness (NSGA), or None if not computed.

    Example:
        >>> pop = Population(x=np.array([[1.0, 2.0], [3.0, 4.0]]))
        >>> pop[0].variables
        array([1., 2.])
    """

    variables: np.ndarray
    objectives: np.ndarray | None
    rank: int | None
    crowding_distance: float | None
    fitness: float | None


def _check_row_array(name: str, value: np.ndarray, n: int, ndim: int) -> None:
    if not isinstance(value, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(value).__name__}")
    if value.ndim != ndim:
        raise ValueError(f"{name} must be {ndim}D, got shape {value.shape}")
    if value.shape[0] != n:
        raise ValueError(f"{name} has {value.shape[0]} rows, expected {n} to match x")


@dataclass(frozen=True)
class Population:
    """Immutable struct-of-arrays representation of a population.

    Attributes:
        x: Decision variables for all solutions, shape (n, n_vars).
        objectives: Objective values, shape (n, n_obj), or None if not evaluated.
        rank: Front indices, shape (n,), or None if not sorted.
        crowding_distance: Crowding distances, shape (n,), or None if not computed.
        fitness: Shared fitness values, shape (n,), or None if not computed.

    Example:
        >>> x = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        >>> obj = np.array([[0.5, 0.5], [0.3, 0.7], [0.4, 0.6]])
        >>> pop = Population(x=x, objectives=obj)
        >>> len(pop), pop.n_vars, pop.n_obj
        (3, 2, 2)
    """

    x: np.ndarray
    objectives: np.ndarray | None = None
    rank: np.ndarray | None = None
    crowding_distance: np.ndarray | None = None
    fitness: np.ndarray | None = None

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays.

        Raises:
            TypeError: If any array is not a numpy array.
            ValueError: If array shapes or dtypes are inconsistent.
        """
        if not isinstance(self.x, np.ndarray):
            raise TypeError(f"x must be a numpy array, got {type(self.x).__name__}")
        if self.x.ndim != 2:
            raise ValueError(f"x must be 2D, got shape {self.x.shape}")

        n = self.x.shape[0]
        object.__setattr__(self, "x", self.x.astype(np.float64, copy=True))

        if self.objectives is not None:
            _check_row_array("objectives", self.objectives, n, ndim=2)
            object.__setattr__(self, "objectives", self.objectives.astype(np.float64, copy=True))

        if self.rank is not None:
            _check_row_array("rank", self.rank, n, ndim=1)
            if not np.issubdtype(self.rank.dtype, np.integer):
                raise ValueError(f"rank must have integer dtype, got {self.rank.dtype}")
            object.__setattr__(self, "rank", self.rank.copy())

        for name in ("crowding_distance", "fitness"):
            value = getattr(self, name)
            if value is None:
                continue
            _check_row_array(name, value, n, ndim=1)
            if not np.issubdtype(value.dtype, np.floating):
                raise ValueError(f"{name} must have float dtype, got {value.dtype}")
            object.__setattr__(self, name, value.copy())

    def __len__(self) -> int:
        return self.x.shape[0]

    def __getitem__(self, idx: int) -> Solution:
        """Get a read-only view of a single solution.

        Args:
            idx: Index of the solution (supports negative indexing).

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")

        n = len(self)
        original_idx = idx
        if idx < 0:
            idx = n + idx
        if idx < 0 or idx >= n:
            raise IndexError(f"index {original_idx} is out of bounds for population with {n} solutions")

        return Solution(
            variables=self.x[idx],
            objectives=self.objectives[idx] if self.objectives is not None else None,
            rank=int(self.rank[idx]) if self.rank is not None else None,
            crowding_distance=float(self.crowding_distance[idx]) if self.crowding_distance is not None else None,
            fitness=float(self.fitness[idx]) if self.fitness is not None else None,
        )

    @property
    def n_vars(self) -> int:
        return self.x.shape[1]

    @property
    def n_obj(self) -> int | None:
        """Number of objectives, or None if the population is not evaluated."""
        if self.objectives is None:
            return None
        return self.objectives.shape[1]

    @property
    def fronts(self) -> list[np.ndarray]:
        """Index arrays of each front in rank order.

        Raises:
            ValueError: If the population has not been sorted.
        """
        if self.rank is None:
            raise ValueError("Population has no rank; sort it before asking for fronts")
        if len(self) == 0:
            return []
        return [np.flatnonzero(self.rank == r) for r in range(int(self.rank.max()) + 1)]

    def take(self, indices: np.ndarray) -> "Population":
        """Return a new population holding the given rows, with derived data dropped."""
        return Population(
            x=self.x[indices],
            objectives=self.objectives[indices] if self.objectives is not None else None,
        )

    def concat(self, other: "Population") -> "Population":
        """Union of two evaluated populations (rank, crowding and fitness are dropped).

        Raises:
            ValueError: If either population is unevaluated or the widths differ.
        """
        if self.objectives is None or other.objectives is None:
            raise ValueError("Both populations must have objectives computed to be merged")
        if self.n_vars != other.n_vars or self.n_obj != other.n_obj:
            raise ValueError(
                f"Cannot merge populations of shape ({self.n_vars}, {self.n_obj}) and ({other.n_vars}, {other.n_obj})"
            )
        return Population(
            x=np.concatenate([self.x, other.x]),
            objectives=np.concatenate([self.objectives, other.objectives]),
        )
