"""Pareto primitives for NSGA and NSGA-II.

This module provides the core pure functions for ranking and diversity:
- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- non_dominated_fronts: Deb's fast non-dominated sort, returning fronts
- non_dominated_sort: the same sort, returning one rank per solution
- fronts_from_ranks: turn a rank array back into fronts
- crowding_distance: diversity metric for solutions in one front
"""

import numpy as np


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (minimization).

    A solution a dominates b if and only if:
      - a[k] <= b[k] for ALL objectives
      - a[k] < b[k] for AT LEAST ONE objective

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Raises:
        ValueError: If a and b have different lengths.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f"objective vectors differ in shape: {a.shape} vs {b.shape}")
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance for all solutions.

    Args:
        objectives: Objective values for all solutions. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] is True iff
        solution i dominates solution j.

    Examples:
        >>> dom = dominates_matrix(np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 2.0]]))
        >>> bool(dom[0, 1]), bool(dom[0, 2]), bool(dom[2, 0])
        (True, True, False)
    """
    # (n, 1, n_obj) against (1, n, n_obj)
    a = objectives[:, np.newaxis, :]
    b = objectives[np.newaxis, :, :]

    all_leq = np.all(a <= b, axis=2)
    any_lt = np.any(a < b, axis=2)

    return all_leq & any_lt


def non_dominated_fronts(objectives: np.ndarray) -> list[np.ndarray]:
    """Partition solutions into Pareto fronts using Deb's fast algorithm.

    Every solution lands in exactly one front. Solutions in front i are not
    dominated by any solution in front i or later, and every solution in
    front i > 0 is dominated by at least one solution in front i - 1.
    Time complexity: O(M * N^2) for M objectives and N solutions.

    Args:
        objectives: Objective values for all solutions. Shape (n, n_obj).

    Returns:
        List of integer index arrays, front 0 first. Indices inside a front
        are ascending.

    Examples:
        >>> objs = np.array([[0.0, 0.0], [1.0, 1.0], [1.0, 0.0]])
        >>> [f.tolist() for f in non_dominated_fronts(objs)]
        [[0], [2], [1]]
    """
    n = objectives.shape[0]
    if n == 0:
        return []

    dom = dominates_matrix(objectives)

    # dominated_count[i] = number of solutions that dominate i
    dominated_count = dom.sum(axis=0).astype(np.int64)

    fronts: list[np.ndarray] = []
    current = np.flatnonzero(dominated_count == 0)

    while len(current) > 0:
        fronts.append(current)
        # Each member of the current front releases the solutions it dominates
        dominated_count = dominated_count - dom[current].sum(axis=0)
        dominated_count[current] = -1
        current = np.flatnonzero(dominated_count == 0)

    return fronts


def non_dominated_sort(objectives: np.ndarray) -> np.ndarray:
    """Assign each solution the index of its Pareto front.

    Args:
        objectives: Objective values for all solutions. Shape (n, n_obj).

    Returns:
        Integer array of shape (n,). Rank 0 = Pareto optimal (first front).

    Examples:
        >>> non_dominated_sort(np.array([[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]))
        array([0, 1, 2])
    """
    ranks = np.full(objectives.shape[0], -1, dtype=np.int64)
    for r, front in enumerate(non_dominated_fronts(objectives)):
        ranks[front] = r
    return ranks


def fronts_from_ranks(rank: np.ndarray) -> list[np.ndarray]:
    """Group solution indices by rank, lowest rank first."""
    if len(rank) == 0:
        return []
    return [np.flatnonzero(rank == r) for r in range(int(rank.max()) + 1)]


def crowding_distance(front_objectives: np.ndarray) -> np.ndarray:
    """Compute crowding distance for solutions in a single Pareto front.

    Boundary solutions (min or max of any objective) receive infinite
    distance. Interior solutions receive the sum over objectives of the
    neighbour gap normalized by that objective's range within the front.
    An objective whose range is zero contributes nothing.

    Args:
        front_objectives: Objective values for solutions in ONE front only.
            Shape (n_front, n_obj).

    Returns:
        Array of shape (n_front,). Higher values are more isolated.

    Examples:
        >>> cd = crowding_distance(np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]]))
        >>> bool(np.isinf(cd[0]) and np.isinf(cd[-1]))
        True
    """
    n_front = front_objectives.shape[0]

    if n_front == 0:
        return np.array([], dtype=np.float64)
    if n_front <= 2:
        return np.full(n_front, np.inf)

    n_obj = front_objectives.shape[1]
    distances = np.zeros(n_front, dtype=np.float64)

    for m in range(n_obj):
        order = np.argsort(front_objectives[:, m], kind="stable")
        values = front_objectives[order, m]

        distances[order[0]] = np.inf
        distances[order[-1]] = np.inf

        obj_range = values[-1] - values[0]
        if obj_range > 0:
            distances[order[1:-1]] += (values[2:] - values[:-2]) / obj_range

    return distances
