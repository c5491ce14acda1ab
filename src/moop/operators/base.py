"""Base population-level helpers.

This module provides the lift decorator and the two ways new solutions
enter a run: uniform initialization inside the problem's bounds and
evaluation against the problem.
"""

from collections.abc import Callable

import numpy as np

from moop.protocols import Problem


def lift(fn: Callable[[np.ndarray], np.ndarray]) -> Callable[[np.ndarray], np.ndarray]:
    """Lift a per-solution function to work on a whole population.

    Args:
        fn: Function that operates on a single solution.
            Signature: (n_vars,) -> (n_out,)

    Returns:
        A function that operates on a population.
        Signature: (n, n_vars) -> (n, n_out)

    Example:
        >>> evaluate = lift(lambda x: np.array([x.sum(), x.prod()]))
        >>> evaluate(np.array([[1.0, 2.0], [3.0, 4.0]]))
        array([[ 3.,  2.],
               [ 7., 12.]])
    """

    def lifted(x: np.ndarray) -> np.ndarray:
        return np.stack([fn(x[i]) for i in range(x.shape[0])])

    return lifted


def evaluate_population(problem: Problem, x: np.ndarray) -> np.ndarray:
    """Evaluate every row of x once.

    Returns:
        Objectives of shape (n, n_obj).

    Raises:
        ValueError: If x has the wrong width or the problem returns the wrong
            number of objectives.
    """
    if x.ndim != 2 or x.shape[1] != problem.n_vars:
        raise ValueError(f"expected solutions of shape (n, {problem.n_vars}), got {x.shape}")
    if x.shape[0] == 0:
        return np.empty((0, problem.n_obj), dtype=np.float64)

    objectives = lift(problem.evaluate)(x).astype(np.float64)
    if objectives.shape != (x.shape[0], problem.n_obj):
        raise ValueError(
            f"problem returned objectives of shape {objectives.shape[1:]}, expected ({problem.n_obj},)"
        )
    return objectives


def random_solutions(problem: Problem, n: int, rng: np.random.Generator) -> np.ndarray:
    """Draw n solutions uniformly inside the problem's bounds, shape (n, n_vars)."""
    return rng.uniform(problem.lower, problem.upper, size=(n, problem.n_vars))
