"""Crossover operators for real-valued solutions.

Both operators are factories returning functions with the signature
``(p1, p2, rng) -> (c1, c2)``. Children are always new arrays.
"""

from collections.abc import Callable

import numpy as np

Bounds = tuple[float, float] | tuple[np.ndarray, np.ndarray]
"""Bounds for decision variables.

A scalar pair ``(lower, upper)`` applies the same bounds to all variables.
A pair of arrays ``(lower_array, upper_array)`` specifies per-variable bounds.
"""


def _check_parents(p1: np.ndarray, p2: np.ndarray) -> None:
    if p1.shape != p2.shape:
        raise ValueError(f"Parents must be of the same size, got {p1.shape} and {p2.shape}")


def arithmetic_crossover(
    alpha: float = 0.5,
    bounds: Bounds | None = None,
) -> Callable[[np.ndarray, np.ndarray, np.random.Generator], tuple[np.ndarray, np.ndarray]]:
    """Create an arithmetic (blend) crossover operator.

    c1 = alpha * p1 + (1 - alpha) * p2
    c2 = (1 - alpha) * p1 + alpha * p2

    Args:
        alpha: Weighting factor in [0, 1].
        bounds: Optional bounds; children are clipped to them.

    Raises:
        ValueError: If alpha is outside [0, 1].

    Example:
        >>> crossover = arithmetic_crossover(alpha=0.25)
        >>> c1, c2 = crossover(np.array([0.0, 4.0]), np.array([4.0, 0.0]), np.random.default_rng(0))
        >>> c1, c2
        (array([3., 1.]), array([1., 3.]))
    """
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be in [0, 1], got {alpha}")

    def crossover(
        p1: np.ndarray, p2: np.ndarray, rng: np.random.Generator
    ) -> tuple[np.ndarray, np.ndarray]:
        _check_parents(p1, p2)
        c1 = alpha * p1 + (1.0 - alpha) * p2
        c2 = (1.0 - alpha) * p1 + alpha * p2
        if bounds is not None:
            lower, upper = bounds
            c1 = np.clip(c1, lower, upper)
            c2 = np.clip(c2, lower, upper)
        return c1, c2

    return crossover


def one_point_crossover(
    prob: float = 0.9,
) -> Callable[[np.ndarray, np.ndarray, np.random.Generator], tuple[np.ndarray, np.ndarray]]:
    """Create a one-point crossover operator.

    A cut point in [1, n_vars) is drawn; the children swap tails after it.
    With probability 1 - prob (and always for single-variable solutions) the
    children are copies of the parents.

    Args:
        prob: Probability of performing the crossover.

    Raises:
        ValueError: If prob is outside [0, 1].
    """
    if not 0.0 <= prob <= 1.0:
        raise ValueError(f"prob must be in [0, 1], got {prob}")

    def crossover(
        p1: np.ndarray, p2: np.ndarray, rng: np.random.Generator
    ) -> tuple[np.ndarray, np.ndarray]:
        _check_parents(p1, p2)
        c1 = p1.copy()
        c2 = p2.copy()

        n_vars = len(p1)
        if n_vars < 2 or rng.random() >= prob:
            return c1, c2

        point = int(rng.integers(1, n_vars))
        c1[point:] = p2[point:]
        c2[point:] = p1[point:]
        return c1, c2

    return crossover
