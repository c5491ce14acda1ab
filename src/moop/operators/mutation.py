"""Gaussian mutation for real-valued solutions."""

from collections.abc import Callable

import numpy as np

from moop.operators.crossover import Bounds


def gaussian_mutation(
    prob: float = 0.03,
    sigma: float = 1.0,
    bounds: Bounds | None = None,
) -> Callable[[np.ndarray, np.random.Generator], None]:
    """Create a Gaussian mutation operator.

    Each component of each child is perturbed with probability prob by
    adding N(0, sigma^2) noise, then clipped to bounds. The children array
    is modified in place; it must hold freshly produced children, never
    views into a population.

    Args:
        prob: Per-component mutation probability in [0, 1].
        sigma: Standard deviation of the perturbation.
        bounds: Optional bounds used for clamping mutated components.

    Raises:
        ValueError: If prob is outside [0, 1] or sigma is negative.

    Example:
        >>> mutate = gaussian_mutation(prob=1.0, sigma=10.0, bounds=(0.0, 1.0))
        >>> children = np.full((2, 3), 0.5)
        >>> mutate(children, np.random.default_rng(0))
        >>> bool(np.all((children >= 0.0) & (children <= 1.0)))
        True
    """
    if not 0.0 <= prob <= 1.0:
        raise ValueError(f"prob must be in [0, 1], got {prob}")
    if sigma < 0:
        raise ValueError(f"sigma must be non-negative, got {sigma}")

    def mutate(children: np.ndarray, rng: np.random.Generator) -> None:
        if children.ndim != 2:
            raise ValueError(f"children must be 2D, got shape {children.shape}")

        mask = rng.random(children.shape) < prob
        if not np.any(mask):
            return

        noise = rng.normal(0.0, sigma, size=children.shape)
        children[mask] += noise[mask]

        if bounds is not None:
            lower, upper = bounds
            np.clip(children, lower, upper, out=children)

    return mutate
