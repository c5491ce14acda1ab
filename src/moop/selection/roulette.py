"""Roulette wheel (fitness-proportionate) selection over shared fitness."""

import numpy as np

from moop.population import Population


def roulette_wheel(distinct: bool = True):
    """Create a roulette wheel parent selector.

    Selection probability is proportional to the 'fitness' state, so larger
    values are more desirable. This matches NSGA's shared fitness. For
    fitness values f_i the probability is

        p_i = f_i / sum_j f_j

    If any value is not positive, all values are shifted so the smallest
    becomes a small positive weight. Equal values select uniformly.

    Args:
        distinct: If True, the parents drawn in one call are all different
            solutions (sampling without replacement).

    Returns:
        A ParentSelector callable.

    Example:
        >>> selector = roulette_wheel()
        >>> parents = selector(pop, n_parents=2, rng=rng, fitness=shared)
    """

    def selector(
        pop: Population,
        n_parents: int,
        rng: np.random.Generator,
        **kwargs: np.ndarray,
    ) -> np.ndarray:
        """Select parents with probability proportional to fitness.

        Args:
            pop: Population to select from.
            n_parents: Number of parents to select.
            rng: Random number generator for reproducibility.
            **kwargs: Must include 'fitness', shape (n,).

        Returns:
            Array of selected parent indices, shape (n_parents,), dtype np.intp.

        Raises:
            ValueError: If 'fitness' is missing or misshapen, or distinct
                parents are requested from a population that is too small.
        """
        if "fitness" not in kwargs:
            raise ValueError("roulette wheel selection requires 'fitness' in kwargs")

        fitness = np.asarray(kwargs["fitness"], dtype=np.float64)
        pop_size = len(pop)
        if fitness.shape != (pop_size,):
            raise ValueError(f"fitness must have shape ({pop_size},), got {fitness.shape}")
        if distinct and n_parents > pop_size:
            raise ValueError(f"cannot select {n_parents} distinct parents from {pop_size} solutions")

        if np.all(fitness == fitness[0]):
            return rng.choice(pop_size, size=n_parents, replace=not distinct).astype(np.intp)

        weights = fitness
        if np.min(weights) <= 0:
            weights = weights - np.min(weights) + 1e-10

        probs = weights / weights.sum()
        selected = rng.choice(pop_size, size=n_parents, replace=not distinct, p=probs)

        return selected.astype(np.intp)

    return selector
