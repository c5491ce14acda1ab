"""Offspring creation shared by NSGA and NSGA-II."""

import numpy as np

from moop.population import Population
from moop.protocols import Crossover, Mutation, ParentSelector


def make_children(
    pop: Population,
    n_children: int,
    select: ParentSelector,
    crossover: Crossover,
    mutate: Mutation,
    rng: np.random.Generator,
    **state: np.ndarray,
) -> np.ndarray:
    """Create children via selection, crossover, and mutation.

    Parents are drawn two at a time. Each pair is crossed into two children
    and both are mutated; when only one slot is left, the first child of the
    final pair is kept and the second dropped.

    Args:
        pop: Parent population.
        n_children: Number of children to create.
        select: Parent selector, called as select(pop, 2, rng, **state).
        crossover: Crossover operator, (p1, p2, rng) -> (c1, c2).
        mutate: Mutation operator, mutates a (2, n_vars) array in place.
        rng: Random number generator for the run.
        **state: Selection state, e.g. fitness or rank and crowding_distance.

    Returns:
        Array of shape (n_children, n_vars) of unevaluated children. The array
        is newly allocated and shares no memory with pop.
    """
    children = np.empty((n_children, pop.n_vars), dtype=np.float64)

    filled = 0
    while filled < n_children:
        parents = select(pop, 2, rng, **state)
        pair = np.array(crossover(pop.x[parents[0]], pop.x[parents[1]], rng), dtype=np.float64)
        mutate(pair, rng)

        take = min(2, n_children - filled)
        children[filled : filled + take] = pair[:take]
        filled += take

    return children
