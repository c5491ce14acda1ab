"""Protocol definitions for the pluggable parts of NSGA and NSGA-II.

The drivers never depend on concrete classes. They accept any object that
follows one of these protocols:

1. **Problem**: dimensions, variable bounds and an evaluation function.
2. **Crossover**: two parents in, two freshly allocated children out.
3. **Mutation**: in-place perturbation of freshly produced children.
4. **ParentSelector**: chooses parent indices from the current population.
5. **SurvivorSelector**: chooses which members of a parent+child union
   survive into the next generation.

Every stochastic operator receives the run's ``numpy.random.Generator`` as
an argument, so one seed reproduces a whole run.

Example usage:
    ```python
    parent_indices = parent_selector(pop, n_parents=2, rng=rng, **state)
    c1, c2 = crossover(pop.x[parent_indices[0]], pop.x[parent_indices[1]], rng)
    children = np.stack([c1, c2])
    mutate(children, rng)
    survivor_indices, state = survivor_selector(union, n_survivors=100)
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np

from moop.population import Population


@runtime_checkable
class Problem(Protocol):
    """Multi-objective minimization problem.

    Attributes:
        n_vars: Number of decision variables.
        n_obj: Number of objectives.
        lower: Lower variable bounds, shape (n_vars,).
        upper: Upper variable bounds, shape (n_vars,).
    """

    n_vars: int
    n_obj: int
    lower: np.ndarray
    upper: np.ndarray

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Map decision variables (n_vars,) to objective values (n_obj,).

        Must be pure: no side effects, same input gives the same output.
        """
        ...


@runtime_checkable
class Crossover(Protocol):
    """Crossover of two real-valued parents into two children.

    Implementations must raise ValueError when the parents differ in length
    and must return new arrays (never the parents themselves), since the same
    parent may be picked for several crossovers in one generation.
    """

    def __call__(
        self,
        p1: np.ndarray,
        p2: np.ndarray,
        rng: np.random.Generator,
    ) -> tuple[np.ndarray, np.ndarray]: ...


@runtime_checkable
class Mutation(Protocol):
    """In-place mutation of a batch of children, shape (k, n_vars)."""

    def __call__(self, children: np.ndarray, rng: np.random.Generator) -> None: ...


@runtime_checkable
class ParentSelector(Protocol):
    """Protocol for parent selection strategies.

    Parameters:
        pop: The current population to select parents from.
        n_parents: Number of parent indices to return.
        rng: NumPy random number generator for reproducible selection.
        **kwargs: Algorithm-specific state. NSGA passes 'fitness' (shared
            fitness, larger is better); NSGA-II passes 'rank' and
            'crowding_distance'.

    Returns:
        Array of shape (n_parents,) of indices into the population.
    """

    def __call__(
        self,
        pop: Population,
        n_parents: int,
        rng: np.random.Generator,
        **kwargs: np.ndarray,
    ) -> np.ndarray: ...


@runtime_checkable
class SurvivorSelector(Protocol):
    """Protocol for survivor selection strategies.

    Parameters:
        pop: The combined population (parents + children).
        n_survivors: Number of solutions to keep.
        **kwargs: Algorithm-specific input data.

    Returns:
        A tuple of:
        - indices: Unique indices into the population, shape (n_survivors,).
        - state: Dictionary of arrays aligned with the survivors, passed on to
          the next generation's parent selection. For NSGA-II this is
          {'rank': ..., 'crowding_distance': ...}.
    """

    def __call__(
        self,
        pop: Population,
        n_survivors: int,
        **kwargs: np.ndarray,
    ) -> tuple[np.ndarray, dict[str, np.ndarray]]: ...
