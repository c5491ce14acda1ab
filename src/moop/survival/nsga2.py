"""NSGA-II survivor selection strategy.

Implements the elitist merge-and-truncate step of NSGA-II: the combined
parent+child pool is sorted into fronts, whole fronts are copied while they
fit, and the first front that would overflow is cut down by crowding
distance.
"""

import logging

import numpy as np

from moop.population import Population
from moop.primitives import crowding_distance, non_dominated_fronts

logger = logging.getLogger(__name__)


def nsga2_survival():
    """Create an NSGA-II survivor selector.

    1. Partition the pool into fronts with non-dominated sorting
    2. Copy whole fronts in rank order while the running total stays
       within n_survivors
    3. Score the first overflowing front (and only that front) by crowding
       distance and keep its most isolated members to fill the remaining
       slots exactly

    Rank and crowding distance are then recomputed for the survivors, front
    by front, so nothing computed for the pool leaks into the next
    generation.

    Returns:
        A SurvivorSelector callable returning state with 'rank' and
        'crowding_distance' arrays aligned with the survivors.

    Example:
        >>> selector = nsga2_survival()
        >>> survivors, state = selector(union, n_survivors=100)
    """

    def selector(
        pop: Population,
        n_survivors: int,
        **kwargs: np.ndarray,
    ) -> tuple[np.ndarray, dict[str, np.ndarray]]:
        """Select survivors using NSGA-II crowded truncation.

        Args:
            pop: Combined population to select from.
            n_survivors: Number of survivors to select.
            **kwargs: Unused. NSGA-II computes all metrics internally.

        Returns:
            Tuple of (indices, state) where indices has shape (n_survivors,)
            and state holds 'rank' (int64) and 'crowding_distance' (float64)
            for the survivors, in the same order as indices.

        Raises:
            ValueError: If population has no objectives, n_survivors is not
                positive, or n_survivors exceeds population size.

        Example:
            >>> obj = np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]])
            >>> pop = Population(x=np.zeros((4, 1)), objectives=obj)
            >>> indices, state = nsga2_survival()(pop, n_survivors=2)
            >>> sorted(indices.tolist())
            [0, 3]
        """
        if pop.objectives is None:
            raise ValueError("Population must have objectives computed for survivor selection")
        if n_survivors <= 0:
            raise ValueError(f"n_survivors must be positive, got {n_survivors}")
        if n_survivors > len(pop):
            raise ValueError(f"n_survivors ({n_survivors}) cannot exceed population size ({len(pop)})")

        fronts = non_dominated_fronts(pop.objectives)

        selected: list[int] = []
        selected_ranks: list[int] = []

        for r, front in enumerate(fronts):
            remaining = n_survivors - len(selected)
            if remaining == 0:
                break

            if len(front) <= remaining:
                selected.extend(front.tolist())
                selected_ranks.extend([r] * len(front))
            else:
                cd = crowding_distance(pop.objectives[front])
                # Descending crowding distance, stable among equal distances
                keep = np.argsort(-cd, kind="stable")[:remaining]
                selected.extend(front[keep].tolist())
                selected_ranks.extend([r] * remaining)
                logger.debug("Front %d truncated from %d to %d members", r, len(front), remaining)

        selected_arr = np.array(selected, dtype=np.intp)
        rank = np.array(selected_ranks, dtype=np.int64)

        survivor_cd = np.zeros(n_survivors, dtype=np.float64)
        for r in range(int(rank.max()) + 1):
            members = np.flatnonzero(rank == r)
            survivor_cd[members] = crowding_distance(pop.objectives[selected_arr[members]])

        return selected_arr, {
            "rank": rank,
            "crowding_distance": survivor_cd,
        }

    return selector
