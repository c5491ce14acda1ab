"""Crowded tournament selection for NSGA-II."""

import numpy as np

from moop.population import Population


def crowded_tournament(tournament_size: int = 2):
    """Create a crowded tournament parent selector.

    Each tournament draws tournament_size distinct solutions. They are
    compared by:
    1. Pareto rank (lower is better)
    2. If ranks are equal, crowding distance (higher is better)

    Args:
        tournament_size: Number of solutions in each tournament, at least 2.

    Returns:
        A ParentSelector callable. Its ``tournament_size`` attribute lets
        drivers check the population is large enough before running.

    Raises:
        ValueError: If tournament_size < 2.

    Example:
        >>> selector = crowded_tournament(tournament_size=2)
        >>> parents = selector(pop, n_parents=20, rng=rng, rank=rank, crowding_distance=cd)
    """
    if tournament_size < 2:
        raise ValueError(f"tournament_size must be >= 2, got {tournament_size}")

    def selector(
        pop: Population,
        n_parents: int,
        rng: np.random.Generator,
        **kwargs: np.ndarray,
    ) -> np.ndarray:
        """Select parents using crowded tournament selection.

        Args:
            pop: Population to select from.
            n_parents: Number of parents to select.
            rng: Random number generator for reproducibility.
            **kwargs: Must include 'rank' and 'crowding_distance' arrays.

        Returns:
            Array of selected parent indices.

        Raises:
            ValueError: If 'rank' or 'crowding_distance' not in kwargs, or the
                population is smaller than the tournament.
        """
        if "rank" not in kwargs:
            raise ValueError("crowded tournament selection requires 'rank' in kwargs")
        if "crowding_distance" not in kwargs:
            raise ValueError("crowded tournament selection requires 'crowding_distance' in kwargs")

        rank = kwargs["rank"]
        crowding_distance = kwargs["crowding_distance"]
        pop_size = len(pop)
        if pop_size < tournament_size:
            raise ValueError(f"population of {pop_size} is smaller than the tournament size {tournament_size}")

        selected = np.empty(n_parents, dtype=np.intp)

        for i in range(n_parents):
            candidates = rng.choice(pop_size, size=tournament_size, replace=False)

            best_idx = candidates[0]
            for c in candidates[1:]:
                if rank[c] < rank[best_idx] or (
                    rank[c] == rank[best_idx] and crowding_distance[c] > crowding_distance[best_idx]
                ):
                    best_idx = c

            selected[i] = best_idx

        return selected

    selector.tournament_size = tournament_size
    return selector
