"""Fitness sharing for the classic NSGA.

NSGA keeps a population spread along the front by degrading the fitness of
solutions that sit in crowded niches. Each front receives a dummy fitness
that is strictly below the worst shared fitness of the front before it, and
each member divides that dummy fitness by its niche count:

    niche_count(i) = 1 + sum_{j != i} share(d(i, j))
    share(d) = 1 - (d / sigma_share) ** alpha   if d < sigma_share else 0

Larger shared fitness is more desirable; the values are used directly as
roulette-wheel weights.

References:
    Srinivas, N., & Deb, K. (1994). Multiobjective optimization using
    nondominated sorting in genetic algorithms. Evolutionary Computation,
    2(3), 221-248.
"""

from enum import Enum

import numpy as np


class DistanceSpace(str, Enum):
    """Space in which niche distances are measured."""

    DECISION = "decision-space"
    OBJECTIVE = "objective-space"

    @classmethod
    def parse(cls, text: "str | DistanceSpace") -> "DistanceSpace":
        """Resolve a selector string such as ``"decision-space"``.

        Raises:
            ValueError: If the text names no known space.
        """
        if isinstance(text, cls):
            return text
        for member in cls:
            if member.value == text:
                return member
        available = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown distance space '{text}'. Available: {available}")


def share(distance: np.ndarray | float, sigma_share: float = 1.0, alpha: float = 2.0) -> np.ndarray:
    """Evaluate the sharing kernel at the given distance(s).

    Args:
        distance: Non-negative distance or array of distances.
        sigma_share: Niche radius. Solutions at least this far apart do not share.
        alpha: Kernel exponent.

    Returns:
        Array of the same shape as distance, values in [0, 1].

    Examples:
        >>> float(share(0.5))
        0.75
        >>> float(share(1.0))
        0.0
    """
    d = np.asarray(distance, dtype=np.float64)
    return np.where(d < sigma_share, 1.0 - (d / sigma_share) ** alpha, 0.0)


def pairwise_distances(points: np.ndarray, scale: np.ndarray | None = None) -> np.ndarray:
    """Euclidean distance matrix between rows of points.

    Args:
        points: Shape (n, d).
        scale: Optional per-dimension divisor, shape (d,). Dimensions whose
            scale is zero are left out of the distance.

    Returns:
        Symmetric array of shape (n, n) with a zero diagonal.
    """
    if scale is not None:
        scale = np.asarray(scale, dtype=np.float64)
        if scale.shape != (points.shape[1],):
            raise ValueError(f"scale must have shape ({points.shape[1]},), got {scale.shape}")
        keep = scale > 0
        points = points[:, keep] / scale[keep]

    diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    return np.sqrt(np.sum(diff * diff, axis=2))


def niche_counts(
    points: np.ndarray,
    sigma_share: float = 1.0,
    alpha: float = 2.0,
    scale: np.ndarray | None = None,
) -> np.ndarray:
    """Niche count of every row of points, measured against the other rows.

    Returns:
        Array of shape (n,), every value >= 1.
    """
    sh = share(pairwise_distances(points, scale), sigma_share, alpha)
    # share(0) == 1 on the diagonal stands in for the leading 1
    return sh.sum(axis=1)


def shared_fitness(
    points: np.ndarray,
    fronts: list[np.ndarray],
    pop_size: int,
    sigma_share: float = 1.0,
    alpha: float = 2.0,
    epsilon: float = 0.1,
    scale: np.ndarray | None = None,
) -> np.ndarray:
    """Assign shared fitness front by front.

    The first front starts from a dummy fitness of ``pop_size``. After a
    front is scored, the dummy fitness for the next front is the smallest
    shared value just assigned minus epsilon, so the best member of front
    i + 1 is strictly worse than the worst member of front i. If subtracting
    epsilon would leave nothing positive, the smallest value is halved instead.

    Args:
        points: Coordinates used for niche distances, shape (n, d). Pass the
            decision variables or the objectives.
        fronts: Index arrays of the fronts, best first, covering all rows.
        pop_size: Size of the population, seeds the first dummy fitness.
        sigma_share: Niche radius.
        alpha: Kernel exponent.
        epsilon: Gap between consecutive fronts.
        scale: Optional per-dimension normalization, see pairwise_distances.

    Returns:
        Array of shape (n,) of positive shared fitness values.

    Raises:
        ValueError: If a parameter is out of range.
    """
    if sigma_share <= 0:
        raise ValueError(f"sigma_share must be positive, got {sigma_share}")
    if alpha <= 0:
        raise ValueError(f"alpha must be positive, got {alpha}")
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    if pop_size <= 0:
        raise ValueError(f"pop_size must be positive, got {pop_size}")

    fitness = np.zeros(points.shape[0], dtype=np.float64)
    f_min = pop_size + epsilon

    for front in fronts:
        dummy = f_min - epsilon
        if dummy <= 0:
            dummy = f_min / 2
        fitness[front] = dummy / niche_counts(points[front], sigma_share, alpha, scale)
        f_min = float(fitness[front].min())

    return fitness
