"""The classic sharing-based NSGA.

Each generation is sorted into fronts, every front receives shared fitness
(see moop.sharing), and the next generation is bred entirely from parents
picked with probability proportional to that shared fitness. There is no
survivor step: children replace their parents.

Example:
    >>> from moop.algorithms.nsga import nsga
    >>> from moop.operators import gaussian_mutation, one_point_crossover
    >>> from moop.problems import squares_problem
    >>>
    >>> problem = squares_problem()
    >>> result = nsga(
    ...     problem,
    ...     crossover=one_point_crossover(0.9),
    ...     mutate=gaussian_mutation(0.03, 1.0, (problem.lower, problem.upper)),
    ...     pop_size=50,
    ...     n_generations=100,
    ...     distance_space="objective-space",
    ...     seed=42,
    ... )
    >>> len(result.fronts[0]) > 0
    True
"""

import logging
from collections.abc import Callable

import numpy as np

# Import selection modules to trigger strategy registration
import moop.selection  # noqa: F401
from moop.operators import evaluate_population, make_children, random_solutions
from moop.population import Population
from moop.primitives import non_dominated_fronts
from moop.problems import validate_problem
from moop.protocols import Crossover, Mutation, ParentSelector, Problem
from moop.registry import SelectionRegistry
from moop.results import NSGAResult
from moop.sharing import DistanceSpace, shared_fitness

logger = logging.getLogger(__name__)


def _sharing_scale(problem: Problem, points: np.ndarray, space: DistanceSpace) -> np.ndarray:
    if space is DistanceSpace.DECISION:
        return np.asarray(problem.upper, dtype=np.float64) - np.asarray(problem.lower, dtype=np.float64)
    return points.max(axis=0) - points.min(axis=0)


def _assess(
    problem: Problem,
    pop: Population,
    space: DistanceSpace,
    sigma_share: float,
    alpha: float,
    epsilon: float,
    normalize: bool,
) -> tuple[np.ndarray, np.ndarray]:
    """Sort pop into fronts and compute shared fitness. Returns (rank, fitness)."""
    fronts = non_dominated_fronts(pop.objectives)

    points = pop.x if space is DistanceSpace.DECISION else pop.objectives
    scale = _sharing_scale(problem, points, space) if normalize else None
    fitness = shared_fitness(
        points,
        fronts,
        pop_size=len(pop),
        sigma_share=sigma_share,
        alpha=alpha,
        epsilon=epsilon,
        scale=scale,
    )

    rank = np.empty(len(pop), dtype=np.int64)
    for r, front in enumerate(fronts):
        rank[front] = r
    return rank, fitness


def nsga(
    problem: Problem,
    crossover: Crossover,
    mutate: Mutation,
    pop_size: int,
    n_generations: int,
    distance_space: str | DistanceSpace = DistanceSpace.DECISION,
    sigma_share: float = 1.0,
    alpha: float = 2.0,
    epsilon: float = 0.1,
    normalize: bool = True,
    seed: int | np.random.Generator | None = None,
    callback: Callable[[NSGAResult, int], bool] | None = None,
    select: str | ParentSelector = "roulette",
    select_options: dict | None = None,
) -> NSGAResult:
    """Run the sharing-based NSGA.

    Args:
        problem: The problem to minimize (moop.protocols.Problem).
        crossover: Two parents to two children. Signature: (p1, p2, rng) -> (c1, c2)
        mutate: In-place mutation of a batch of children. Signature: (children, rng) -> None
        pop_size: Population size, at least 2.
        n_generations: Number of generations to run.
        distance_space: "decision-space" or "objective-space"; where niche
            distances are measured.
        sigma_share: Niche radius of the sharing function.
        alpha: Exponent of the sharing function.
        epsilon: Gap separating the shared fitness of consecutive fronts.
        normalize: Divide each distance dimension by its range (variable
            bounds in decision space, current objective ranges in objective
            space) before measuring.
        seed: Seed or Generator for the run's single random source.
        callback: Called at the start of each generation as
            callback(result, generation). Returning True stops early.
        select: Parent selection strategy; receives 'fitness' (shared
            fitness, larger is better) as state.
        select_options: Keyword arguments for the selection factory when
            select is a name.

    Returns:
        NSGAResult for the final population, sorted and shared.

    Raises:
        ValueError: If the problem is malformed, the distance space is
            unknown, pop_size < 2, n_generations is negative or a sharing
            parameter is out of range.
        KeyError: If a strategy name is not registered.
    """
    validate_problem(problem)
    space = DistanceSpace.parse(distance_space)
    if pop_size < 2:
        raise ValueError(f"pop_size must be at least 2, got {pop_size}")
    if n_generations < 0:
        raise ValueError(f"n_generations must be non-negative, got {n_generations}")
    if sigma_share <= 0:
        raise ValueError(f"sigma_share must be positive, got {sigma_share}")
    if alpha <= 0:
        raise ValueError(f"alpha must be positive, got {alpha}")
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")

    parent_selector = SelectionRegistry.get(select, **(select_options or {})) if isinstance(select, str) else select

    rng = np.random.default_rng(seed)

    init_x = random_solutions(problem, pop_size, rng)
    pop = Population(x=init_x, objectives=evaluate_population(problem, init_x))

    total_evaluations = pop_size
    generations_completed = 0
    logger.info("NSGA started: pop_size=%d, n_generations=%d, %s", pop_size, n_generations, space.value)

    for gen in range(n_generations):
        rank, fitness = _assess(problem, pop, space, sigma_share, alpha, epsilon, normalize)

        if callback is not None:
            current = NSGAResult(
                population=pop,
                rank=rank,
                fitness=fitness,
                generations=generations_completed,
                evaluations=total_evaluations,
            )
            if callback(current, gen):
                logger.info("NSGA stopped by callback at generation %d", gen)
                break

        children_x = make_children(pop, pop_size, parent_selector, crossover, mutate, rng, fitness=fitness)
        pop = Population(x=children_x, objectives=evaluate_population(problem, children_x))
        total_evaluations += pop_size

        generations_completed += 1
        logger.debug("Generation %d: %d fronts before breeding", generations_completed, int(rank.max()) + 1)

    rank, fitness = _assess(problem, pop, space, sigma_share, alpha, epsilon, normalize)
    logger.info("NSGA finished after %d generations, %d evaluations", generations_completed, total_evaluations)

    return NSGAResult(
        population=pop,
        rank=rank,
        fitness=fitness,
        generations=generations_completed,
        evaluations=total_evaluations,
    )
