"""NSGA-II with pluggable selection and survival strategies.

Example:
    >>> from moop.algorithms.nsga2 import nsga2
    >>> from moop.operators import arithmetic_crossover, gaussian_mutation
    >>> from moop.problems import ratio_problem
    >>>
    >>> problem = ratio_problem()
    >>> bounds = (problem.lower, problem.upper)
    >>> result = nsga2(
    ...     problem,
    ...     crossover=arithmetic_crossover(0.5, bounds),
    ...     mutate=gaussian_mutation(0.03, 1.0, bounds),
    ...     pop_size=50,
    ...     n_generations=100,
    ...     seed=42,
    ... )
    >>> len(result.population)
    50
"""

import logging
from collections.abc import Callable

import numpy as np

# Import selection and survival modules to trigger strategy registration
import moop.selection  # noqa: F401
import moop.survival  # noqa: F401
from moop.operators import evaluate_population, make_children, random_solutions
from moop.population import Population
from moop.problems import validate_problem
from moop.protocols import Crossover, Mutation, ParentSelector, Problem, SurvivorSelector
from moop.registry import SelectionRegistry, SurvivalRegistry
from moop.results import NSGA2Result

logger = logging.getLogger(__name__)


def nsga2(
    problem: Problem,
    crossover: Crossover,
    mutate: Mutation,
    pop_size: int,
    n_generations: int,
    seed: int | np.random.Generator | None = None,
    callback: Callable[[NSGA2Result, int], bool] | None = None,
    select: str | ParentSelector = "crowded",
    survive: str | SurvivorSelector = "nsga2",
    select_options: dict | None = None,
) -> NSGA2Result:
    """Run NSGA-II multi-objective minimization.

    Args:
        problem: The problem to minimize (moop.protocols.Problem).
        crossover: Two parents to two children. Signature: (p1, p2, rng) -> (c1, c2)
        mutate: In-place mutation of a batch of children. Signature: (children, rng) -> None
        pop_size: Population size N, at least 2. Odd sizes are allowed.
        n_generations: Number of generations to run.
        seed: Seed or Generator for the run's single random source.
        callback: Called at the start of each generation as
            callback(result, generation). Returning True stops early.
        select: Parent selection strategy, a registered name or a callable.
        survive: Survivor selection strategy, a registered name or a callable.
        select_options: Keyword arguments for the selection factory when
            select is a name, e.g. {"tournament_size": 3}.

    Returns:
        NSGA2Result with the final population, ranks, crowding distances,
        generations completed and evaluations performed.

    Raises:
        ValueError: If the problem is malformed, pop_size < 2, n_generations
            is negative, or the tournament is larger than the population.
        KeyError: If a strategy name is not registered.

    Algorithm Flow:
        1. Initialize and evaluate N random solutions
        2. Run survival on the initial population to get rank and crowding
        3. For each generation:
           a. Create N children with selection, crossover and mutation
           b. Evaluate children, form the 2N union with the parents
           c. Survival picks N solutions and returns their fresh state
        4. Return the final population with its state
    """
    validate_problem(problem)
    if pop_size < 2:
        raise ValueError(f"pop_size must be at least 2, got {pop_size}")
    if n_generations < 0:
        raise ValueError(f"n_generations must be non-negative, got {n_generations}")

    parent_selector = SelectionRegistry.get(select, **(select_options or {})) if isinstance(select, str) else select
    survivor_selector = SurvivalRegistry.get(survive) if isinstance(survive, str) else survive

    tournament_size = getattr(parent_selector, "tournament_size", None)
    if tournament_size is not None and pop_size < tournament_size:
        raise ValueError(f"pop_size ({pop_size}) must be at least the tournament size ({tournament_size})")

    rng = np.random.default_rng(seed)

    init_x = random_solutions(problem, pop_size, rng)
    pop = Population(x=init_x, objectives=evaluate_population(problem, init_x))

    order, state = survivor_selector(pop, pop_size)
    pop = pop.take(order)

    total_evaluations = pop_size
    generations_completed = 0
    logger.info("NSGA-II started: pop_size=%d, n_generations=%d", pop_size, n_generations)

    for gen in range(n_generations):
        if callback is not None:
            current = NSGA2Result(
                population=pop,
                rank=state["rank"],
                crowding_distance=state["crowding_distance"],
                generations=generations_completed,
                evaluations=total_evaluations,
            )
            if callback(current, gen):
                logger.info("NSGA-II stopped by callback at generation %d", gen)
                break

        children_x = make_children(pop, pop_size, parent_selector, crossover, mutate, rng, **state)
        children = Population(x=children_x, objectives=evaluate_population(problem, children_x))
        total_evaluations += pop_size

        union = pop.concat(children)
        survivor_indices, state = survivor_selector(union, pop_size)
        pop = union.take(survivor_indices)

        generations_completed += 1
        logger.debug(
            "Generation %d: %d solutions in front 0, %d fronts among survivors",
            generations_completed,
            int(np.sum(state["rank"] == 0)),
            int(state["rank"].max()) + 1,
        )

    logger.info("NSGA-II finished after %d generations, %d evaluations", generations_completed, total_evaluations)

    return NSGA2Result(
        population=pop,
        rank=state["rank"],
        crowding_distance=state["crowding_distance"],
        generations=generations_completed,
        evaluations=total_evaluations,
    )
