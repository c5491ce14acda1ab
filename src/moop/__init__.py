"""moop: NSGA and NSGA-II for multi-objective minimization.

A pure numpy implementation of the non-dominated sorting genetic algorithms:
the classic NSGA with fitness sharing and the elitist NSGA-II with crowding
distance.

Example (NSGA-II):
    >>> from moop import arithmetic_crossover, gaussian_mutation, nsga2, ratio_problem
    >>> problem = ratio_problem()
    >>> bounds = (problem.lower, problem.upper)
    >>> result = nsga2(
    ...     problem,
    ...     crossover=arithmetic_crossover(0.5, bounds),
    ...     mutate=gaussian_mutation(0.03, 1.0, bounds),
    ...     pop_size=10,
    ...     n_generations=5,
    ...     seed=42,
    ... )
    >>> len(result.population)
    10

Example (NSGA):
    >>> from moop import nsga, one_point_crossover, squares_problem
    >>> problem = squares_problem()
    >>> result = nsga(
    ...     problem,
    ...     crossover=one_point_crossover(0.9),
    ...     mutate=gaussian_mutation(0.03, 1.0, (problem.lower, problem.upper)),
    ...     pop_size=10,
    ...     n_generations=5,
    ...     distance_space="decision-space",
    ...     seed=42,
    ... )
    >>> len(result.population)
    10
"""

from moop.algorithms import nsga, nsga2
from moop.io import read_population, write_population
from moop.operators import (
    arithmetic_crossover,
    evaluate_population,
    gaussian_mutation,
    lift,
    make_children,
    one_point_crossover,
    random_solutions,
)
from moop.population import Population, Solution
from moop.primitives import (
    crowding_distance,
    dominates,
    dominates_matrix,
    fronts_from_ranks,
    non_dominated_fronts,
    non_dominated_sort,
)
from moop.problems import FunctionProblem, get_problem, ratio_problem, squares_problem, validate_problem
from moop.registry import (
    SelectionRegistry,
    SurvivalRegistry,
    list_selections,
    list_survivals,
)
from moop.results import NSGA2Result, NSGAResult
from moop.selection import crowded_tournament, roulette_wheel
from moop.sharing import DistanceSpace, niche_counts, share, shared_fitness
from moop.survival import nsga2_survival

__all__ = [
    # Algorithms
    "nsga",
    "nsga2",
    # Selection strategies
    "crowded_tournament",
    "roulette_wheel",
    # Survival strategies
    "nsga2_survival",
    # Genetic operators
    "lift",
    "evaluate_population",
    "random_solutions",
    "make_children",
    "arithmetic_crossover",
    "one_point_crossover",
    "gaussian_mutation",
    # Primitives
    "dominates",
    "dominates_matrix",
    "non_dominated_fronts",
    "non_dominated_sort",
    "fronts_from_ranks",
    "crowding_distance",
    # Fitness sharing
    "DistanceSpace",
    "share",
    "niche_counts",
    "shared_fitness",
    # Problems
    "FunctionProblem",
    "get_problem",
    "squares_problem",
    "ratio_problem",
    "validate_problem",
    # Registry system
    "SelectionRegistry",
    "SurvivalRegistry",
    "list_selections",
    "list_survivals",
    # Data structures
    "Population",
    "Solution",
    # Result types
    "NSGAResult",
    "NSGA2Result",
    # Output
    "write_population",
    "read_population",
]
