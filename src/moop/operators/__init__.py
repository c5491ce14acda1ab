"""Variation operators and population helpers.

This package provides:
- lift: lift per-solution functions to population level
- evaluate_population / random_solutions: evaluation and initialization
- arithmetic_crossover / one_point_crossover: two-child crossovers
- gaussian_mutation: in-place Gaussian perturbation with clamping
- make_children: selection + crossover + mutation for one generation
"""

from moop.operators.base import evaluate_population, lift, random_solutions
from moop.operators.crossover import Bounds, arithmetic_crossover, one_point_crossover
from moop.operators.mutation import gaussian_mutation
from moop.operators.offspring import make_children

__all__ = [
    "Bounds",
    "lift",
    "evaluate_population",
    "random_solutions",
    "arithmetic_crossover",
    "one_point_crossover",
    "gaussian_mutation",
    "make_children",
]
